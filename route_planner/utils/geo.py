"""Geospatial helpers."""

from __future__ import annotations

from math import atan2, cos, isnan, radians, sin, sqrt
from numbers import Real

from ..core.exceptions import InvalidCoordinateError


EARTH_RADIUS_KM = 6371


def _as_number(value: object) -> float | None:
    if not isinstance(value, Real) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (OverflowError, ValueError):
        return None
    if isnan(number):
        return None
    return number


def is_valid_coordinate(coordinate: object) -> bool:
    """Return ``True`` when ``coordinate`` holds numeric, in-range lat/lng values."""

    latitude = _as_number(getattr(coordinate, "latitude", None))
    longitude = _as_number(getattr(coordinate, "longitude", None))
    if latitude is None or longitude is None:
        return False
    return -90 <= latitude <= 90 and -180 <= longitude <= 180


def haversine_distance(a: object, b: object) -> float:
    """Return the great-circle distance between two coordinates in kilometers."""

    if not is_valid_coordinate(a) or not is_valid_coordinate(b):
        raise InvalidCoordinateError(
            "Invalid coordinates provided",
            details={"a": describe_coordinate(a), "b": describe_coordinate(b)},
        )

    phi1 = radians(a.latitude)  # type: ignore[attr-defined]
    phi2 = radians(b.latitude)  # type: ignore[attr-defined]
    delta_phi = radians(b.latitude - a.latitude)  # type: ignore[attr-defined]
    delta_lambda = radians(b.longitude - a.longitude)  # type: ignore[attr-defined]

    h = sin(delta_phi / 2) ** 2 + cos(phi1) * cos(phi2) * sin(delta_lambda / 2) ** 2
    h = min(h, 1.0)
    c = 2 * atan2(sqrt(h), sqrt(1 - h))

    return EARTH_RADIUS_KM * c


def describe_coordinate(coordinate: object) -> dict:
    return {
        "lat": repr(getattr(coordinate, "latitude", None)),
        "lng": repr(getattr(coordinate, "longitude", None)),
    }
