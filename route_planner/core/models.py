"""Domain models used throughout the route planner."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Mapping, Sequence


class RouteStrategy(str, Enum):
    """Selectable strategies for ordering destinations."""

    NEAREST_NEIGHBOR = "nearest_neighbor"
    DISTANCE_SORT = "distance_sort"

    @classmethod
    def parse(cls, value: "RouteStrategy | str | None", default: "RouteStrategy | None" = None) -> "RouteStrategy":
        if value is None or value == "":
            return default or cls.NEAREST_NEIGHBOR
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            choices = ", ".join(strategy.value for strategy in cls)
            raise ValueError(f"Unknown route strategy '{value}' (expected one of: {choices})") from None


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    @classmethod
    def from_mapping(cls, payload: Mapping[str, object]) -> "Coordinate":
        # Values are taken as-is; validation happens where distances are computed.
        return cls(latitude=payload.get("lat"), longitude=payload.get("lng"))  # type: ignore[arg-type]

    def as_dict(self) -> dict:
        return {"lat": self.latitude, "lng": self.longitude}


@dataclass(frozen=True, slots=True)
class LocationRecord(Coordinate):
    """A destination with an optional name and address.

    ``None`` means the field was not provided; an empty string means it was
    provided empty.
    """

    name: str | None = None
    address: str | None = None

    @classmethod
    def from_mapping(cls, payload: Mapping[str, object]) -> "LocationRecord":
        name = payload.get("name")
        address = payload.get("address")
        return cls(
            latitude=payload.get("lat"),  # type: ignore[arg-type]
            longitude=payload.get("lng"),  # type: ignore[arg-type]
            name=None if name is None else str(name),
            address=None if address is None else str(address),
        )

    def as_dict(self) -> dict:
        payload = {"lat": self.latitude, "lng": self.longitude}
        if self.name is not None:
            payload["name"] = self.name
        if self.address is not None:
            payload["address"] = self.address
        return payload


@dataclass(frozen=True, slots=True)
class RoutePoint:
    """A destination placed in a computed route.

    ``distance`` is cumulative for nearest-neighbor routes and the direct
    distance from the start for distance-sorted routes, in kilometers.
    """

    location: LocationRecord
    order: int
    distance: float

    @property
    def latitude(self) -> float:
        return self.location.latitude

    @property
    def longitude(self) -> float:
        return self.location.longitude

    @property
    def name(self) -> str | None:
        return self.location.name

    @property
    def address(self) -> str | None:
        return self.location.address

    def as_dict(self) -> dict:
        return {"order": self.order, **self.location.as_dict(), "distance": self.distance}


@dataclass(frozen=True, slots=True)
class RouteSummary:
    """Aggregate figures describing a computed route."""

    strategy: RouteStrategy
    stop_count: int
    travel_distance: float

    def as_dict(self) -> dict:
        return {
            "strategy": self.strategy.value,
            "stop_count": self.stop_count,
            "travel_distance": self.travel_distance,
        }


@dataclass(slots=True)
class JobSummary:
    """Information returned to API callers after job completion."""

    job_id: str
    created_at: datetime
    completed_at: datetime
    generated_files: Sequence[str]
    summary: RouteSummary

    def as_dict(self) -> dict:
        return {
            "job_id": self.job_id,
            "created_at": self.created_at.isoformat(),
            "completed_at": self.completed_at.isoformat(),
            "generated_files": list(self.generated_files),
            "route": self.summary.as_dict(),
        }
