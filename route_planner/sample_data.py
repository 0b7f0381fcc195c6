"""Sample start point and destinations around Jakarta."""

from __future__ import annotations

from .config import APP_CONFIG
from .core import Coordinate, LocationRecord

SAMPLE_START = Coordinate(latitude=-6.2088, longitude=106.8456)

SAMPLE_DESTINATIONS: tuple[LocationRecord, ...] = (
    LocationRecord(latitude=-6.2088, longitude=106.8456),
    LocationRecord(latitude=-6.1751, longitude=106.8650),
    LocationRecord(latitude=-6.2382, longitude=106.8255),
    LocationRecord(latitude=-6.1935, longitude=106.8228),
    LocationRecord(latitude=-6.2241, longitude=106.8451),
)

SAMPLE_CSV = "-6.1751,106.8650\n-6.2382,106.8255\n-6.1935,106.8228\n"


def default_start() -> Coordinate:
    """Return the configured default start point."""

    return Coordinate(latitude=APP_CONFIG.default_start_lat, longitude=APP_CONFIG.default_start_lng)
