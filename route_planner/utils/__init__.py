"""Utility helpers for the route planner."""

from .geo import EARTH_RADIUS_KM, haversine_distance, is_valid_coordinate
from .formatting import format_coordinate, format_distance, format_route_table
from .io import detect_encoding, ensure_directory, read_text, safe_filename

__all__ = [
    "EARTH_RADIUS_KM",
    "haversine_distance",
    "is_valid_coordinate",
    "format_coordinate",
    "format_distance",
    "format_route_table",
    "detect_encoding",
    "ensure_directory",
    "read_text",
    "safe_filename",
]
