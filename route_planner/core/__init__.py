"""Core domain primitives for the route planner."""

from .models import (
    Coordinate,
    JobSummary,
    LocationRecord,
    RoutePoint,
    RouteStrategy,
    RouteSummary,
)
from .exceptions import InvalidCoordinateError, ParseError, RoutePlannerError

__all__ = [
    "Coordinate",
    "JobSummary",
    "LocationRecord",
    "RoutePoint",
    "RouteStrategy",
    "RouteSummary",
    "InvalidCoordinateError",
    "ParseError",
    "RoutePlannerError",
]
