"""Order destinations into a visiting sequence."""

from __future__ import annotations

import logging
from typing import Sequence

from ..core import Coordinate, LocationRecord, RoutePoint, RouteStrategy, RouteSummary
from ..core.exceptions import InvalidCoordinateError
from ..utils.geo import describe_coordinate, haversine_distance, is_valid_coordinate

logger = logging.getLogger(__name__)


class RouteBuilder:
    """Build routes from a start point using a selectable strategy.

    ``NEAREST_NEIGHBOR`` greedily chains to the closest unvisited destination
    and reports cumulative distance. ``DISTANCE_SORT`` ranks destinations by
    their direct distance from the start and reports that direct distance.
    Ties keep input order in both strategies.
    """

    def __init__(self, strategy: RouteStrategy | str = RouteStrategy.NEAREST_NEIGHBOR):
        self.strategy = RouteStrategy.parse(strategy)

    def build(self, start: Coordinate, destinations: Sequence[LocationRecord]) -> list[RoutePoint]:
        self._validate(start, destinations)
        if self.strategy is RouteStrategy.DISTANCE_SORT:
            route = self._distance_sort(start, destinations)
        else:
            route = self._nearest_neighbor(start, destinations)
        logger.debug("Built %s route with %s stop(s)", self.strategy.value, len(route))
        return route

    def summarize(self, start: Coordinate, route: Sequence[RoutePoint]) -> RouteSummary:
        """Return the stop count and the distance travelled along ``route``."""

        travelled = 0.0
        current: Coordinate = start
        for point in route:
            travelled += haversine_distance(current, point.location)
            current = point.location
        return RouteSummary(strategy=self.strategy, stop_count=len(route), travel_distance=travelled)

    def _nearest_neighbor(self, start: Coordinate, destinations: Sequence[LocationRecord]) -> list[RoutePoint]:
        unvisited = list(destinations)
        route: list[RoutePoint] = []
        current: Coordinate = start
        total_distance = 0.0

        while unvisited:
            nearest_index = 0
            shortest = haversine_distance(current, unvisited[0])
            for index in range(1, len(unvisited)):
                distance = haversine_distance(current, unvisited[index])
                if distance < shortest:
                    shortest = distance
                    nearest_index = index

            selected = unvisited.pop(nearest_index)
            total_distance += shortest
            route.append(RoutePoint(location=selected, order=len(route) + 1, distance=total_distance))
            current = selected

        return route

    def _distance_sort(self, start: Coordinate, destinations: Sequence[LocationRecord]) -> list[RoutePoint]:
        measured = [(haversine_distance(start, location), location) for location in destinations]
        # sorted() is stable, so equal distances keep their input order.
        measured = sorted(measured, key=lambda item: item[0])
        return [
            RoutePoint(location=location, order=order, distance=distance)
            for order, (distance, location) in enumerate(measured, start=1)
        ]

    @staticmethod
    def _validate(start: Coordinate, destinations: Sequence[LocationRecord]) -> None:
        if not is_valid_coordinate(start):
            raise InvalidCoordinateError(
                "Invalid start coordinate",
                details={"index": "start", **describe_coordinate(start)},
            )
        for index, location in enumerate(destinations):
            if not is_valid_coordinate(location):
                raise InvalidCoordinateError(
                    f"Invalid destination coordinate at position {index + 1}",
                    details={"index": index, **describe_coordinate(location)},
                )


def build_route(
    start: Coordinate,
    destinations: Sequence[LocationRecord],
    strategy: RouteStrategy | str = RouteStrategy.NEAREST_NEIGHBOR,
) -> list[RoutePoint]:
    """Order ``destinations`` from ``start`` using ``strategy``."""

    return RouteBuilder(strategy).build(start, destinations)
