from __future__ import annotations

import pytest

from route_planner.core import Coordinate, LocationRecord


@pytest.fixture()
def origin() -> Coordinate:
    return Coordinate(latitude=0.0, longitude=0.0)


@pytest.fixture()
def equator_locations() -> list[LocationRecord]:
    return [
        LocationRecord(latitude=0.0, longitude=0.0),
        LocationRecord(latitude=0.0, longitude=1.0),
        LocationRecord(latitude=0.0, longitude=2.0),
    ]
