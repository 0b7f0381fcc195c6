"""Export computed routes as CSV."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from ..core import LocationRecord, RoutePoint
from ..core.exceptions import ParseError
from ..utils import format_coordinate, format_distance

logger = logging.getLogger(__name__)

EXPORT_HEADER = ("No", "Latitude", "Longitude", "Jarak (km)")


def render_route_csv(points: Iterable[RoutePoint]) -> str:
    """Return the route as CSV text with one line per stop and no trailing newline."""

    lines = [",".join(EXPORT_HEADER)]
    for point in points:
        lines.append(
            ",".join(
                (
                    str(point.order),
                    format_coordinate(point.latitude),
                    format_coordinate(point.longitude),
                    format_distance(point.distance),
                )
            )
        )
    return "\n".join(lines)


def write_route_csv(points: Iterable[RoutePoint], output_path: Path | str) -> Path:
    output_path = Path(output_path)
    output_path.write_text(render_route_csv(points), encoding="utf-8")
    logger.info("Wrote route CSV to %s", output_path)
    return output_path


def read_route_csv(text: str) -> list[RoutePoint]:
    """Read a previously exported route back into :class:`RoutePoint` objects.

    Name and address are not part of the export and stay unset.
    """

    lines = text.strip().split("\n")
    if not lines or [cell.strip() for cell in lines[0].split(",")] != list(EXPORT_HEADER):
        raise ParseError("missing route header", line_number=1, content=lines[0] if lines else "")

    points: list[RoutePoint] = []
    for line_number, line in enumerate(lines[1:], start=2):
        cells = [cell.strip() for cell in line.split(",")]
        try:
            order, latitude, longitude, distance = cells
            point = RoutePoint(
                location=LocationRecord(latitude=float(latitude), longitude=float(longitude)),
                order=int(order),
                distance=float(distance),
            )
        except ValueError as exc:
            raise ParseError("invalid route row", line_number=line_number, content=line) from exc
        points.append(point)
    return points
