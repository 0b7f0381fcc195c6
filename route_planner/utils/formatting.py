"""Formatting helpers."""

from __future__ import annotations

from typing import Iterable

EXPORT_COORDINATE_PRECISION = 6
EXPORT_DISTANCE_PRECISION = 3
DISPLAY_COORDINATE_PRECISION = 4
DISPLAY_DISTANCE_PRECISION = 2

TABLE_HEADERS = ("No.", "Latitude", "Longitude", "Jarak (km)")


def format_coordinate(value: float, precision: int = EXPORT_COORDINATE_PRECISION) -> str:
    """Return ``value`` with a fixed number of decimals."""

    return f"{value:.{precision}f}"


def format_distance(value: float, precision: int = EXPORT_DISTANCE_PRECISION) -> str:
    """Return a kilometer distance with a fixed number of decimals."""

    return f"{value:.{precision}f}"


def format_route_table(points: Iterable) -> str:
    """Render route points as a plain-text table using display precision."""

    rows = [
        (
            str(point.order),
            format_coordinate(point.latitude, DISPLAY_COORDINATE_PRECISION),
            format_coordinate(point.longitude, DISPLAY_COORDINATE_PRECISION),
            format_distance(point.distance, DISPLAY_DISTANCE_PRECISION),
            point.name or "",
        )
        for point in points
    ]
    headers = (*TABLE_HEADERS, "Name")
    widths = [len(header) for header in headers]
    for row in rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

    def render(cells) -> str:
        # Numeric columns are right aligned, the name column left aligned.
        parts = [cell.rjust(width) for cell, width in zip(cells[:-1], widths[:-1])]
        parts.append(cells[-1].ljust(widths[-1]))
        return "  ".join(parts).rstrip()

    lines = [render(headers), render(tuple("-" * width for width in widths))]
    lines.extend(render(row) for row in rows)
    return "\n".join(lines)
