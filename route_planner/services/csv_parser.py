"""Parse destination CSV text into :class:`LocationRecord` objects.

Each line has the form ``latitude,longitude[,name[,address]]`` with no
header row. Parsing is all-or-nothing: the first malformed line raises
:class:`ParseError` and nothing is returned.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from ..config import APP_CONFIG
from ..core import LocationRecord
from ..core.exceptions import ParseError
from ..utils import is_valid_coordinate, read_text

logger = logging.getLogger(__name__)

INVALID_VALUES = "invalid coordinate values"
OUT_OF_RANGE = "coordinate out of range"

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_locations(text: str) -> list[LocationRecord]:
    """Parse ``text`` into location records."""

    content = text.strip()
    if not content:
        return []

    locations: list[LocationRecord] = []
    for line_number, line in enumerate(content.split("\n"), start=1):
        locations.append(_parse_line(line, line_number))

    logger.debug("Parsed %s location(s) from CSV text", len(locations))
    return locations


def _parse_line(line: str, line_number: int) -> LocationRecord:
    parts = [part.strip() for part in line.split(",")]

    latitude = _parse_float(parts[0])
    longitude = _parse_float(parts[1]) if len(parts) > 1 else None
    if latitude is None or longitude is None:
        raise ParseError(INVALID_VALUES, line_number=line_number, content=line)

    location = LocationRecord(
        latitude=latitude,
        longitude=longitude,
        name=parts[2] if len(parts) > 2 else None,
        address=parts[3] if len(parts) > 3 else None,
    )
    if not is_valid_coordinate(location):
        raise ParseError(OUT_OF_RANGE, line_number=line_number, content=line)
    return location


def _parse_float(value: str) -> float | None:
    if not _DECIMAL_PATTERN.fullmatch(value):
        return None
    return float(value)


class CSVIngestor:
    """Load destination CSV files into :class:`LocationRecord` objects."""

    def __init__(self, *, encoding: str | None = None, max_bytes: int | None = None):
        self.encoding = encoding or APP_CONFIG.csv_encoding
        self.max_bytes = max_bytes if max_bytes is not None else APP_CONFIG.max_upload_bytes

    def load(self, path: Path | str) -> list[LocationRecord]:
        path = Path(path)
        text = read_text(path, encoding=self.encoding, max_bytes=self.max_bytes)
        locations = parse_locations(text)
        logger.info("Loaded %s destination(s) from %s", len(locations), path.name)
        return locations
