"""Command line entry point for planning a route from a destination CSV."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from .config import APP_CONFIG
from .core import Coordinate, RouteStrategy
from .core.exceptions import RoutePlannerError
from .sample_data import SAMPLE_DESTINATIONS
from .services import CSVIngestor, KmzExporter, RouteBuilder, write_route_csv
from .utils import format_distance, format_route_table

LOGGER = logging.getLogger(__name__)


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Order destinations into a visiting route.")
    parser.add_argument("csv", nargs="?", help="Destination CSV (latitude,longitude[,name[,address]] per line)")
    parser.add_argument("--sample", action="store_true", help="Use the built-in Jakarta sample destinations")
    parser.add_argument("--start-lat", type=float, default=APP_CONFIG.default_start_lat, help="Start latitude")
    parser.add_argument("--start-lng", type=float, default=APP_CONFIG.default_start_lng, help="Start longitude")
    parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in RouteStrategy],
        default=RouteStrategy.parse(APP_CONFIG.default_strategy).value,
        help="Route ordering strategy",
    )
    parser.add_argument("--encoding", default=APP_CONFIG.csv_encoding, help="CSV encoding, or 'auto' to detect")
    parser.add_argument("--output", help="Write the route as CSV to this path")
    parser.add_argument("--kmz", help="Write the route map as KMZ to this path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    if bool(args.csv) == args.sample:
        parser.error("provide either a CSV file or --sample")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    start = Coordinate(latitude=args.start_lat, longitude=args.start_lng)
    builder = RouteBuilder(args.strategy)

    try:
        if args.sample:
            destinations = list(SAMPLE_DESTINATIONS)
        else:
            destinations = CSVIngestor(encoding=args.encoding).load(args.csv)
        route = builder.build(start, destinations)
        summary = builder.summarize(start, route)
    except RoutePlannerError as exc:
        LOGGER.error("%s", exc)
        return 1

    print(format_route_table(route))
    print()
    print(f"Strategy: {summary.strategy.value}")
    print(f"Stops: {summary.stop_count}")
    print(f"Distance travelled: {format_distance(summary.travel_distance, 2)} km")

    if args.output:
        write_route_csv(route, args.output)
    if args.kmz:
        KmzExporter().export(start, route, args.kmz)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
