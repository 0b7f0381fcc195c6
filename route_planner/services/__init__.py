"""Service layer exports."""

from .csv_parser import CSVIngestor, parse_locations
from .route_builder import RouteBuilder, build_route
from .route_exporter import read_route_csv, render_route_csv, write_route_csv
from .kmz_exporter import KmzExporter

__all__ = [
    "CSVIngestor",
    "parse_locations",
    "RouteBuilder",
    "build_route",
    "read_route_csv",
    "render_route_csv",
    "write_route_csv",
    "KmzExporter",
]
