"""Generate KMZ map files from computed routes."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable
from zipfile import ZipFile, ZIP_DEFLATED

from ..core import Coordinate, RoutePoint
from ..utils import format_coordinate, format_distance

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class KmzExporter:
    """Create KMZ archives showing the start, the numbered stops and the path."""

    schema_id: str = "route_planner_schema"
    document_name: str = "Route Planner"

    def export(self, start: Coordinate, route: Iterable[RoutePoint], output_path: Path | str) -> Path:
        output_path = Path(output_path)
        kml_content = self._build_kml(start, list(route))
        with ZipFile(output_path, "w", compression=ZIP_DEFLATED) as archive:
            archive.writestr("doc.kml", kml_content)
        logger.info("Wrote route map to %s", output_path)
        return output_path

    def _build_kml(self, start: Coordinate, route: list[RoutePoint]) -> bytes:
        kml = ET.Element("kml", xmlns="http://www.opengis.net/kml/2.2")
        document = ET.SubElement(kml, "Document")
        ET.SubElement(document, "name").text = self.document_name
        schema = ET.SubElement(document, "Schema", id=self.schema_id, name=self.document_name)

        fields = ["Order", "Name", "Address", "LAT", "LONG", "Jarak (km)"]
        for name in fields:
            ET.SubElement(schema, "SimpleField", type="string", name=name)

        start_placemark = ET.SubElement(document, "Placemark")
        ET.SubElement(start_placemark, "name").text = "Start"
        self._add_point(start_placemark, start.latitude, start.longitude)

        for point in route:
            placemark = ET.SubElement(document, "Placemark")
            label = f"{point.order}. {point.name}" if point.name else str(point.order)
            ET.SubElement(placemark, "name").text = label
            if point.address:
                ET.SubElement(placemark, "description").text = point.address

            extended_data = ET.SubElement(placemark, "ExtendedData")
            schema_data = ET.SubElement(extended_data, "SchemaData", schemaUrl=f"#{self.schema_id}")

            def add_field(key: str, value: str | None) -> None:
                element = ET.SubElement(schema_data, "SimpleData", name=key)
                element.text = value or ""

            add_field("Order", str(point.order))
            add_field("Name", point.name)
            add_field("Address", point.address)
            add_field("LAT", format_coordinate(point.latitude))
            add_field("LONG", format_coordinate(point.longitude))
            add_field("Jarak (km)", format_distance(point.distance))

            self._add_point(placemark, point.latitude, point.longitude)

        if route:
            path = ET.SubElement(document, "Placemark")
            ET.SubElement(path, "name").text = "Route"
            line = ET.SubElement(path, "LineString")
            ET.SubElement(line, "tessellate").text = "1"
            vertices = [(start.latitude, start.longitude)]
            vertices.extend((point.latitude, point.longitude) for point in route)
            ET.SubElement(line, "coordinates").text = " ".join(
                f"{longitude},{latitude},0" for latitude, longitude in vertices
            )

        return ET.tostring(kml, encoding="utf-8", xml_declaration=True)

    @staticmethod
    def _add_point(placemark: ET.Element, latitude: float, longitude: float) -> None:
        point = ET.SubElement(placemark, "Point")
        ET.SubElement(point, "coordinates").text = f"{longitude},{latitude},0"
