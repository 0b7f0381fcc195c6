"""Processing pipeline orchestrator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from ..config import STORAGE_PATHS
from ..core import Coordinate, JobSummary, RouteStrategy
from ..services import CSVIngestor, KmzExporter, RouteBuilder, write_route_csv
from ..utils.io import ensure_directory, safe_filename

logger = logging.getLogger(__name__)

ROUTE_CSV_NAME = "route.csv"
ROUTE_KMZ_NAME = "route.kmz"


@dataclass(slots=True)
class RoutePipeline:
    """Turn an uploaded destination CSV into route artifacts."""

    csv_ingestor: CSVIngestor
    kmz_exporter: KmzExporter
    output_root: Path = field(default_factory=lambda: STORAGE_PATHS.outputs)

    def run(
        self,
        *,
        csv_path: Path | str,
        start: Coordinate,
        strategy: RouteStrategy | str = RouteStrategy.NEAREST_NEIGHBOR,
        job_id: str,
    ) -> JobSummary:
        logger.info("Starting route pipeline for job %s", job_id)
        created_at = datetime.now(timezone.utc)

        destinations = self.csv_ingestor.load(csv_path)
        builder = RouteBuilder(strategy)
        route = builder.build(start, destinations)
        summary = builder.summarize(start, route)

        output_dir = ensure_directory(Path(self.output_root) / safe_filename(job_id))
        csv_file = write_route_csv(route, output_dir / ROUTE_CSV_NAME)
        kmz_file = self.kmz_exporter.export(start, route, output_dir / ROUTE_KMZ_NAME)

        completed_at = datetime.now(timezone.utc)
        logger.info(
            "Job %s finished; %s stop(s), %.3f km travelled",
            job_id,
            summary.stop_count,
            summary.travel_distance,
        )

        return JobSummary(
            job_id=job_id,
            created_at=created_at,
            completed_at=completed_at,
            generated_files=[csv_file.name, kmz_file.name],
            summary=summary,
        )

    @classmethod
    def default(cls) -> "RoutePipeline":
        return cls(csv_ingestor=CSVIngestor(), kmz_exporter=KmzExporter())
