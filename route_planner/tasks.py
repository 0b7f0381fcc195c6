"""RQ task definitions for asynchronous route processing."""

from __future__ import annotations

from pathlib import Path

from rq import get_current_job

from .core import Coordinate
from .core.exceptions import RoutePlannerError
from .pipelines import RoutePipeline


def process_job(
    *,
    job_id: str,
    csv_path: str,
    start_lat: float,
    start_lng: float,
    strategy: str,
) -> dict:
    """Build a route for the uploaded CSV and write its artifacts."""

    job = get_current_job()
    if job:
        job.meta["progress"] = 0
        job.save_meta()

    pipeline = RoutePipeline.default()

    try:
        summary = pipeline.run(
            csv_path=Path(csv_path),
            start=Coordinate(latitude=start_lat, longitude=start_lng),
            strategy=strategy,
            job_id=job_id,
        )
    except RoutePlannerError as exc:
        if job:
            job.meta["error"] = exc.as_dict()
            job.save_meta()
        raise

    if job:
        job.meta["progress"] = 100
        job.save_meta()

    return summary.as_dict()
