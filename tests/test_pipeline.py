from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from route_planner import tasks
from route_planner.core import Coordinate, ParseError, RouteStrategy
from route_planner.pipelines import RoutePipeline
from route_planner.services import CSVIngestor, KmzExporter, read_route_csv


@pytest.fixture()
def destinations_csv(tmp_path: Path) -> Path:
    csv_path = tmp_path / "destinations.csv"
    csv_path.write_text("0,2,Far\n0,1,Near\n", encoding="utf-8")
    return csv_path


@pytest.fixture()
def pipeline(tmp_path: Path) -> RoutePipeline:
    return RoutePipeline(
        csv_ingestor=CSVIngestor(),
        kmz_exporter=KmzExporter(),
        output_root=tmp_path / "outputs",
    )


def test_pipeline_writes_route_artifacts(pipeline, destinations_csv, tmp_path: Path):
    summary = pipeline.run(
        csv_path=destinations_csv,
        start=Coordinate(0.0, 0.0),
        strategy=RouteStrategy.NEAREST_NEIGHBOR,
        job_id="job-1",
    )

    output_dir = tmp_path / "outputs" / "job-1"
    assert summary.generated_files == ["route.csv", "route.kmz"]
    assert summary.summary.stop_count == 2
    assert summary.completed_at >= summary.created_at

    route = read_route_csv((output_dir / "route.csv").read_text(encoding="utf-8"))
    assert [(point.latitude, point.longitude) for point in route] == [(0.0, 1.0), (0.0, 2.0)]

    with zipfile.ZipFile(output_dir / "route.kmz") as archive:
        assert "Near" in archive.read("doc.kml").decode("utf-8")

    payload = summary.as_dict()
    assert payload["job_id"] == "job-1"
    assert payload["route"]["strategy"] == "nearest_neighbor"


def test_pipeline_aborts_on_parse_error(pipeline, tmp_path: Path):
    csv_path = tmp_path / "broken.csv"
    csv_path.write_text("0,1\nabc,2\n")

    with pytest.raises(ParseError):
        pipeline.run(csv_path=csv_path, start=Coordinate(0.0, 0.0), job_id="job-2")

    assert not (tmp_path / "outputs" / "job-2").exists()


def test_process_job_returns_summary(monkeypatch, pipeline, destinations_csv):
    monkeypatch.setattr(tasks, "get_current_job", lambda: None)
    monkeypatch.setattr(tasks.RoutePipeline, "default", classmethod(lambda cls: pipeline))

    result = tasks.process_job(
        job_id="job-3",
        csv_path=str(destinations_csv),
        start_lat=0.0,
        start_lng=0.0,
        strategy="distance_sort",
    )

    assert result["route"] == {"strategy": "distance_sort", "stop_count": 2, "travel_distance": pytest.approx(222.38985328911747)}


def test_process_job_records_error_in_job_meta(monkeypatch, pipeline, tmp_path: Path):
    class FakeJob:
        def __init__(self):
            self.meta: dict = {}
            self.saves = 0

        def save_meta(self):
            self.saves += 1

    job = FakeJob()
    monkeypatch.setattr(tasks, "get_current_job", lambda: job)
    monkeypatch.setattr(tasks.RoutePipeline, "default", classmethod(lambda cls: pipeline))
    csv_path = tmp_path / "bad.csv"
    csv_path.write_text("91,0\n")

    with pytest.raises(ParseError):
        tasks.process_job(job_id="job-4", csv_path=str(csv_path), start_lat=0.0, start_lng=0.0, strategy="nearest_neighbor")

    assert job.meta["progress"] == 0
    assert job.meta["error"]["message"] == "Failed to parse CSV: coordinate out of range (line 1)"
