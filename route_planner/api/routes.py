"""REST API blueprint."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Mapping

from flask import Blueprint, Response, current_app, jsonify, request, send_from_directory, url_for
from rq.exceptions import NoSuchJobError
from rq.job import Job

from ..config import APP_CONFIG, STORAGE_PATHS
from ..core import Coordinate, LocationRecord, RoutePoint, RouteStrategy
from ..core.exceptions import InvalidCoordinateError, RoutePlannerError
from ..sample_data import SAMPLE_CSV, SAMPLE_DESTINATIONS, default_start
from ..services import RouteBuilder, parse_locations, render_route_csv
from ..utils.geo import is_valid_coordinate
from ..utils.io import ensure_directory, safe_filename

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(RoutePlannerError)
def handle_route_error(exc: RoutePlannerError):
    return jsonify({"error": exc.as_dict()}), 400


@api_bp.get("/sample")
def sample():
    return jsonify(
        {
            "start": default_start().as_dict(),
            "destinations": [location.as_dict() for location in SAMPLE_DESTINATIONS],
        }
    )


@api_bp.get("/sample.csv")
def sample_csv():
    """Download a destination CSV in the accepted upload format."""

    return Response(
        SAMPLE_CSV,
        mimetype="text/csv",
        headers={"Content-Disposition": "attachment; filename=sample.csv"},
    )


@api_bp.post("/routes")
def compute_route():
    """Compute a route synchronously from a JSON body."""

    builder, start, route = _build_from_payload(request.get_json(silent=True))
    summary = builder.summarize(start, route)
    return jsonify(
        {
            "start": start.as_dict(),
            "route": [point.as_dict() for point in route],
            "summary": summary.as_dict(),
        }
    )


@api_bp.post("/routes/export")
def export_route():
    """Compute a route and return it as a CSV download."""

    _, _, route = _build_from_payload(request.get_json(silent=True))
    return Response(
        render_route_csv(route),
        mimetype="text/csv",
        headers={"Content-Disposition": "attachment; filename=route.csv"},
    )


@api_bp.post("/jobs")
def create_job():
    """Create a route processing job from an uploaded CSV file."""

    uploaded = request.files.get("csv_file")
    if uploaded is None or not uploaded.filename:
        return jsonify({"error": "csv_file field is required"}), 400
    if not _allowed(uploaded.filename, APP_CONFIG.allowed_csv_extensions):
        return jsonify({"error": f"Invalid CSV file: {uploaded.filename}"}), 400

    fallback = default_start()
    try:
        start = Coordinate(
            latitude=float(request.form.get("start_lat", fallback.latitude)),
            longitude=float(request.form.get("start_lng", fallback.longitude)),
        )
        strategy = RouteStrategy.parse(request.form.get("strategy"), RouteStrategy.parse(APP_CONFIG.default_strategy))
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    if not is_valid_coordinate(start):
        raise InvalidCoordinateError("Invalid start coordinate", details={"index": "start"})

    job_id = str(uuid.uuid4())
    job_dir = ensure_directory(STORAGE_PATHS.uploads / job_id)
    target = job_dir / (safe_filename(uploaded.filename) or "destinations.csv")
    uploaded.save(target)

    created_at = datetime.now(timezone.utc).isoformat()
    job = _queue().enqueue(
        "route_planner.tasks.process_job",
        kwargs={
            "job_id": job_id,
            "csv_path": str(target),
            "start_lat": start.latitude,
            "start_lng": start.longitude,
            "strategy": strategy.value,
        },
        job_id=job_id,
        meta={"created_at": created_at},
    )

    response = {
        "job_id": job.id,
        "status": job.get_status(refresh=False),
        "created_at": created_at,
    }

    return jsonify(response), 202


@api_bp.get("/jobs/<job_id>")
def job_status(job_id: str):
    """Report job progress; finished jobs list download links for their artifacts."""

    try:
        job = Job.fetch(job_id, connection=_connection())
    except NoSuchJobError:
        return jsonify({"error": "Job not found"}), 404

    state = job.get_status(refresh=True)
    payload: dict[str, object] = {"job_id": job.id, "status": state, "created_at": job.meta.get("created_at")}

    if job.is_finished:
        result = job.result or {}
        payload["result"] = result
        payload["downloads"] = {
            name: url_for("api.job_file", job_id=job.id, filename=name)
            for name in result.get("generated_files", [])
        }
        return jsonify(payload), 200
    if job.is_failed:
        # Rejected input is recorded in meta by the task; anything else is a worker crash.
        rejected = job.meta.get("error")
        payload["error"] = rejected or job.exc_info
        return jsonify(payload), 422 if rejected else 500

    payload["progress"] = job.meta.get("progress", 0)
    return jsonify(payload), 200


@api_bp.get("/jobs/<job_id>/files/<path:filename>")
def job_file(job_id: str, filename: str):
    directory = (STORAGE_PATHS.outputs / safe_filename(job_id)).resolve()
    return send_from_directory(directory, filename, as_attachment=True)


def _build_from_payload(payload: object) -> tuple[RouteBuilder, Coordinate, list[RoutePoint]]:
    if not isinstance(payload, Mapping):
        raise RoutePlannerError("Request body must be a JSON object")

    start_payload = payload.get("start")
    if not isinstance(start_payload, Mapping):
        raise RoutePlannerError("Please set a starting point first")
    start = Coordinate.from_mapping(start_payload)

    try:
        strategy = RouteStrategy.parse(payload.get("strategy"), RouteStrategy.parse(APP_CONFIG.default_strategy))
    except ValueError as exc:
        raise RoutePlannerError(str(exc)) from exc

    if payload.get("csv") is not None:
        destinations = parse_locations(str(payload["csv"]))
    elif isinstance(payload.get("destinations"), list):
        entries = payload["destinations"]
        if not all(isinstance(entry, Mapping) for entry in entries):
            raise RoutePlannerError("Each destination must be an object with lat and lng")
        destinations = [LocationRecord.from_mapping(entry) for entry in entries]
    else:
        raise RoutePlannerError("Provide destinations as a list or as CSV text")

    builder = RouteBuilder(strategy)
    return builder, start, builder.build(start, destinations)


def _allowed(filename: str, extensions: tuple[str, ...]) -> bool:
    return "." in filename and filename.rsplit(".", 1)[1].lower() in extensions


def _queue():
    return current_app.extensions["rq"]["queue"]


def _connection():
    return current_app.extensions["rq"]["connection"]
