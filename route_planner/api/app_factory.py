"""Flask application factory."""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from flask_cors import CORS
from redis import Redis
from rq import Queue
from werkzeug.exceptions import RequestEntityTooLarge

from ..config import APP_CONFIG, QUEUE_CONFIG, STORAGE_PATHS
from ..core import RouteStrategy
from .routes import api_bp

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    """Create the Flask application with the route API mounted under ``/api``."""

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = APP_CONFIG.max_upload_bytes
    app.json.sort_keys = False

    CORS(app)
    app.register_blueprint(api_bp, url_prefix="/api")
    STORAGE_PATHS.ensure()

    redis_connection = Redis.from_url(QUEUE_CONFIG.redis_url)
    app.extensions["rq"] = {
        "queue": Queue(
            name=QUEUE_CONFIG.queue_name,
            connection=redis_connection,
            default_timeout=QUEUE_CONFIG.default_timeout,
        ),
        "connection": redis_connection,
    }

    @app.errorhandler(RequestEntityTooLarge)
    def upload_too_large(exc: RequestEntityTooLarge):
        message = f"Upload exceeds the {APP_CONFIG.max_csv_size_mb} MB limit for destination CSVs"
        return jsonify({"error": message}), 413

    @app.get("/health")
    def health_check() -> dict[str, object]:
        return {
            "status": "healthy",
            "queue": QUEUE_CONFIG.queue_name,
            "strategies": [strategy.value for strategy in RouteStrategy],
        }

    logger.info("Route planner API ready (queue %s)", QUEUE_CONFIG.queue_name)
    return app
