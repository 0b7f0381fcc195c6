"""Runtime configuration for the route planner."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StoragePaths:
    """Collection of filesystem paths used by the application."""

    uploads: Path
    outputs: Path

    def ensure(self) -> None:
        """Ensure the backing directories exist."""
        self.uploads.mkdir(parents=True, exist_ok=True)
        self.outputs.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class AppConfig:
    """High level runtime configuration values."""

    max_csv_size_mb: int = 5
    allowed_csv_extensions: tuple[str, ...] = ("csv", "txt")
    csv_encoding: str = "utf-8-sig"
    default_strategy: str = "nearest_neighbor"
    # Jakarta
    default_start_lat: float = -6.2088
    default_start_lng: float = 106.8456

    @property
    def max_upload_bytes(self) -> int:
        """Maximum upload payload in bytes."""
        return self.max_csv_size_mb * 1024 * 1024


@dataclass(frozen=True)
class QueueConfig:
    """Configuration for the Redis-backed task queue."""

    redis_url: str = "redis://localhost:6379/0"
    queue_name: str = "route-planner"
    default_timeout: int = 60 * 5  # seconds


APP_CONFIG = AppConfig(
    max_csv_size_mb=int(os.environ.get("ROUTE_PLANNER_MAX_CSV_MB", AppConfig.max_csv_size_mb)),
    csv_encoding=os.environ.get("ROUTE_PLANNER_CSV_ENCODING", AppConfig.csv_encoding),
    default_strategy=os.environ.get("ROUTE_PLANNER_STRATEGY", AppConfig.default_strategy),
    default_start_lat=float(os.environ.get("ROUTE_PLANNER_START_LAT", AppConfig.default_start_lat)),
    default_start_lng=float(os.environ.get("ROUTE_PLANNER_START_LNG", AppConfig.default_start_lng)),
)
STORAGE_PATHS = StoragePaths(
    uploads=Path(os.environ.get("ROUTE_PLANNER_UPLOADS", "uploads")),
    outputs=Path(os.environ.get("ROUTE_PLANNER_OUTPUTS", "outputs")),
)
QUEUE_CONFIG = QueueConfig(
    redis_url=os.environ.get("ROUTE_PLANNER_REDIS_URL", QueueConfig.redis_url),
    queue_name=os.environ.get("ROUTE_PLANNER_QUEUE", QueueConfig.queue_name),
    default_timeout=int(
        os.environ.get("ROUTE_PLANNER_QUEUE_TIMEOUT", QueueConfig.default_timeout)
    ),
)
