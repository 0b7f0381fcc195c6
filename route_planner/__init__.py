"""Top-level package for the route planner backend."""

from .api.app_factory import create_app
from .pipelines.route_pipeline import RoutePipeline

__all__ = ["create_app", "RoutePipeline"]
