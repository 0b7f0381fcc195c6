"""Pipeline exports."""

from .route_pipeline import RoutePipeline

__all__ = ["RoutePipeline"]
