"""HTTP API for the route planner."""

from .app_factory import create_app

__all__ = ["create_app"]
