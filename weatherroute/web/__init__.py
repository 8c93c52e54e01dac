"""HTTP API for the weather route planner."""

from .app import create_app

__all__ = ["create_app"]
