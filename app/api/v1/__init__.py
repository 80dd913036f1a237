"""API v1: router aggregation for the projects service."""

from app.api.v1.router import api_router

__all__ = ["api_router"]
