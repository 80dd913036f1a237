"""Pydantic request/response schemas for the API."""

from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from app.schemas.project import (
    ProjectConfigCreateRequest,
    ProjectCreateRequest,
    ProjectResponse,
)

__all__ = [
    "HealthResponse",
    "ProjectConfigCreateRequest",
    "ProjectCreateRequest",
    "ProjectResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
]
