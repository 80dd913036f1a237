"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.project_repo import (
    ProjectRepository,
    full_project_options,
)
from app.infrastructure.persistence.repositories.project_user_repo import (
    ProjectUserRepository,
)

__all__ = [
    "BaseRepository",
    "ProjectRepository",
    "ProjectUserRepository",
    "full_project_options",
]
