"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
Project graphs are ORM objects owned by infrastructure; the application layer
only passes them between ports and reads attributes off them, so they are
typed as Any here.
"""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Any, Protocol


# Project repository interface
class IProjectRepository(Protocol):
    """Protocol for project repository (DIP)."""

    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Scope one atomic unit of work (savepoint when already in a transaction)."""

    async def create(self, obj: Any) -> Any:
        """Insert a project with its cascaded configuration graph."""

    async def add_permissions(self, permissions: list[Any]) -> None:
        """Insert permission rows with their parent edges."""

    async def get_full_by_id(self, project_id: str, *, refresh: bool = False) -> Any | None:
        """Return project with its fully loaded configuration graph, or None."""

    async def count_users(self, project_id: str) -> int:
        """Return number of users of project."""


# Project user repository interface
class IProjectUserRepository(Protocol):
    """Protocol for project user repository (DIP)."""

    async def get(self, project_id: str, project_user_id: str) -> Any | None:
        """Return the user, or None."""
