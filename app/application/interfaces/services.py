"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.project import (
        OAuthProviderCreate,
        ProjectConfigCreate,
        ProjectCreate,
    )
    from app.domain.value_objects.core import EmailVariant, OAuthVariant


# Project graph builder interface
class IProjectGraphBuilder(Protocol):
    """Protocol for expanding a creation request into a transient project graph."""

    def build_project(
        self,
        project_id: str,
        data: ProjectCreate,
        oauth_providers: Sequence[tuple[OAuthProviderCreate, OAuthVariant]],
        email: EmailVariant,
    ) -> Any:
        """Return Project + ProjectConfig with domains, OAuth providers and email service."""

    def attach_auth_methods(self, config: Any, requested: ProjectConfigCreate) -> None:
        """Add auth method and connected account rows to config."""


# Team permission seeder interface
class ITeamPermissionSeeder(Protocol):
    """Protocol for building the default team permissions of a new project."""

    def build(self, project_id: str, project_config_id: str) -> list[Any]:
        """Return the default permission rows (with parent edges)."""


# Owner linker interface
class IOwnerLinker(Protocol):
    """Protocol for registering a new project with its owner users."""

    async def link(self, owner_ids: Sequence[str], project_id: str) -> Any:
        """Append project_id to each owner's managed projects; missing owners are reported, not raised."""
