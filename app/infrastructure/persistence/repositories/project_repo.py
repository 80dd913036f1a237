"""Project repository: full configuration graph loading and project inserts."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Load, selectinload

from app.infrastructure.persistence.models import (
    AuthMethodConfig,
    ConnectedAccountConfig,
    EmailServiceConfig,
    OAuthProviderConfig,
    Permission,
    PermissionEdge,
    Project,
    ProjectConfig,
    ProjectUser,
)
from app.infrastructure.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def _config() -> Load:
    return selectinload(Project.config)


def _with_variants(load: Load) -> list[Load]:
    """Expand an OAuthProviderConfig load path to both of its variant rows."""
    return [
        load.selectinload(OAuthProviderConfig.proxied_oauth_config),
        load.selectinload(OAuthProviderConfig.standard_oauth_config),
    ]


def full_project_options() -> list[Load]:
    """Eager-load options for the complete configuration graph of a project.

    Everything ConfigReader touches is loaded up front; async sessions cannot
    lazy-load on attribute access.
    """
    config = _config()
    auth_methods = config.selectinload(ProjectConfig.auth_method_configs)
    email = config.selectinload(ProjectConfig.email_service_config)
    return [
        config.selectinload(ProjectConfig.domains),
        *_with_variants(config.selectinload(ProjectConfig.oauth_provider_configs)),
        email.selectinload(EmailServiceConfig.proxied_email_service_config),
        email.selectinload(EmailServiceConfig.standard_email_service_config),
        config.selectinload(ProjectConfig.permissions)
        .selectinload(Permission.parent_edges)
        .selectinload(PermissionEdge.parent_permission),
        *_with_variants(auth_methods.selectinload(AuthMethodConfig.oauth_provider_config)),
        auth_methods.selectinload(AuthMethodConfig.otp_config),
        auth_methods.selectinload(AuthMethodConfig.password_config),
        auth_methods.selectinload(AuthMethodConfig.passkey_config),
        *_with_variants(
            config.selectinload(ProjectConfig.connected_account_configs).selectinload(
                ConnectedAccountConfig.oauth_provider_config
            )
        ),
    ]


class ProjectRepository(BaseRepository[Project]):
    """Project repository. Loads the full config graph; counts project users."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Project)

    async def get_full_by_id(
        self, project_id: str, *, refresh: bool = False
    ) -> Project | None:
        """Return project with its whole configuration graph, or None.

        refresh=True overwrites instances already in the session identity map
        with database state (used to re-read right after provisioning).
        """
        stmt = (
            select(Project)
            .where(Project.id == project_id)
            .options(*full_project_options())
        )
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def add_permissions(self, permissions: list[Permission]) -> None:
        """Insert permission rows (with their parent edges) for a created project."""
        self.db.add_all(permissions)
        await self.db.flush()

    async def count_users(self, project_id: str) -> int:
        """Return the number of users belonging to project_id."""
        result = await self.db.execute(
            select(func.count())
            .select_from(ProjectUser)
            .where(ProjectUser.project_id == project_id)
        )
        return int(result.scalar_one())

    async def exists(self, project_id: str) -> bool:
        """Return whether a project row with project_id exists."""
        result = await self.db.execute(
            select(Project.id).where(Project.id == project_id)
        )
        return result.scalar_one_or_none() is not None

    async def _on_after_create(self, obj: Project) -> None:
        logger.info("Project created: id=%s config_id=%s", obj.id, obj.config_id)
