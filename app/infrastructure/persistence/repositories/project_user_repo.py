"""Project user repository. Owner users live under the internal project."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.models import ProjectUser
from app.infrastructure.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ProjectUserRepository(BaseRepository[ProjectUser]):
    """Project user repository. Keyed by (project_id, project_user_id)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, ProjectUser)

    async def get(self, project_id: str, project_user_id: str) -> ProjectUser | None:
        result = await self.db.execute(
            select(ProjectUser).where(
                ProjectUser.project_id == project_id,
                ProjectUser.project_user_id == project_user_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_for_update(
        self, project_id: str, project_user_id: str
    ) -> ProjectUser | None:
        """Return the user row locked until the end of the transaction, or None.

        Concurrent read-modify-write of server_metadata for the same user
        serializes on this lock.
        """
        result = await self.db.execute(
            select(ProjectUser)
            .where(
                ProjectUser.project_id == project_id,
                ProjectUser.project_user_id == project_user_id,
            )
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def update_server_metadata(
        self, user: ProjectUser, server_metadata: dict[str, Any]
    ) -> ProjectUser:
        """Replace server_metadata on an attached user row and flush."""
        user.server_metadata = server_metadata
        return await self.update(user)

    async def _on_after_update(self, obj: ProjectUser) -> None:
        logger.debug(
            "Project user metadata updated: project_id=%s user_id=%s",
            obj.project_id,
            obj.project_user_id,
        )
