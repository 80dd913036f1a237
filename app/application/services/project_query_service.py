"""Read side: single project view and an owner's managed projects."""

from __future__ import annotations

from app.application.dtos.project import ProjectResult
from app.application.interfaces.repositories import (
    IProjectRepository,
    IProjectUserRepository,
)
from app.application.services.project_config_reader import ProjectConfigReader
from app.domain.value_objects.core import ManagedProjects


class ProjectQueryService:
    """Loads project graphs and flattens them with ProjectConfigReader."""

    def __init__(
        self,
        project_repo: IProjectRepository,
        user_repo: IProjectUserRepository,
        internal_project_id: str,
        reader: ProjectConfigReader | None = None,
    ) -> None:
        self.project_repo = project_repo
        self.user_repo = user_repo
        self.internal_project_id = internal_project_id
        self.reader = reader or ProjectConfigReader()

    async def get_project(self, project_id: str) -> ProjectResult | None:
        project = await self.project_repo.get_full_by_id(project_id)
        if project is None:
            return None
        user_count = await self.project_repo.count_users(project_id)
        return self.reader.read(project, user_count=user_count)

    async def list_managed_projects(self, owner_user_id: str) -> list[ProjectResult]:
        """Projects in the owner's managedProjectIds, in registry order.

        Unknown owners manage nothing; ids of projects that no longer exist
        are skipped.
        """
        owner = await self.user_repo.get(self.internal_project_id, owner_user_id)
        if owner is None:
            return []
        managed = ManagedProjects.from_server_metadata(owner.server_metadata)
        results = []
        for project_id in managed.project_ids:
            project = await self.get_project(project_id)
            if project is not None:
                results.append(project)
        return results
