"""Infrastructure implementations of application service interfaces."""

from app.infrastructure.services.owner_linker import (
    OwnerLinker,
    OwnerLinkReport,
    OwnerNotFoundAnomaly,
)
from app.infrastructure.services.project_graph_builder import ProjectGraphBuilder
from app.infrastructure.services.team_permission_seeder import TeamPermissionSeeder

__all__ = [
    "OwnerLinkReport",
    "OwnerLinker",
    "OwnerNotFoundAnomaly",
    "ProjectGraphBuilder",
    "TeamPermissionSeeder",
]
