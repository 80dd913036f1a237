"""Application layer: DTOs, interfaces, services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, graph builder,
permission seeder, owner linker).
"""

from app.application.interfaces import (
    IOwnerLinker,
    IProjectGraphBuilder,
    IProjectRepository,
    IProjectUserRepository,
    ITeamPermissionSeeder,
)
from app.application.services import (
    ProjectConfigReader,
    ProjectProvisioningService,
    ProjectQueryService,
)

__all__ = [
    "IOwnerLinker",
    "IProjectGraphBuilder",
    "IProjectRepository",
    "IProjectUserRepository",
    "ITeamPermissionSeeder",
    "ProjectConfigReader",
    "ProjectProvisioningService",
    "ProjectQueryService",
]
