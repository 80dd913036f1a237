"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure.
"""

from app.application.interfaces.repositories import (
    IProjectRepository,
    IProjectUserRepository,
)
from app.application.interfaces.services import (
    IOwnerLinker,
    IProjectGraphBuilder,
    ITeamPermissionSeeder,
)

__all__ = [
    "IOwnerLinker",
    "IProjectGraphBuilder",
    "IProjectRepository",
    "IProjectUserRepository",
    "ITeamPermissionSeeder",
]
