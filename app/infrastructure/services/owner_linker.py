"""Links owner users to a newly created project (managed-project registry)."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from app.domain.value_objects.core import ManagedProjects
from app.infrastructure.persistence.repositories.project_user_repo import (
    ProjectUserRepository,
)
from app.shared.telemetry.tracing import add_span_event

logger = logging.getLogger(__name__)

OWNER_NOT_FOUND_EVENT = "project-creation-owner-not-found"


@dataclass(frozen=True)
class OwnerNotFoundAnomaly:
    """Owner id that did not resolve to a user. Recorded, never raised."""

    owner_user_id: str
    project_id: str
    code: str = OWNER_NOT_FOUND_EVENT


@dataclass
class OwnerLinkReport:
    linked_owner_ids: list[str] = field(default_factory=list)
    anomalies: list[OwnerNotFoundAnomaly] = field(default_factory=list)


class OwnerLinker:
    """Appends a project id to each owner's managedProjectIds.

    Owners are users of the internal project. Each row is locked for the rest
    of the transaction so concurrent appends for the same owner serialize.
    Other server_metadata keys are preserved.
    """

    def __init__(self, user_repo: ProjectUserRepository, internal_project_id: str) -> None:
        self.user_repo = user_repo
        self.internal_project_id = internal_project_id

    async def link(self, owner_ids: Sequence[str], project_id: str) -> OwnerLinkReport:
        report = OwnerLinkReport()
        for owner_id in owner_ids:
            user = await self.user_repo.get_for_update(self.internal_project_id, owner_id)
            if user is None:
                # Deleted account or stale owner list: the project is still created.
                logger.warning(
                    "Owner user %s not found while creating project %s; continuing",
                    owner_id,
                    project_id,
                )
                add_span_event(
                    OWNER_NOT_FOUND_EVENT,
                    {"owner_user_id": owner_id, "project_id": project_id},
                )
                report.anomalies.append(
                    OwnerNotFoundAnomaly(owner_user_id=owner_id, project_id=project_id)
                )
                continue

            managed = ManagedProjects.from_server_metadata(user.server_metadata)
            await self.user_repo.update_server_metadata(
                user, managed.with_project(project_id).merge_into(user.server_metadata)
            )
            report.linked_owner_ids.append(owner_id)
        return report
