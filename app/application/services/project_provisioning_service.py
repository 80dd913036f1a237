"""Project provisioning: one atomic unit of work from creation request to flattened view."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from app.application.dtos.project import (
    OAuthProviderCreate,
    ProjectConfigCreate,
    ProjectCreate,
    ProjectResult,
)
from app.application.interfaces.repositories import IProjectRepository
from app.application.interfaces.services import (
    IOwnerLinker,
    IProjectGraphBuilder,
    ITeamPermissionSeeder,
)
from app.application.services.project_config_reader import ProjectConfigReader
from app.application.services.variant_resolver import (
    email_variant_from_request,
    oauth_variant_from_request,
)
from app.domain.exceptions import InvariantViolationException, ValidationException
from app.domain.value_objects.core import OAuthVariant
from app.shared.telemetry.tracing import add_span_attributes, traced
from app.shared.utils.generators import generate_uuid

logger = logging.getLogger(__name__)


def _resolve_oauth_providers(
    requested: ProjectConfigCreate,
) -> list[tuple[OAuthProviderCreate, OAuthVariant]]:
    seen: set[str] = set()
    resolved = []
    for entry in requested.oauth_providers:
        if entry.id in seen:
            raise ValidationException(
                f"OAuth provider '{entry.id}' is listed more than once",
                field="oauth_providers.id",
            )
        seen.add(entry.id)
        resolved.append((entry, oauth_variant_from_request(entry)))
    return resolved


def _check_domains(requested: ProjectConfigCreate) -> None:
    seen: set[str] = set()
    for item in requested.domains:
        if item.domain in seen:
            raise ValidationException(
                f"Domain '{item.domain}' is listed more than once",
                field="domains.domain",
            )
        seen.add(item.domain)


class ProjectProvisioningService:
    """Creates a project with its whole configuration graph and links its owners.

    Steps run in order inside one transaction (a savepoint when the session
    is already in one): validate the request, insert project + config +
    domains + OAuth providers + email service, auth methods and their
    connected-account mirror, default team permissions, link owners, re-read.
    A ValidationException or InvariantViolationException rolls everything
    back. A missing owner does not.
    """

    def __init__(
        self,
        project_repo: IProjectRepository,
        graph_builder: IProjectGraphBuilder,
        permission_seeder: ITeamPermissionSeeder,
        owner_linker: IOwnerLinker,
        reader: ProjectConfigReader | None = None,
    ) -> None:
        self.project_repo = project_repo
        self.graph_builder = graph_builder
        self.permission_seeder = permission_seeder
        self.owner_linker = owner_linker
        self.reader = reader or ProjectConfigReader()

    @traced("projects.create_project")
    async def create_project(
        self, owner_ids: Sequence[str], data: ProjectCreate
    ) -> ProjectResult:
        """Provision a project and return its flattened view.

        Raises:
            ValidationException: Request is incomplete or names a provider
                not allowed for its type. Nothing is written.
            InvariantViolationException: Internal consistency failure.
                Nothing is written.
        """
        project_id = generate_uuid()
        add_span_attributes(project_id=project_id, owner_count=len(owner_ids))

        async with self.project_repo.transaction():
            # Everything below up to create() is pure; no row is added on failure.
            oauth_providers = _resolve_oauth_providers(data.config)
            email = email_variant_from_request(data.config.email_config)
            _check_domains(data.config)
            project = self.graph_builder.build_project(
                project_id, data, oauth_providers, email
            )
            self.graph_builder.attach_auth_methods(project.config, data.config)
            permissions = self.permission_seeder.build(project_id, project.config.id)

            await self.project_repo.create(project)
            await self.project_repo.add_permissions(permissions)

            report = await self.owner_linker.link(owner_ids, project_id)

            created = await self.project_repo.get_full_by_id(project_id, refresh=True)
            if created is None:
                raise InvariantViolationException(
                    f"Project with id '{project_id}' not found after creation",
                    project_id=project_id,
                )
            user_count = await self.project_repo.count_users(project_id)
            result = self.reader.read(created, user_count=user_count)

        logger.info(
            "Project provisioned: id=%s owners_linked=%d owners_missing=%d",
            project_id,
            len(report.linked_owner_ids),
            len(report.anomalies),
        )
        return result
