"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions and application services.
All services are built from infrastructure implementations here;
routes depend only on these dependencies, not on infra directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services.project_provisioning_service import (
    ProjectProvisioningService,
)
from app.application.services.project_query_service import ProjectQueryService
from app.core.config import get_settings
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import (
    ProjectRepository,
    ProjectUserRepository,
)
from app.infrastructure.services import (
    OwnerLinker,
    ProjectGraphBuilder,
    TeamPermissionSeeder,
)

CREATE_PROJECT_SECRET_HEADER = "X-Create-Project-Secret"
OWNER_USER_ID_HEADER = "X-Owner-User-Id"


async def get_project_query_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProjectQueryService:
    """Project reads (GET /projects, GET /projects/{id})."""
    return ProjectQueryService(
        ProjectRepository(db),
        ProjectUserRepository(db),
        internal_project_id=get_settings().internal_project_id,
    )


async def get_project_provisioning_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> ProjectProvisioningService:
    """Project creation on the request's transactional session."""
    return ProjectProvisioningService(
        project_repo=ProjectRepository(db),
        graph_builder=ProjectGraphBuilder(),
        permission_seeder=TeamPermissionSeeder(),
        owner_linker=OwnerLinker(
            ProjectUserRepository(db), get_settings().internal_project_id
        ),
    )


def require_create_project_secret(
    secret: Annotated[str | None, Header(alias=CREATE_PROJECT_SECRET_HEADER)] = None,
) -> None:
    """Guard project creation with a shared secret.

    503 when CREATE_PROJECT_SECRET is not configured, 401 when the header is
    missing or does not match.
    """
    settings = get_settings()
    if not settings.create_project_secret:
        raise HTTPException(
            status_code=503,
            detail="Project creation is not configured (CREATE_PROJECT_SECRET is not set).",
        )
    if not secret or secret != settings.create_project_secret.get_secret_value():
        raise HTTPException(status_code=401, detail="Unauthorized project creation")


def get_owner_user_ids(
    owner_ids: Annotated[list[str] | None, Header(alias=OWNER_USER_ID_HEADER)] = None,
) -> list[str]:
    """Owner user ids from repeated and/or comma-separated headers, in order, without duplicates."""
    ids: list[str] = []
    for value in owner_ids or []:
        ids.extend(part.strip() for part in value.split(",") if part.strip())
    return list(dict.fromkeys(ids))
