"""Projects API: thin routes delegating to ProjectProvisioningService and ProjectQueryService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import (
    get_owner_user_ids,
    get_project_provisioning_service,
    get_project_query_service,
    require_create_project_secret,
)
from app.application.services.project_provisioning_service import (
    ProjectProvisioningService,
)
from app.application.services.project_query_service import ProjectQueryService
from app.core.limiter import limit_create_project, limit_reads
from app.domain.exceptions import ProjectNotFoundException
from app.schemas.project import ProjectCreateRequest, ProjectResponse

router = APIRouter()


@router.post(
    "",
    response_model=ProjectResponse,
    response_model_exclude_none=True,
    status_code=201,
    dependencies=[Depends(require_create_project_secret)],
)
@limit_create_project
async def create_project(
    request: Request,
    body: ProjectCreateRequest,
    owner_ids: Annotated[list[str], Depends(get_owner_user_ids)],
    service: Annotated[
        ProjectProvisioningService, Depends(get_project_provisioning_service)
    ],
):
    """Create a project with its configuration graph and default team permissions.

    Owners come from the X-Owner-User-Id header (repeatable, comma-separated).
    Protected by the X-Create-Project-Secret header.
    """
    result = await service.create_project(owner_ids, body.to_dto())
    return ProjectResponse.model_validate(result)


@router.get("", response_model=list[ProjectResponse], response_model_exclude_none=True)
@limit_reads
async def list_managed_projects(
    request: Request,
    owner_user_id: Annotated[str, Query(min_length=1)],
    service: Annotated[ProjectQueryService, Depends(get_project_query_service)],
):
    """Projects the owner manages (managedProjectIds), in registry order."""
    results = await service.list_managed_projects(owner_user_id)
    return [ProjectResponse.model_validate(r) for r in results]


@router.get(
    "/{project_id}", response_model=ProjectResponse, response_model_exclude_none=True
)
@limit_reads
async def get_project(
    request: Request,
    project_id: str,
    service: Annotated[ProjectQueryService, Depends(get_project_query_service)],
):
    """Flattened view of one project."""
    result = await service.get_project(project_id)
    if result is None:
        raise ProjectNotFoundException(project_id)
    return ProjectResponse.model_validate(result)
