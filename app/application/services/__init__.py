"""Application services: variant resolution, config reading, provisioning, queries."""

from app.application.services.project_config_reader import ProjectConfigReader
from app.application.services.project_provisioning_service import (
    ProjectProvisioningService,
)
from app.application.services.project_query_service import ProjectQueryService

__all__ = [
    "ProjectConfigReader",
    "ProjectProvisioningService",
    "ProjectQueryService",
]
