"""Create a project from a JSON creation request and print its flattened view.

Usage:
    uv run python -m scripts.create_project <request.json> [owner_user_id ...]
The JSON has the shape of the POST /api/v1/projects body. Requires Postgres.
All imports use app.*.
"""

import asyncio
import json
import sys
from dataclasses import asdict
from pathlib import Path

from pydantic import ValidationError

from app.application.services.project_provisioning_service import (
    ProjectProvisioningService,
)
from app.core.config import get_settings
from app.domain.exceptions import PlatformException
from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories import (
    ProjectRepository,
    ProjectUserRepository,
)
from app.infrastructure.services import (
    OwnerLinker,
    ProjectGraphBuilder,
    TeamPermissionSeeder,
)
from app.schemas.project import ProjectCreateRequest
from app.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Provision one project inside a single transaction."""
    if len(sys.argv) < 2:
        print(
            "Usage: uv run python -m scripts.create_project <request.json> [owner_user_id ...]",
            file=sys.stderr,
        )
        sys.exit(1)
    request_path = Path(sys.argv[1])
    owner_ids = list(dict.fromkeys(sys.argv[2:]))

    try:
        body = ProjectCreateRequest.model_validate_json(request_path.read_text())
    except ValidationError as exc:
        print(f"Invalid request in {request_path}:\n{exc}", file=sys.stderr)
        sys.exit(1)

    setup_logging()
    settings = get_settings()
    session_factory = database._require_session_factory()

    async with session_factory() as session:
        service = ProjectProvisioningService(
            project_repo=ProjectRepository(session),
            graph_builder=ProjectGraphBuilder(),
            permission_seeder=TeamPermissionSeeder(),
            owner_linker=OwnerLinker(
                ProjectUserRepository(session), settings.internal_project_id
            ),
        )
        try:
            result = await service.create_project(owner_ids, body.to_dto())
        except PlatformException as exc:
            print(json.dumps(exc.to_dict(), indent=2), file=sys.stderr)
            sys.exit(1)

    print(json.dumps(asdict(result), indent=2, default=str))
    if database.engine is not None:
        await database.engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
