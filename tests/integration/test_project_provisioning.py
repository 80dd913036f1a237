"""Provisioning against PostgreSQL: one transaction, real repositories.

Requires DATABASE_URL. Run without DB via: pytest -m 'not requires_db'.
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.project import (
    DomainCreate,
    EmailConfigCreate,
    OAuthProviderCreate,
    ProjectConfigCreate,
    ProjectCreate,
)
from app.application.services.project_provisioning_service import (
    ProjectProvisioningService,
)
from app.application.services.project_query_service import ProjectQueryService
from app.core.config import get_settings
from app.domain.enums import VariantType
from app.domain.exceptions import InvariantViolationException, ValidationException
from app.infrastructure.persistence.models import (
    AuthMethodConfig,
    ConnectedAccountConfig,
    Permission,
    PermissionEdge,
    Project,
    ProjectUser,
)
from app.infrastructure.persistence.repositories import (
    ProjectRepository,
    ProjectUserRepository,
)
from app.infrastructure.services import (
    OwnerLinker,
    ProjectGraphBuilder,
    TeamPermissionSeeder,
)
from tests.conftest import add_owner_user, ensure_internal_project

pytestmark = pytest.mark.requires_db

GITHUB = OAuthProviderCreate(
    id="github", type=VariantType.STANDARD, enabled=False, client_id="x", client_secret="y"
)
GOOGLE = OAuthProviderCreate(id="google", type=VariantType.SHARED, enabled=True)


def _provisioning(session: AsyncSession) -> ProjectProvisioningService:
    internal_id = get_settings().internal_project_id
    return ProjectProvisioningService(
        project_repo=ProjectRepository(session),
        graph_builder=ProjectGraphBuilder(),
        permission_seeder=TeamPermissionSeeder(),
        owner_linker=OwnerLinker(ProjectUserRepository(session), internal_id),
    )


def _query(session: AsyncSession) -> ProjectQueryService:
    return ProjectQueryService(
        ProjectRepository(session),
        ProjectUserRepository(session),
        internal_project_id=get_settings().internal_project_id,
    )


async def _count(session: AsyncSession, model) -> int:
    result = await session.execute(select(func.count()).select_from(model))
    return int(result.scalar_one())


async def test_create_then_read_back(db_session: AsyncSession) -> None:
    await add_owner_user(db_session, "owner1")
    data = ProjectCreate(
        display_name="Acme",
        description="Acme app",
        config=ProjectConfigCreate(
            magic_link_enabled=True,
            oauth_providers=(GITHUB, GOOGLE),
            domains=(
                DomainCreate(domain="https://b.example", handler_path="/h"),
                DomainCreate(domain="https://a.example", handler_path="/h"),
            ),
        ),
    )
    created = await _provisioning(db_session).create_project(["owner1"], data)

    assert created.config.sign_up_enabled is True
    assert created.config.credential_enabled is True
    assert created.config.magic_link_enabled is True
    assert [d.domain for d in created.config.domains] == [
        "https://a.example",
        "https://b.example",
    ]
    assert [p.id for p in created.config.oauth_providers] == ["github", "google"]
    assert [p.id for p in created.config.enabled_oauth_providers] == ["google"]
    assert [p.id for p in created.config.team_member_default_permissions] == ["member"]
    assert [p.id for p in created.config.team_creator_default_permissions] == ["admin"]

    read_back = await _query(db_session).get_project(created.id)
    assert read_back == created


async def test_oauth_providers_mirrored_into_connected_accounts(
    db_session: AsyncSession,
) -> None:
    data = ProjectCreate(
        display_name="Acme", config=ProjectConfigCreate(oauth_providers=(GITHUB, GOOGLE))
    )
    created = await _provisioning(db_session).create_project([], data)
    project = await ProjectRepository(db_session).get_full_by_id(created.id)
    config = project.config

    oauth_methods = {
        m.oauth_provider_config.provider_id: m.enabled
        for m in config.auth_method_configs
        if m.oauth_provider_config is not None
    }
    connected = {
        c.oauth_provider_config.provider_id: c.enabled
        for c in config.connected_account_configs
    }
    assert oauth_methods == {"github": False, "google": True}
    assert connected == oauth_methods


async def test_default_permissions_point_at_system_permissions(
    db_session: AsyncSession,
) -> None:
    created = await _provisioning(db_session).create_project(
        [], ProjectCreate(display_name="Acme")
    )
    result = await db_session.execute(
        select(Permission.queryable_id, PermissionEdge.parent_team_system_permission)
        .join(PermissionEdge, PermissionEdge.child_permission_id == Permission.id)
        .where(Permission.project_id == created.id)
        .order_by(Permission.queryable_id, PermissionEdge.position)
    )
    assert result.all() == [
        ("admin", "UPDATE_TEAM"),
        ("admin", "DELETE_TEAM"),
        ("admin", "READ_MEMBERS"),
        ("admin", "REMOVE_MEMBERS"),
        ("admin", "INVITE_MEMBERS"),
        ("member", "READ_MEMBERS"),
        ("member", "INVITE_MEMBERS"),
    ]


async def test_validation_error_writes_nothing(db_session: AsyncSession) -> None:
    await ensure_internal_project(db_session)
    before = await _count(db_session, Project)
    data = ProjectCreate(
        display_name="Acme",
        config=ProjectConfigCreate(
            email_config=EmailConfigCreate(type=VariantType.STANDARD, host="smtp.example.com")
        ),
    )
    with pytest.raises(ValidationException):
        await _provisioning(db_session).create_project([], data)
    assert await _count(db_session, Project) == before


async def test_failure_after_inserts_rolls_back_everything(
    db_session: AsyncSession,
) -> None:
    await add_owner_user(db_session, "broken", {"managedProjectIds": "not-a-list"})
    before = (
        await _count(db_session, Project),
        await _count(db_session, Permission),
        await _count(db_session, AuthMethodConfig),
        await _count(db_session, ConnectedAccountConfig),
    )
    data = ProjectCreate(
        display_name="Acme", config=ProjectConfigCreate(oauth_providers=(GOOGLE,))
    )
    with pytest.raises(InvariantViolationException):
        await _provisioning(db_session).create_project(["broken"], data)
    after = (
        await _count(db_session, Project),
        await _count(db_session, Permission),
        await _count(db_session, AuthMethodConfig),
        await _count(db_session, ConnectedAccountConfig),
    )
    assert after == before


async def test_missing_owner_does_not_abort_creation(db_session: AsyncSession) -> None:
    await add_owner_user(db_session, "owner1")
    created = await _provisioning(db_session).create_project(
        ["ghost", "owner1"], ProjectCreate(display_name="Acme")
    )
    assert await ProjectRepository(db_session).exists(created.id)
    owner = await ProjectUserRepository(db_session).get(
        get_settings().internal_project_id, "owner1"
    )
    assert owner.server_metadata["managedProjectIds"] == [created.id]


async def test_owner_metadata_keeps_other_keys(db_session: AsyncSession) -> None:
    await add_owner_user(
        db_session, "owner1", {"managedProjectIds": ["older"], "plan": "pro"}
    )
    created = await _provisioning(db_session).create_project(
        ["owner1"], ProjectCreate(display_name="Acme")
    )
    result = await db_session.execute(
        select(ProjectUser.server_metadata).where(ProjectUser.project_user_id == "owner1")
    )
    assert result.scalar_one() == {
        "managedProjectIds": ["older", created.id],
        "plan": "pro",
    }


async def test_list_managed_projects(db_session: AsyncSession) -> None:
    await add_owner_user(db_session, "owner1")
    service = _provisioning(db_session)
    first = await service.create_project(["owner1"], ProjectCreate(display_name="One"))
    second = await service.create_project(["owner1"], ProjectCreate(display_name="Two"))

    projects = await _query(db_session).list_managed_projects("owner1")
    assert [p.id for p in projects] == [first.id, second.id]
    assert await _query(db_session).list_managed_projects("ghost") == []
