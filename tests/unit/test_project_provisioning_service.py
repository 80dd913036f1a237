"""Unit tests for ProjectProvisioningService with in-memory repository fakes."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock

import pytest

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
from app.domain.enums import VariantType
from app.domain.exceptions import InvariantViolationException, ValidationException
from app.infrastructure.services.owner_linker import OwnerLinkReport
from app.infrastructure.services.project_graph_builder import ProjectGraphBuilder
from app.infrastructure.services.team_permission_seeder import TeamPermissionSeeder


class FakeProjectRepository:
    """Keeps created projects in memory; transaction() records its use."""

    def __init__(self, lose_created: bool = False) -> None:
        self.projects: dict = {}
        self.permissions: list = []
        self.transactions = 0
        self.lose_created = lose_created

    @asynccontextmanager
    async def transaction(self):
        self.transactions += 1
        yield

    async def create(self, obj):
        self.projects[obj.id] = obj
        return obj

    async def add_permissions(self, permissions):
        self.permissions.extend(permissions)
        obj = self.projects[permissions[0].project_id]
        obj.config.permissions = list(permissions)

    async def get_full_by_id(self, project_id, *, refresh=False):
        if self.lose_created:
            return None
        return self.projects.get(project_id)

    async def count_users(self, project_id):
        return 0

    async def exists(self, project_id):
        return project_id in self.projects


def _service(repo: FakeProjectRepository, linker: AsyncMock | None = None):
    if linker is None:
        linker = AsyncMock()
        linker.link.return_value = OwnerLinkReport()
    return ProjectProvisioningService(
        project_repo=repo,
        graph_builder=ProjectGraphBuilder(),
        permission_seeder=TeamPermissionSeeder(),
        owner_linker=linker,
    )


def _request(**config) -> ProjectCreate:
    config.setdefault("sign_up_enabled", True)
    return ProjectCreate(
        display_name="Acme", description="Acme app", config=ProjectConfigCreate(**config)
    )


async def test_creates_project_with_default_permissions() -> None:
    repo = FakeProjectRepository()
    result = await _service(repo).create_project([], _request())

    assert result.id in repo.projects
    assert repo.transactions == 1
    assert result.display_name == "Acme"
    assert result.description == "Acme app"
    assert result.user_count == 0
    assert result.is_production_mode is False
    config = result.config
    assert config.credential_enabled is True
    assert config.magic_link_enabled is False
    assert config.passkey_enabled is False
    assert config.allow_localhost is True
    assert config.email_config.type == VariantType.SHARED
    assert [p.id for p in config.team_member_default_permissions] == ["member"]
    assert [p.id for p in config.team_creator_default_permissions] == ["admin"]
    assert {p.queryable_id for p in repo.permissions} == {"member", "admin"}


async def test_oauth_providers_sorted_with_enabled_subset() -> None:
    repo = FakeProjectRepository()
    result = await _service(repo).create_project(
        ["owner1"],
        _request(
            oauth_providers=(
                OAuthProviderCreate(
                    id="github",
                    type=VariantType.STANDARD,
                    enabled=False,
                    client_id="x",
                    client_secret="y",
                ),
                OAuthProviderCreate(id="google", type=VariantType.SHARED, enabled=True),
            )
        ),
    )
    providers = result.config.oauth_providers
    assert [(p.id, p.type, p.enabled) for p in providers] == [
        ("github", VariantType.STANDARD, False),
        ("google", VariantType.SHARED, True),
    ]
    assert providers[0].client_id == "x"
    assert [p.id for p in result.config.enabled_oauth_providers] == ["google"]


async def test_links_owners_with_new_project_id() -> None:
    repo = FakeProjectRepository()
    linker = AsyncMock()
    linker.link.return_value = OwnerLinkReport(linked_owner_ids=["owner1"])
    result = await _service(repo, linker).create_project(["owner1", "owner2"], _request())
    linker.link.assert_awaited_once_with(["owner1", "owner2"], result.id)


@pytest.mark.parametrize(
    "config, field",
    [
        (
            {
                "oauth_providers": (
                    OAuthProviderCreate(id="github", type=VariantType.STANDARD, enabled=True),
                )
            },
            "oauth_providers.client_id",
        ),
        (
            {
                "oauth_providers": (
                    OAuthProviderCreate(id="apple", type=VariantType.SHARED, enabled=True),
                )
            },
            "oauth_providers.id",
        ),
        (
            {
                "oauth_providers": (
                    OAuthProviderCreate(id="google", type=VariantType.SHARED, enabled=True),
                    OAuthProviderCreate(id="google", type=VariantType.SHARED, enabled=False),
                )
            },
            "oauth_providers.id",
        ),
        (
            {"email_config": EmailConfigCreate(type=VariantType.STANDARD, port=587)},
            "email_config.host",
        ),
        (
            {
                "domains": (
                    DomainCreate(domain="https://a.example", handler_path="/h"),
                    DomainCreate(domain="https://a.example", handler_path="/x"),
                )
            },
            "domains.domain",
        ),
    ],
)
async def test_invalid_request_writes_nothing(config: dict, field: str) -> None:
    repo = FakeProjectRepository()
    linker = AsyncMock()
    with pytest.raises(ValidationException) as exc_info:
        await _service(repo, linker).create_project(["owner1"], _request(**config))
    assert exc_info.value.details == {"field": field}
    assert repo.projects == {}
    assert repo.permissions == []
    linker.link.assert_not_awaited()


async def test_project_missing_on_reread_is_invariant_violation() -> None:
    repo = FakeProjectRepository(lose_created=True)
    with pytest.raises(InvariantViolationException) as exc_info:
        await _service(repo).create_project([], _request())
    assert "not found after creation" in exc_info.value.message


async def test_each_project_gets_a_new_id() -> None:
    repo = FakeProjectRepository()
    service = _service(repo)
    first = await service.create_project([], _request())
    second = await service.create_project([], _request())
    assert first.id != second.id
    assert first.config.id != second.config.id
