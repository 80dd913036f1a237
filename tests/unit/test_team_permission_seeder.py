"""Unit tests for the default team permissions of a new project."""

from app.domain.enums import PermissionScope
from app.infrastructure.services.team_permission_seeder import TeamPermissionSeeder


def _by_queryable_id():
    permissions = TeamPermissionSeeder().build("p1", "cfg1")
    return {p.queryable_id: p for p in permissions}


def test_builds_member_and_admin() -> None:
    permissions = _by_queryable_id()
    assert set(permissions) == {"member", "admin"}
    for permission in permissions.values():
        assert permission.project_id == "p1"
        assert permission.project_config_id == "cfg1"
        assert permission.scope == PermissionScope.TEAM.value
        assert permission.id


def test_member_permission() -> None:
    member = _by_queryable_id()["member"]
    assert member.description == "Default permission for team members"
    assert member.is_default_team_member_permission is True
    assert member.is_default_team_creator_permission is False
    assert [e.parent_team_system_permission for e in member.parent_edges] == [
        "READ_MEMBERS",
        "INVITE_MEMBERS",
    ]


def test_admin_permission() -> None:
    admin = _by_queryable_id()["admin"]
    assert admin.description == "Default permission for team creators"
    assert admin.is_default_team_member_permission is False
    assert admin.is_default_team_creator_permission is True
    assert [e.parent_team_system_permission for e in admin.parent_edges] == [
        "UPDATE_TEAM",
        "DELETE_TEAM",
        "READ_MEMBERS",
        "REMOVE_MEMBERS",
        "INVITE_MEMBERS",
    ]


def test_edges_are_positioned_and_never_point_at_custom_permissions() -> None:
    for permission in _by_queryable_id().values():
        assert [e.position for e in permission.parent_edges] == list(
            range(len(permission.parent_edges))
        )
        assert all(e.parent_permission_id is None for e in permission.parent_edges)


def test_each_call_generates_fresh_ids() -> None:
    seeder = TeamPermissionSeeder()
    first = {p.id for p in seeder.build("p1", "cfg1")}
    second = {p.id for p in seeder.build("p2", "cfg2")}
    assert first.isdisjoint(second)
