"""Default team permissions created for every new project."""

from __future__ import annotations

from typing import TypedDict

from app.core.constants import (
    DEFAULT_TEAM_CREATOR_PERMISSION_ID,
    DEFAULT_TEAM_MEMBER_PERMISSION_ID,
)
from app.domain.enums import PermissionScope, TeamSystemPermission
from app.infrastructure.persistence.models import Permission, PermissionEdge
from app.shared.utils.generators import generate_cuid


class DefaultPermissionData(TypedDict):
    """Definition of a built-in team permission."""

    queryable_id: str
    description: str
    parents: list[TeamSystemPermission]
    is_default_team_member_permission: bool
    is_default_team_creator_permission: bool


DEFAULT_TEAM_PERMISSIONS: list[DefaultPermissionData] = [
    {
        "queryable_id": DEFAULT_TEAM_MEMBER_PERMISSION_ID,
        "description": "Default permission for team members",
        "parents": [
            TeamSystemPermission.READ_MEMBERS,
            TeamSystemPermission.INVITE_MEMBERS,
        ],
        "is_default_team_member_permission": True,
        "is_default_team_creator_permission": False,
    },
    {
        "queryable_id": DEFAULT_TEAM_CREATOR_PERMISSION_ID,
        "description": "Default permission for team creators",
        "parents": [
            TeamSystemPermission.UPDATE_TEAM,
            TeamSystemPermission.DELETE_TEAM,
            TeamSystemPermission.READ_MEMBERS,
            TeamSystemPermission.REMOVE_MEMBERS,
            TeamSystemPermission.INVITE_MEMBERS,
        ],
        "is_default_team_member_permission": False,
        "is_default_team_creator_permission": True,
    },
]


class TeamPermissionSeeder:
    """Builds the two default team permissions (member, admin) for a project.

    Pure: returns transient rows, the caller adds them to the session. The
    set is fixed and not configurable per project.
    """

    def build(self, project_id: str, project_config_id: str) -> list[Permission]:
        return [
            Permission(
                id=generate_cuid(),
                project_id=project_id,
                project_config_id=project_config_id,
                queryable_id=data["queryable_id"],
                description=data["description"],
                scope=PermissionScope.TEAM.value,
                is_default_team_member_permission=data[
                    "is_default_team_member_permission"
                ],
                is_default_team_creator_permission=data[
                    "is_default_team_creator_permission"
                ],
                parent_edges=[
                    PermissionEdge(
                        id=generate_cuid(),
                        position=position,
                        parent_team_system_permission=parent.value,
                    )
                    for position, parent in enumerate(data["parents"])
                ],
            )
            for data in DEFAULT_TEAM_PERMISSIONS
        ]
