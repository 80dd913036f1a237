"""Permission and PermissionEdge ORM models (team permission graph)."""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.domain.enums import PermissionScope, TeamSystemPermission
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, ProjectConfigChildModel


class Permission(ProjectConfigChildModel, Base):
    """Custom permission definition. Table: permission. Unique (project_config_id, queryable_id)."""

    __tablename__ = "permission"

    project_id: Mapped[str] = mapped_column(
        String, ForeignKey("project.id", ondelete="CASCADE"), nullable=False, index=True
    )
    queryable_id: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    scope: Mapped[str] = mapped_column(
        String, nullable=False, default=PermissionScope.TEAM.value
    )
    is_default_team_creator_permission: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    is_default_team_member_permission: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )

    parent_edges: Mapped[list[PermissionEdge]] = relationship(
        foreign_keys="PermissionEdge.child_permission_id",
        cascade="all, delete-orphan",
        order_by="PermissionEdge.position",
        collection_class=ordering_list("position"),
    )

    __table_args__ = (
        UniqueConstraint(
            "project_config_id", "queryable_id", name="uq_permission_config_queryable_id"
        ),
        CheckConstraint(
            "scope IN ({})".format(
                ", ".join("'{}'".format(v) for v in PermissionScope.values())
            ),
            name="permission_scope_check",
        ),
    )


class PermissionEdge(CuidMixin, Base):
    """Parent edge of a permission. Table: permission_edge.

    References exactly one parent: another custom permission or a
    TeamSystemPermission name.
    """

    __tablename__ = "permission_edge"

    child_permission_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("permission.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    parent_permission_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("permission.id", ondelete="CASCADE"), nullable=True
    )
    parent_team_system_permission: Mapped[str | None] = mapped_column(
        String, nullable=True
    )

    parent_permission: Mapped[Permission | None] = relationship(
        foreign_keys=[parent_permission_id]
    )

    __table_args__ = (
        CheckConstraint(
            "(parent_permission_id IS NULL) <> (parent_team_system_permission IS NULL)",
            name="permission_edge_exactly_one_parent",
        ),
        CheckConstraint(
            "parent_team_system_permission IS NULL OR parent_team_system_permission IN ({})".format(
                ", ".join("'{}'".format(v) for v in TeamSystemPermission.values())
            ),
            name="permission_edge_system_permission_check",
        ),
    )
