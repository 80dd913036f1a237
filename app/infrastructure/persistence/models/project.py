"""Project and ProjectConfig ORM models. Root of the per-tenant configuration graph."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import JSON, Boolean, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    ProjectConfigChildModel,
    TimestampMixin,
)

if TYPE_CHECKING:
    from app.infrastructure.persistence.models.auth_method_config import (
        AuthMethodConfig,
        ConnectedAccountConfig,
    )
    from app.infrastructure.persistence.models.email_service_config import (
        EmailServiceConfig,
    )
    from app.infrastructure.persistence.models.oauth_provider_config import (
        OAuthProviderConfig,
    )
    from app.infrastructure.persistence.models.permission import Permission


class ProjectConfig(CuidMixin, TimestampMixin, Base):
    """Configuration graph owned by exactly one project. Table: project_config."""

    __tablename__ = "project_config"

    sign_up_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    allow_localhost: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    create_team_on_sign_up: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    client_team_creation_enabled: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    client_user_deletion_enabled: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    legacy_global_jwt_signing: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    # TeamSystemPermission names granted by default on top of custom default permissions.
    team_create_default_system_permissions: Mapped[list[str]] = mapped_column(
        JSON, nullable=False, default=list
    )
    team_member_default_system_permissions: Mapped[list[str]] = mapped_column(
        JSON, nullable=False, default=list
    )

    domains: Mapped[list[ProjectDomain]] = relationship(
        cascade="all, delete-orphan", order_by="ProjectDomain.domain"
    )
    oauth_provider_configs: Mapped[list[OAuthProviderConfig]] = relationship(
        cascade="all, delete-orphan", order_by="OAuthProviderConfig.provider_id"
    )
    auth_method_configs: Mapped[list[AuthMethodConfig]] = relationship(
        cascade="all, delete-orphan", order_by="AuthMethodConfig.id"
    )
    connected_account_configs: Mapped[list[ConnectedAccountConfig]] = relationship(
        cascade="all, delete-orphan", order_by="ConnectedAccountConfig.id"
    )
    permissions: Mapped[list[Permission]] = relationship(
        cascade="all, delete-orphan", order_by="Permission.queryable_id"
    )
    email_service_config: Mapped[EmailServiceConfig | None] = relationship(
        cascade="all, delete-orphan", uselist=False
    )


class Project(TimestampMixin, Base):
    """Tenant of the identity platform. Table: project. Id is an opaque UUID string."""

    __tablename__ = "project"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    display_name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_production_mode: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    config_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("project_config.id", ondelete="RESTRICT"),
        nullable=False,
        unique=True,
    )

    config: Mapped[ProjectConfig] = relationship(cascade="all")


class ProjectDomain(ProjectConfigChildModel, Base):
    """Trusted domain and its auth handler path. Table: project_domain. Unique (config, domain)."""

    __tablename__ = "project_domain"

    domain: Mapped[str] = mapped_column(String, nullable=False)
    handler_path: Mapped[str] = mapped_column(String, nullable=False)

    __table_args__ = (
        UniqueConstraint("project_config_id", "domain", name="uq_project_domain_config_domain"),
    )
