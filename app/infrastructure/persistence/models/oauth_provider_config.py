"""OAuth provider config ORM models: the provider row and its two exclusive variants."""

from __future__ import annotations

from sqlalchemy import ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import ProjectConfigChildModel


class OAuthProviderConfig(ProjectConfigChildModel, Base):
    """OAuth provider configured on a project. Table: oauth_provider_config.

    Unique (project_config_id, provider_id). Exactly one of proxied_oauth_config
    or standard_oauth_config is set; the write path enforces it and the read
    path asserts it.
    """

    __tablename__ = "oauth_provider_config"

    provider_id: Mapped[str] = mapped_column(String, nullable=False)

    proxied_oauth_config: Mapped[ProxiedOAuthProviderConfig | None] = relationship(
        cascade="all, delete-orphan", uselist=False
    )
    standard_oauth_config: Mapped[StandardOAuthProviderConfig | None] = relationship(
        cascade="all, delete-orphan", uselist=False
    )

    __table_args__ = (
        UniqueConstraint(
            "project_config_id", "provider_id", name="uq_oauth_provider_config_provider"
        ),
    )


class ProxiedOAuthProviderConfig(Base):
    """Shared variant: provider served from the platform credential pool. Table: proxied_oauth_provider_config."""

    __tablename__ = "proxied_oauth_provider_config"

    oauth_provider_config_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("oauth_provider_config.id", ondelete="CASCADE"),
        primary_key=True,
    )
    # Uppercase provider type (e.g. GOOGLE).
    type: Mapped[str] = mapped_column(String, nullable=False)


class StandardOAuthProviderConfig(Base):
    """Standard variant: tenant-supplied client credentials. Table: standard_oauth_provider_config."""

    __tablename__ = "standard_oauth_provider_config"

    oauth_provider_config_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("oauth_provider_config.id", ondelete="CASCADE"),
        primary_key=True,
    )
    type: Mapped[str] = mapped_column(String, nullable=False)
    client_id: Mapped[str] = mapped_column(String, nullable=False)
    client_secret: Mapped[str] = mapped_column(Text, nullable=False)
    facebook_config_id: Mapped[str | None] = mapped_column(String, nullable=True)
    microsoft_tenant_id: Mapped[str | None] = mapped_column(String, nullable=True)
