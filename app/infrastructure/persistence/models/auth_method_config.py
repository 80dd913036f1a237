"""Auth method and connected account ORM models.

AuthMethodConfig wraps exactly one sign-in mechanism (OAuth provider
reference, one-time code, password, passkey) with an enabled flag.
ConnectedAccountConfig is the legacy linked-account record kept in step
with the OAuth subset of AuthMethodConfig.
"""

from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.domain.enums import ContactChannelType
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import ProjectConfigChildModel
from app.infrastructure.persistence.models.oauth_provider_config import (
    OAuthProviderConfig,
)


class AuthMethodConfig(ProjectConfigChildModel, Base):
    """Enablement record for one sign-in mechanism. Table: auth_method_config."""

    __tablename__ = "auth_method_config"

    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    oauth_provider_config_id: Mapped[str | None] = mapped_column(
        String,
        ForeignKey("oauth_provider_config.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    oauth_provider_config: Mapped[OAuthProviderConfig | None] = relationship()
    otp_config: Mapped[OtpAuthMethodConfig | None] = relationship(
        cascade="all, delete-orphan", uselist=False
    )
    password_config: Mapped[PasswordAuthMethodConfig | None] = relationship(
        cascade="all, delete-orphan", uselist=False
    )
    passkey_config: Mapped[PasskeyAuthMethodConfig | None] = relationship(
        cascade="all, delete-orphan", uselist=False
    )


class OtpAuthMethodConfig(Base):
    """One-time code (magic link) mechanism. Table: otp_auth_method_config."""

    __tablename__ = "otp_auth_method_config"

    auth_method_config_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("auth_method_config.id", ondelete="CASCADE"),
        primary_key=True,
    )
    contact_channel_type: Mapped[str] = mapped_column(
        String, nullable=False, default=ContactChannelType.EMAIL.value
    )


class PasswordAuthMethodConfig(Base):
    """Password mechanism. Table: password_auth_method_config."""

    __tablename__ = "password_auth_method_config"

    auth_method_config_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("auth_method_config.id", ondelete="CASCADE"),
        primary_key=True,
    )


class PasskeyAuthMethodConfig(Base):
    """Passkey (WebAuthn) mechanism. Table: passkey_auth_method_config."""

    __tablename__ = "passkey_auth_method_config"

    auth_method_config_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("auth_method_config.id", ondelete="CASCADE"),
        primary_key=True,
    )


class ConnectedAccountConfig(ProjectConfigChildModel, Base):
    """Legacy linked external account record. Table: connected_account_config."""

    __tablename__ = "connected_account_config"

    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    oauth_provider_config_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("oauth_provider_config.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    oauth_provider_config: Mapped[OAuthProviderConfig] = relationship()
