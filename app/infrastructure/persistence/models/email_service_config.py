"""Email service config ORM models: one per project config, exactly one variant."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin


class EmailServiceConfig(CuidMixin, Base):
    """Outbound email delivery settings. Table: email_service_config. One row per project config."""

    __tablename__ = "email_service_config"

    project_config_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("project_config.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )

    proxied_email_service_config: Mapped[ProxiedEmailServiceConfig | None] = relationship(
        cascade="all, delete-orphan", uselist=False
    )
    standard_email_service_config: Mapped[StandardEmailServiceConfig | None] = (
        relationship(cascade="all, delete-orphan", uselist=False)
    )


class ProxiedEmailServiceConfig(Base):
    """Shared variant (platform mail service, no fields). Table: proxied_email_service_config."""

    __tablename__ = "proxied_email_service_config"

    email_service_config_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("email_service_config.id", ondelete="CASCADE"),
        primary_key=True,
    )


class StandardEmailServiceConfig(Base):
    """Standard variant (tenant SMTP server). Table: standard_email_service_config."""

    __tablename__ = "standard_email_service_config"

    email_service_config_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("email_service_config.id", ondelete="CASCADE"),
        primary_key=True,
    )
    host: Mapped[str] = mapped_column(String, nullable=False)
    port: Mapped[int] = mapped_column(Integer, nullable=False)
    username: Mapped[str] = mapped_column(String, nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)
    sender_email: Mapped[str] = mapped_column(String, nullable=False)
    sender_name: Mapped[str] = mapped_column(String, nullable=False)
