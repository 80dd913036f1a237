"""SQLAlchemy mixins for common model patterns (DRY).

Provides: CuidMixin, ProjectConfigMixin, TimestampMixin, and the combined
ProjectConfigChildModel used by every row owned by a project config.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from app.shared.utils.generators import generate_cuid


class CuidMixin:
    """Mixin for models using CUID as primary key. Provides id with default generate_cuid."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class ProjectConfigMixin:
    """Mixin for rows owned by a project config. Provides project_config_id FK with CASCADE delete."""

    @declared_attr
    def project_config_id(cls) -> Mapped[str]:
        return mapped_column(
            String,
            ForeignKey("project_config.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class ProjectConfigChildModel(CuidMixin, ProjectConfigMixin):
    """Combined mixin: CUID + project_config_id. Common for config sub-records."""

    __abstract__ = True
