"""ProjectUser ORM model. Users of a project; owners live in the internal project."""

from typing import Any

from sqlalchemy import JSON, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import TimestampMixin


class ProjectUser(TimestampMixin, Base):
    """User of a project. Table: project_user. Primary key (project_id, project_user_id).

    server_metadata is free-form; for users of the internal project it carries
    managedProjectIds (see ManagedProjects).
    """

    __tablename__ = "project_user"

    project_id: Mapped[str] = mapped_column(
        String, ForeignKey("project.id", ondelete="CASCADE"), primary_key=True
    )
    project_user_id: Mapped[str] = mapped_column(String, primary_key=True)
    display_name: Mapped[str | None] = mapped_column(String, nullable=True)
    primary_email: Mapped[str | None] = mapped_column(String, nullable=True)
    server_metadata: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
