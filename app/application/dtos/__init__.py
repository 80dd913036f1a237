"""Application DTOs (no ORM dependency)."""

from app.application.dtos.project import (
    DomainCreate,
    DomainResult,
    EmailConfigCreate,
    EmailConfigResult,
    OAuthProviderCreate,
    OAuthProviderResult,
    PermissionRef,
    ProjectConfigCreate,
    ProjectConfigResult,
    ProjectCreate,
    ProjectResult,
)

__all__ = [
    "DomainCreate",
    "DomainResult",
    "EmailConfigCreate",
    "EmailConfigResult",
    "OAuthProviderCreate",
    "OAuthProviderResult",
    "PermissionRef",
    "ProjectConfigCreate",
    "ProjectConfigResult",
    "ProjectCreate",
    "ProjectResult",
]
