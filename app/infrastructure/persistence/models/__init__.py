"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.auth_method_config import (
    AuthMethodConfig,
    ConnectedAccountConfig,
    OtpAuthMethodConfig,
    PasskeyAuthMethodConfig,
    PasswordAuthMethodConfig,
)
from app.infrastructure.persistence.models.email_service_config import (
    EmailServiceConfig,
    ProxiedEmailServiceConfig,
    StandardEmailServiceConfig,
)
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    ProjectConfigChildModel,
    ProjectConfigMixin,
    TimestampMixin,
)
from app.infrastructure.persistence.models.oauth_provider_config import (
    OAuthProviderConfig,
    ProxiedOAuthProviderConfig,
    StandardOAuthProviderConfig,
)
from app.infrastructure.persistence.models.permission import Permission, PermissionEdge
from app.infrastructure.persistence.models.project import (
    Project,
    ProjectConfig,
    ProjectDomain,
)
from app.infrastructure.persistence.models.project_user import ProjectUser

__all__ = [
    "Project",
    "ProjectConfig",
    "ProjectDomain",
    "ProjectUser",
    "OAuthProviderConfig",
    "ProxiedOAuthProviderConfig",
    "StandardOAuthProviderConfig",
    "EmailServiceConfig",
    "ProxiedEmailServiceConfig",
    "StandardEmailServiceConfig",
    "AuthMethodConfig",
    "OtpAuthMethodConfig",
    "PasswordAuthMethodConfig",
    "PasskeyAuthMethodConfig",
    "ConnectedAccountConfig",
    "Permission",
    "PermissionEdge",
    "CuidMixin",
    "ProjectConfigMixin",
    "TimestampMixin",
    "ProjectConfigChildModel",
]
