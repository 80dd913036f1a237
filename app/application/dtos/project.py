"""DTOs for project provisioning and the flattened project view (no dependency on ORM)."""

from dataclasses import dataclass, field

from app.domain.enums import VariantType


# Creation request


@dataclass(frozen=True)
class DomainCreate:
    domain: str
    handler_path: str


@dataclass(frozen=True)
class OAuthProviderCreate:
    """Requested OAuth provider. Credentials are only read for standard providers."""

    id: str
    type: VariantType
    enabled: bool
    client_id: str | None = None
    client_secret: str | None = None
    facebook_config_id: str | None = None
    microsoft_tenant_id: str | None = None


@dataclass(frozen=True)
class EmailConfigCreate:
    """Requested email service. All SMTP fields are required when type is standard."""

    type: VariantType
    host: str | None = None
    port: int | None = None
    username: str | None = None
    password: str | None = None
    sender_email: str | None = None
    sender_name: str | None = None


@dataclass(frozen=True)
class ProjectConfigCreate:
    """Config overrides for a new project. None means "use the default"."""

    sign_up_enabled: bool | None = None
    allow_localhost: bool | None = None
    credential_enabled: bool | None = None
    magic_link_enabled: bool | None = None
    passkey_enabled: bool | None = None
    create_team_on_sign_up: bool | None = None
    client_team_creation_enabled: bool | None = None
    client_user_deletion_enabled: bool | None = None
    domains: tuple[DomainCreate, ...] = ()
    oauth_providers: tuple[OAuthProviderCreate, ...] = ()
    email_config: EmailConfigCreate | None = None


@dataclass(frozen=True)
class ProjectCreate:
    display_name: str
    description: str | None = None
    is_production_mode: bool | None = None
    config: ProjectConfigCreate = field(default_factory=ProjectConfigCreate)


# Flattened read view


@dataclass(frozen=True)
class DomainResult:
    domain: str
    handler_path: str


@dataclass(frozen=True)
class OAuthProviderResult:
    """OAuth provider as exposed by the API. Credential fields are None for shared providers."""

    id: str
    enabled: bool
    type: VariantType
    client_id: str | None = None
    client_secret: str | None = None
    facebook_config_id: str | None = None
    microsoft_tenant_id: str | None = None


@dataclass(frozen=True)
class EmailConfigResult:
    """Email service as exposed by the API. SMTP fields are None for the shared service."""

    type: VariantType
    host: str | None = None
    port: int | None = None
    username: str | None = None
    password: str | None = None
    sender_email: str | None = None
    sender_name: str | None = None


@dataclass(frozen=True)
class PermissionRef:
    id: str


@dataclass(frozen=True)
class ProjectConfigResult:
    id: str
    allow_localhost: bool
    sign_up_enabled: bool
    credential_enabled: bool
    magic_link_enabled: bool
    passkey_enabled: bool
    create_team_on_sign_up: bool
    client_team_creation_enabled: bool
    client_user_deletion_enabled: bool
    legacy_global_jwt_signing: bool
    domains: list[DomainResult]
    oauth_providers: list[OAuthProviderResult]
    enabled_oauth_providers: list[OAuthProviderResult]
    email_config: EmailConfigResult
    team_creator_default_permissions: list[PermissionRef]
    team_member_default_permissions: list[PermissionRef]


@dataclass(frozen=True)
class ProjectResult:
    """Flattened project view (read model returned by get and create)."""

    id: str
    display_name: str
    description: str
    created_at_millis: int
    user_count: int
    is_production_mode: bool
    config: ProjectConfigResult
