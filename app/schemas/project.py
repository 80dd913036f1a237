"""Project API schemas: creation request and flattened project view."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from app.application.dtos.project import (
    DomainCreate,
    EmailConfigCreate,
    OAuthProviderCreate,
    ProjectConfigCreate,
    ProjectCreate,
)
from app.domain.enums import VariantType


class DomainRequest(BaseModel):
    domain: str = Field(..., min_length=1)
    handler_path: str = Field(..., min_length=1)


class OAuthProviderRequest(BaseModel):
    """OAuth provider to configure. client_id/client_secret are required for standard providers."""

    id: str = Field(..., min_length=1, description="Provider id (e.g. google)")
    type: Literal["shared", "standard"]
    enabled: bool
    client_id: str | None = None
    client_secret: str | None = None
    facebook_config_id: str | None = None
    microsoft_tenant_id: str | None = None


class EmailConfigRequest(BaseModel):
    """Email service to configure. Every SMTP field is required for standard."""

    type: Literal["shared", "standard"]
    host: str | None = None
    port: int | None = None
    username: str | None = None
    password: str | None = None
    sender_email: str | None = None
    sender_name: str | None = None


class ProjectConfigCreateRequest(BaseModel):
    """Config overrides; omitted fields take server defaults."""

    sign_up_enabled: bool | None = None
    allow_localhost: bool | None = None
    credential_enabled: bool | None = None
    magic_link_enabled: bool | None = None
    passkey_enabled: bool | None = None
    create_team_on_sign_up: bool | None = None
    client_team_creation_enabled: bool | None = None
    client_user_deletion_enabled: bool | None = None
    domains: list[DomainRequest] = Field(default_factory=list)
    oauth_providers: list[OAuthProviderRequest] = Field(default_factory=list)
    email_config: EmailConfigRequest | None = None


class ProjectCreateRequest(BaseModel):
    """Request body for POST /projects."""

    display_name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    is_production_mode: bool | None = None
    config: ProjectConfigCreateRequest | None = None

    def to_dto(self) -> ProjectCreate:
        """Map to the application command (no pydantic past the API layer)."""
        config = self.config or ProjectConfigCreateRequest()
        email = config.email_config
        return ProjectCreate(
            display_name=self.display_name,
            description=self.description,
            is_production_mode=self.is_production_mode,
            config=ProjectConfigCreate(
                sign_up_enabled=config.sign_up_enabled,
                allow_localhost=config.allow_localhost,
                credential_enabled=config.credential_enabled,
                magic_link_enabled=config.magic_link_enabled,
                passkey_enabled=config.passkey_enabled,
                create_team_on_sign_up=config.create_team_on_sign_up,
                client_team_creation_enabled=config.client_team_creation_enabled,
                client_user_deletion_enabled=config.client_user_deletion_enabled,
                domains=tuple(
                    DomainCreate(domain=d.domain, handler_path=d.handler_path)
                    for d in config.domains
                ),
                oauth_providers=tuple(
                    OAuthProviderCreate(
                        id=p.id,
                        type=VariantType(p.type),
                        enabled=p.enabled,
                        client_id=p.client_id,
                        client_secret=p.client_secret,
                        facebook_config_id=p.facebook_config_id,
                        microsoft_tenant_id=p.microsoft_tenant_id,
                    )
                    for p in config.oauth_providers
                ),
                email_config=(
                    EmailConfigCreate(
                        type=VariantType(email.type),
                        host=email.host,
                        port=email.port,
                        username=email.username,
                        password=email.password,
                        sender_email=email.sender_email,
                        sender_name=email.sender_name,
                    )
                    if email is not None
                    else None
                ),
            ),
        )


class DomainResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    domain: str
    handler_path: str


class OAuthProviderResponse(BaseModel):
    """OAuth provider; credential fields are omitted for shared providers."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    enabled: bool
    type: VariantType
    client_id: str | None = None
    client_secret: str | None = None
    facebook_config_id: str | None = None
    microsoft_tenant_id: str | None = None


class EmailConfigResponse(BaseModel):
    """Email service; SMTP fields are omitted for the shared service."""

    model_config = ConfigDict(from_attributes=True)

    type: VariantType
    host: str | None = None
    port: int | None = None
    username: str | None = None
    password: str | None = None
    sender_email: str | None = None
    sender_name: str | None = None


class PermissionRefResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str


class ProjectConfigResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

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
    domains: list[DomainResponse]
    oauth_providers: list[OAuthProviderResponse]
    enabled_oauth_providers: list[OAuthProviderResponse]
    email_config: EmailConfigResponse
    team_creator_default_permissions: list[PermissionRefResponse]
    team_member_default_permissions: list[PermissionRefResponse]


class ProjectResponse(BaseModel):
    """Flattened project view (GET /projects/{id}, POST /projects)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    display_name: str
    description: str
    created_at_millis: int
    user_count: int
    is_production_mode: bool
    config: ProjectConfigResponse
