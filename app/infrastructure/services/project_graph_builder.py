"""Builds the normalized configuration graph of a new project.

Input is a creation request whose variants were already validated and
resolved (see variant_resolver). Output is a transient Project graph with
explicit ids; nothing touches the session here.
"""

from __future__ import annotations

from collections.abc import Sequence

from app.application.dtos.project import (
    OAuthProviderCreate,
    ProjectConfigCreate,
    ProjectCreate,
)
from app.domain.enums import ContactChannelType
from app.domain.exceptions import InvariantViolationException
from app.domain.value_objects.core import (
    EmailVariant,
    OAuthVariant,
    SharedOAuthVariant,
    StandardEmailVariant,
)
from app.infrastructure.persistence.models import (
    AuthMethodConfig,
    ConnectedAccountConfig,
    EmailServiceConfig,
    OAuthProviderConfig,
    OtpAuthMethodConfig,
    PasskeyAuthMethodConfig,
    PasswordAuthMethodConfig,
    Project,
    ProjectConfig,
    ProjectDomain,
    ProxiedEmailServiceConfig,
    ProxiedOAuthProviderConfig,
    StandardEmailServiceConfig,
    StandardOAuthProviderConfig,
)
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid


class ProjectGraphBuilder:
    """Expands a flattened creation request into Project + ProjectConfig rows."""

    def build_project(
        self,
        project_id: str,
        data: ProjectCreate,
        oauth_providers: Sequence[tuple[OAuthProviderCreate, OAuthVariant]],
        email: EmailVariant,
    ) -> Project:
        """Project, config, domains, OAuth providers and email service."""
        now = utc_now()
        config = self._build_config(data.config)
        config.domains = [
            ProjectDomain(
                id=generate_cuid(), domain=item.domain, handler_path=item.handler_path
            )
            for item in data.config.domains
        ]
        config.oauth_provider_configs = [
            self._build_oauth_provider(entry.id, variant)
            for entry, variant in oauth_providers
        ]
        config.email_service_config = self._build_email_service(email)
        return Project(
            id=project_id,
            display_name=data.display_name,
            description=data.description,
            is_production_mode=bool(data.is_production_mode),
            config=config,
            created_at=now,
            updated_at=now,
        )

    def attach_auth_methods(
        self, config: ProjectConfig, requested: ProjectConfigCreate
    ) -> None:
        """Auth methods for every OAuth provider plus OTP/password/passkey,
        and the connected-account mirror of the OAuth subset.

        Raises:
            InvariantViolationException: If a created provider has no entry
                in the request it was created from.
        """
        by_id = {entry.id: entry for entry in requested.oauth_providers}
        auth_methods: list[AuthMethodConfig] = []
        connected_accounts: list[ConnectedAccountConfig] = []
        for provider in config.oauth_provider_configs:
            entry = by_id.get(provider.provider_id)
            if entry is None:
                raise InvariantViolationException(
                    f"OAuth provider '{provider.provider_id}' not found in the request",
                    project_config_id=config.id,
                    provider_id=provider.provider_id,
                )
            auth_methods.append(
                AuthMethodConfig(
                    id=generate_cuid(),
                    enabled=entry.enabled,
                    oauth_provider_config=provider,
                )
            )
            connected_accounts.append(
                ConnectedAccountConfig(
                    id=generate_cuid(),
                    enabled=entry.enabled,
                    oauth_provider_config=provider,
                )
            )

        if requested.magic_link_enabled:
            auth_methods.append(
                AuthMethodConfig(
                    id=generate_cuid(),
                    enabled=True,
                    otp_config=OtpAuthMethodConfig(
                        contact_channel_type=ContactChannelType.EMAIL.value
                    ),
                )
            )
        if requested.credential_enabled is None or requested.credential_enabled:
            auth_methods.append(
                AuthMethodConfig(
                    id=generate_cuid(),
                    enabled=True,
                    password_config=PasswordAuthMethodConfig(),
                )
            )
        if requested.passkey_enabled:
            auth_methods.append(
                AuthMethodConfig(
                    id=generate_cuid(),
                    enabled=True,
                    passkey_config=PasskeyAuthMethodConfig(),
                )
            )

        config.auth_method_configs = auth_methods
        config.connected_account_configs = connected_accounts

    def _build_config(self, requested: ProjectConfigCreate) -> ProjectConfig:
        # sign_up_enabled is left to the column default when not requested.
        flags: dict[str, bool] = {}
        if requested.sign_up_enabled is not None:
            flags["sign_up_enabled"] = requested.sign_up_enabled
        return ProjectConfig(
            id=generate_cuid(),
            allow_localhost=(
                True if requested.allow_localhost is None else requested.allow_localhost
            ),
            create_team_on_sign_up=bool(requested.create_team_on_sign_up),
            client_team_creation_enabled=bool(requested.client_team_creation_enabled),
            client_user_deletion_enabled=bool(requested.client_user_deletion_enabled),
            legacy_global_jwt_signing=False,
            team_create_default_system_permissions=[],
            team_member_default_system_permissions=[],
            **flags,
        )

    def _build_oauth_provider(
        self, provider_id: str, variant: OAuthVariant
    ) -> OAuthProviderConfig:
        provider = OAuthProviderConfig(id=generate_cuid(), provider_id=provider_id)
        if isinstance(variant, SharedOAuthVariant):
            provider.proxied_oauth_config = ProxiedOAuthProviderConfig(
                type=variant.provider_type
            )
        else:
            provider.standard_oauth_config = StandardOAuthProviderConfig(
                type=variant.provider_type,
                client_id=variant.client_id,
                client_secret=variant.client_secret,
                facebook_config_id=variant.facebook_config_id,
                microsoft_tenant_id=variant.microsoft_tenant_id,
            )
        return provider

    def _build_email_service(self, variant: EmailVariant) -> EmailServiceConfig:
        email_service = EmailServiceConfig(id=generate_cuid())
        if isinstance(variant, StandardEmailVariant):
            email_service.standard_email_service_config = StandardEmailServiceConfig(
                host=variant.host,
                port=variant.port,
                username=variant.username,
                password=variant.password,
                sender_email=variant.sender_email,
                sender_name=variant.sender_name,
            )
        else:
            email_service.proxied_email_service_config = ProxiedEmailServiceConfig()
        return email_service
