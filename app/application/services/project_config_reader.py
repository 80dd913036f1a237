"""Flatten a loaded project configuration graph into the API view.

The output is deterministic: OAuth providers are sorted by id, domains by
domain, default permission lists by id. Malformed data (missing email
service, both or neither variant on a sub-record) is never repaired; it
raises InvariantViolationException.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from app.application.dtos.project import (
    DomainResult,
    EmailConfigResult,
    OAuthProviderResult,
    PermissionRef,
    ProjectConfigResult,
    ProjectResult,
)
from app.application.services.variant_resolver import (
    resolve_email_service,
    resolve_oauth_provider,
)
from app.domain.enums import TeamSystemPermission
from app.domain.exceptions import InvariantViolationException
from app.domain.value_objects.core import (
    EmailVariant,
    OAuthVariant,
    StandardEmailVariant,
    StandardOAuthVariant,
)
from app.shared.utils.datetime import to_timestamp_ms


def _oauth_provider_result(variant: OAuthVariant, enabled: bool) -> OAuthProviderResult:
    if isinstance(variant, StandardOAuthVariant):
        return OAuthProviderResult(
            id=variant.provider_type.lower(),
            enabled=enabled,
            type=variant.kind,
            client_id=variant.client_id,
            client_secret=variant.client_secret,
            facebook_config_id=variant.facebook_config_id,
            microsoft_tenant_id=variant.microsoft_tenant_id,
        )
    return OAuthProviderResult(
        id=variant.provider_type.lower(), enabled=enabled, type=variant.kind
    )


def _email_config_result(variant: EmailVariant) -> EmailConfigResult:
    if isinstance(variant, StandardEmailVariant):
        return EmailConfigResult(
            type=variant.kind,
            host=variant.host,
            port=variant.port,
            username=variant.username,
            password=variant.password,
            sender_email=variant.sender_email,
            sender_name=variant.sender_name,
        )
    return EmailConfigResult(type=variant.kind)


def _system_permission_id(name: str, project_id: str) -> str:
    try:
        return TeamSystemPermission(name).public_id
    except ValueError:
        raise InvariantViolationException(
            f"Unknown team system permission '{name}' on project '{project_id}'",
            project_id=project_id,
            system_permission=name,
        ) from None


def _default_permissions(
    custom_ids: Iterable[str], system_names: Iterable[str], project_id: str
) -> list[PermissionRef]:
    # Union without dedupe: a custom id equal to a system id shows up twice.
    ids = list(custom_ids)
    ids.extend(_system_permission_id(name, project_id) for name in system_names)
    return [PermissionRef(id=pid) for pid in sorted(ids)]


class ProjectConfigReader:
    """Reads the flattened API view out of a fully loaded Project graph.

    The graph must be eager-loaded (see full_project_options); the reader
    performs no I/O.
    """

    def read(self, project: Any, *, user_count: int) -> ProjectResult:
        """Return the flattened view of project.

        Raises:
            InvariantViolationException: On any missing exactly-one-of variant
                or a missing email service config.
        """
        config = project.config
        auth_methods = list(config.auth_method_configs)

        oauth_providers = sorted(
            (
                _oauth_provider_result(
                    resolve_oauth_provider(
                        method.oauth_provider_config, project_id=project.id
                    ),
                    method.enabled,
                )
                for method in auth_methods
                if method.oauth_provider_config is not None
            ),
            key=lambda provider: provider.id,
        )

        email_config = _email_config_result(
            resolve_email_service(config.email_service_config, project_id=project.id)
        )

        return ProjectResult(
            id=project.id,
            display_name=project.display_name,
            description=project.description or "",
            created_at_millis=to_timestamp_ms(project.created_at),
            user_count=user_count,
            is_production_mode=project.is_production_mode,
            config=ProjectConfigResult(
                id=config.id,
                allow_localhost=config.allow_localhost,
                sign_up_enabled=config.sign_up_enabled,
                credential_enabled=any(
                    m.enabled and m.password_config is not None for m in auth_methods
                ),
                magic_link_enabled=any(
                    m.enabled and m.otp_config is not None for m in auth_methods
                ),
                passkey_enabled=any(
                    m.enabled and m.passkey_config is not None for m in auth_methods
                ),
                create_team_on_sign_up=config.create_team_on_sign_up,
                client_team_creation_enabled=config.client_team_creation_enabled,
                client_user_deletion_enabled=config.client_user_deletion_enabled,
                legacy_global_jwt_signing=config.legacy_global_jwt_signing,
                domains=sorted(
                    (
                        DomainResult(domain=d.domain, handler_path=d.handler_path)
                        for d in config.domains
                    ),
                    key=lambda d: d.domain,
                ),
                oauth_providers=oauth_providers,
                enabled_oauth_providers=[p for p in oauth_providers if p.enabled],
                email_config=email_config,
                team_creator_default_permissions=_default_permissions(
                    (
                        p.queryable_id
                        for p in config.permissions
                        if p.is_default_team_creator_permission
                    ),
                    config.team_create_default_system_permissions or (),
                    project.id,
                ),
                team_member_default_permissions=_default_permissions(
                    (
                        p.queryable_id
                        for p in config.permissions
                        if p.is_default_team_member_permission
                    ),
                    config.team_member_default_system_permissions or (),
                    project.id,
                ),
            ),
        )
