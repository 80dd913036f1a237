"""Resolve exactly-one-of sub-records into tagged variants, in both directions.

Read direction: an OAuth provider or email service row carries two optional
child rows (shared and standard); exactly one must be present. Anything else
is a write-path bug and raises InvariantViolationException.

Write direction: a creation request entry declares its variant through
``type``; missing or disallowed input raises ValidationException.
"""

from __future__ import annotations

from typing import Any

from app.application.dtos.project import EmailConfigCreate, OAuthProviderCreate
from app.core.constants import SHARED_OAUTH_PROVIDERS, STANDARD_OAUTH_PROVIDERS
from app.domain.enums import VariantType
from app.domain.exceptions import InvariantViolationException, ValidationException
from app.domain.value_objects.core import (
    EmailVariant,
    OAuthVariant,
    SharedEmailVariant,
    SharedOAuthVariant,
    StandardEmailVariant,
    StandardOAuthVariant,
)

_STANDARD_EMAIL_FIELDS = (
    "host",
    "port",
    "username",
    "password",
    "sender_email",
    "sender_name",
)


def resolve_oauth_provider(provider: Any, *, project_id: str) -> OAuthVariant:
    """Return the variant of a stored OAuth provider config.

    Raises:
        InvariantViolationException: If both or neither variant is populated.
    """
    shared = provider.proxied_oauth_config
    standard = provider.standard_oauth_config
    if (shared is None) == (standard is None):
        raise InvariantViolationException(
            f"Exactly one of the provider configs should be set on provider config "
            f"'{provider.id}' of project '{project_id}'",
            project_id=project_id,
            oauth_provider_config_id=provider.id,
        )
    if shared is not None:
        return SharedOAuthVariant(provider_type=shared.type)
    return StandardOAuthVariant(
        provider_type=standard.type,
        client_id=standard.client_id,
        client_secret=standard.client_secret,
        facebook_config_id=standard.facebook_config_id,
        microsoft_tenant_id=standard.microsoft_tenant_id,
    )


def resolve_email_service(email_service: Any, *, project_id: str) -> EmailVariant:
    """Return the variant of a project's email service config.

    Raises:
        InvariantViolationException: If the config is missing, or both or
            neither variant is populated.
    """
    if email_service is None:
        raise InvariantViolationException(
            f"Email service config should be set on project '{project_id}'",
            project_id=project_id,
        )
    shared = email_service.proxied_email_service_config
    standard = email_service.standard_email_service_config
    if (shared is None) == (standard is None):
        raise InvariantViolationException(
            f"Exactly one of the email service configs should be set on project "
            f"'{project_id}'",
            project_id=project_id,
            email_service_config_id=email_service.id,
        )
    if shared is not None:
        return SharedEmailVariant()
    return StandardEmailVariant(
        host=standard.host,
        port=standard.port,
        username=standard.username,
        password=standard.password,
        sender_email=standard.sender_email,
        sender_name=standard.sender_name,
    )


def oauth_variant_from_request(entry: OAuthProviderCreate) -> OAuthVariant:
    """Validate a requested OAuth provider and return the variant to store.

    The stored provider type is the uppercased provider id.

    Raises:
        ValidationException: If the provider id is not allowed for its type,
            or a standard provider lacks client_id or client_secret.
    """
    if entry.type == VariantType.SHARED:
        if entry.id not in SHARED_OAUTH_PROVIDERS:
            raise ValidationException(
                f"'{entry.id}' is not a valid shared OAuth provider",
                field="oauth_providers.id",
            )
        return SharedOAuthVariant(provider_type=entry.id.upper())

    if entry.id not in STANDARD_OAUTH_PROVIDERS:
        raise ValidationException(
            f"'{entry.id}' is not a valid standard OAuth provider",
            field="oauth_providers.id",
        )
    if entry.client_id is None:
        raise ValidationException(
            "client_id is required", field="oauth_providers.client_id"
        )
    if entry.client_secret is None:
        raise ValidationException(
            "client_secret is required", field="oauth_providers.client_secret"
        )
    return StandardOAuthVariant(
        provider_type=entry.id.upper(),
        client_id=entry.client_id,
        client_secret=entry.client_secret,
        facebook_config_id=entry.facebook_config_id,
        microsoft_tenant_id=entry.microsoft_tenant_id,
    )


def email_variant_from_request(entry: EmailConfigCreate | None) -> EmailVariant:
    """Validate a requested email service; no request means the shared service.

    Raises:
        ValidationException: For the first missing field of a standard config.
    """
    if entry is None or entry.type == VariantType.SHARED:
        return SharedEmailVariant()
    for name in _STANDARD_EMAIL_FIELDS:
        if getattr(entry, name) is None:
            raise ValidationException(
                f"{name} is required", field=f"email_config.{name}"
            )
    return StandardEmailVariant(
        host=entry.host,
        port=entry.port,
        username=entry.username,
        password=entry.password,
        sender_email=entry.sender_email,
        sender_name=entry.sender_name,
    )
