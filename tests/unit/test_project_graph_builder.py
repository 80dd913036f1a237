"""Unit tests for ProjectGraphBuilder (transient project graphs)."""

import pytest

from app.application.dtos.project import (
    DomainCreate,
    OAuthProviderCreate,
    ProjectConfigCreate,
    ProjectCreate,
)
from app.domain.enums import ContactChannelType, VariantType
from app.domain.exceptions import InvariantViolationException
from app.domain.value_objects.core import (
    SharedEmailVariant,
    SharedOAuthVariant,
    StandardEmailVariant,
    StandardOAuthVariant,
)
from app.infrastructure.services.project_graph_builder import ProjectGraphBuilder

GITHUB = OAuthProviderCreate(
    id="github",
    type=VariantType.STANDARD,
    enabled=False,
    client_id="cid",
    client_secret="csecret",
)
GOOGLE = OAuthProviderCreate(id="google", type=VariantType.SHARED, enabled=True)
VARIANTS = [
    (
        GITHUB,
        StandardOAuthVariant(
            provider_type="GITHUB", client_id="cid", client_secret="csecret"
        ),
    ),
    (GOOGLE, SharedOAuthVariant(provider_type="GOOGLE")),
]


def _build(config: ProjectConfigCreate | None = None, oauth=(), email=None):
    builder = ProjectGraphBuilder()
    data = ProjectCreate(display_name="Acme", config=config or ProjectConfigCreate())
    project = builder.build_project("p1", data, list(oauth), email or SharedEmailVariant())
    builder.attach_auth_methods(project.config, data.config)
    return project


def test_defaults_for_minimal_request() -> None:
    project = _build()
    config = project.config
    assert project.id == "p1"
    assert project.display_name == "Acme"
    assert project.description is None
    assert project.is_production_mode is False
    assert project.created_at is not None
    assert config.id
    assert config.allow_localhost is True
    assert config.create_team_on_sign_up is False
    assert config.client_team_creation_enabled is False
    assert config.client_user_deletion_enabled is False
    assert config.legacy_global_jwt_signing is False
    assert config.team_create_default_system_permissions == []
    assert config.team_member_default_system_permissions == []
    assert config.oauth_provider_configs == []
    assert config.connected_account_configs == []
    assert config.email_service_config.proxied_email_service_config is not None
    assert config.email_service_config.standard_email_service_config is None


def test_password_method_created_unless_credentials_disabled() -> None:
    default = _build().config.auth_method_configs
    assert len(default) == 1
    assert default[0].password_config is not None
    assert default[0].enabled is True

    disabled = _build(ProjectConfigCreate(credential_enabled=False))
    assert disabled.config.auth_method_configs == []


def test_magic_link_and_passkey_rows() -> None:
    config = _build(
        ProjectConfigCreate(
            credential_enabled=False, magic_link_enabled=True, passkey_enabled=True
        )
    ).config
    otp = [m for m in config.auth_method_configs if m.otp_config is not None]
    passkey = [m for m in config.auth_method_configs if m.passkey_config is not None]
    assert len(otp) == 1
    assert otp[0].otp_config.contact_channel_type == ContactChannelType.EMAIL.value
    assert len(passkey) == 1
    assert len(config.auth_method_configs) == 2


def test_oauth_providers_are_mirrored_into_auth_methods_and_connected_accounts() -> None:
    config = _build(
        ProjectConfigCreate(oauth_providers=(GITHUB, GOOGLE)), oauth=VARIANTS
    ).config
    providers = {p.provider_id: p for p in config.oauth_provider_configs}
    assert set(providers) == {"github", "google"}
    assert providers["github"].standard_oauth_config.client_secret == "csecret"
    assert providers["github"].proxied_oauth_config is None
    assert providers["google"].proxied_oauth_config.type == "GOOGLE"

    oauth_methods = {
        m.oauth_provider_config.provider_id: m.enabled
        for m in config.auth_method_configs
        if m.oauth_provider_config is not None
    }
    connected = {
        c.oauth_provider_config.provider_id: c.enabled
        for c in config.connected_account_configs
    }
    assert oauth_methods == {"github": False, "google": True}
    assert connected == oauth_methods


def test_provider_missing_from_request_is_invariant_violation() -> None:
    builder = ProjectGraphBuilder()
    data = ProjectCreate(
        display_name="Acme", config=ProjectConfigCreate(oauth_providers=(GOOGLE,))
    )
    project = builder.build_project("p1", data, VARIANTS, SharedEmailVariant())
    with pytest.raises(InvariantViolationException) as exc_info:
        builder.attach_auth_methods(project.config, data.config)
    assert exc_info.value.details["provider_id"] == "github"


def test_explicit_flags_and_domains() -> None:
    project = _build(
        ProjectConfigCreate(
            sign_up_enabled=False,
            allow_localhost=False,
            create_team_on_sign_up=True,
            client_team_creation_enabled=True,
            client_user_deletion_enabled=True,
            domains=(DomainCreate(domain="https://acme.example", handler_path="/auth"),),
        )
    )
    config = project.config
    assert config.sign_up_enabled is False
    assert config.allow_localhost is False
    assert config.create_team_on_sign_up is True
    assert config.client_team_creation_enabled is True
    assert config.client_user_deletion_enabled is True
    assert [(d.domain, d.handler_path) for d in config.domains] == [
        ("https://acme.example", "/auth")
    ]


def test_standard_email_service() -> None:
    email = StandardEmailVariant(
        host="smtp.example.com",
        port=587,
        username="mailer",
        password="secret",
        sender_email="no-reply@example.com",
        sender_name="Acme",
    )
    service = _build(email=email).config.email_service_config
    assert service.proxied_email_service_config is None
    assert service.standard_email_service_config.host == "smtp.example.com"
    assert service.standard_email_service_config.port == 587
