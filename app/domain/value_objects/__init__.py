"""Domain value objects and shared value types."""

from app.domain.value_objects.core import (
    EmailVariant,
    ManagedProjects,
    OAuthVariant,
    SharedEmailVariant,
    SharedOAuthVariant,
    StandardEmailVariant,
    StandardOAuthVariant,
)

__all__ = [
    "EmailVariant",
    "ManagedProjects",
    "OAuthVariant",
    "SharedEmailVariant",
    "SharedOAuthVariant",
    "StandardEmailVariant",
    "StandardOAuthVariant",
]
