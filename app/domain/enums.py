"""Domain enumerations for the project configuration model.

Enums represent fixed sets of domain values (variant kinds, permission
scopes, built-in team permissions).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class VariantType(_ValuesMixin, str, Enum):
    """Kind of an exactly-one-of sub-record (OAuth provider, email service).

    SHARED is backed by the platform credential pool; STANDARD carries
    tenant-supplied credentials.
    """

    SHARED = "shared"
    STANDARD = "standard"


class PermissionScope(_ValuesMixin, str, Enum):
    """Scope a permission definition applies to."""

    TEAM = "TEAM"
    GLOBAL = "GLOBAL"


class TeamSystemPermission(_ValuesMixin, str, Enum):
    """Built-in team capabilities. Closed set; custom permissions are graph nodes."""

    UPDATE_TEAM = "UPDATE_TEAM"
    DELETE_TEAM = "DELETE_TEAM"
    READ_MEMBERS = "READ_MEMBERS"
    REMOVE_MEMBERS = "REMOVE_MEMBERS"
    INVITE_MEMBERS = "INVITE_MEMBERS"
    MANAGE_API_KEYS = "MANAGE_API_KEYS"

    @property
    def public_id(self) -> str:
        """Id exposed in the API (e.g. '$read_members')."""
        return f"${self.value.lower()}"


class ContactChannelType(_ValuesMixin, str, Enum):
    """Contact channel a one-time code is delivered through."""

    EMAIL = "EMAIL"
