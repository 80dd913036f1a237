"""Domain value objects for the project configuration model.

Tagged variants for the exactly-one-of sub-records (OAuth provider, email
service) and the typed managed-project registry stored on owner users.
Value objects are immutable; they have no identity, only value.
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from app.domain.enums import VariantType
from app.domain.exceptions import InvariantViolationException

MANAGED_PROJECT_IDS_KEY = "managedProjectIds"


@dataclass(frozen=True)
class SharedOAuthVariant:
    """OAuth provider backed by the platform's shared credential pool."""

    kind: ClassVar[VariantType] = VariantType.SHARED

    provider_type: str


@dataclass(frozen=True)
class StandardOAuthVariant:
    """OAuth provider with tenant-supplied client credentials."""

    kind: ClassVar[VariantType] = VariantType.STANDARD

    provider_type: str
    client_id: str
    client_secret: str
    facebook_config_id: str | None = None
    microsoft_tenant_id: str | None = None


@dataclass(frozen=True)
class SharedEmailVariant:
    """Outbound email through the platform's shared mail service."""

    kind: ClassVar[VariantType] = VariantType.SHARED


@dataclass(frozen=True)
class StandardEmailVariant:
    """Outbound email through a tenant-configured SMTP server."""

    kind: ClassVar[VariantType] = VariantType.STANDARD

    host: str
    port: int
    username: str
    password: str
    sender_email: str
    sender_name: str


OAuthVariant = SharedOAuthVariant | StandardOAuthVariant
EmailVariant = SharedEmailVariant | StandardEmailVariant


@dataclass(frozen=True)
class ManagedProjects:
    """Projects an owner user administers (server_metadata['managedProjectIds']).

    Ordered, without duplicates. Only this key is interpreted; merging back
    into metadata leaves every other key untouched.
    """

    project_ids: tuple[str, ...] = ()

    @classmethod
    def from_server_metadata(cls, server_metadata: Any) -> "ManagedProjects":
        """Parse the registry from free-form metadata.

        Missing metadata or key means an empty registry.

        Raises:
            InvariantViolationException: If metadata is not an object or the
                key does not hold a list of strings.
        """
        if server_metadata is None:
            return cls()
        if not isinstance(server_metadata, dict):
            raise InvariantViolationException(
                "Invalid server metadata, expected an object",
                server_metadata_type=type(server_metadata).__name__,
            )
        raw = server_metadata.get(MANAGED_PROJECT_IDS_KEY)
        if raw is None:
            return cls()
        if not isinstance(raw, list) or not all(isinstance(pid, str) for pid in raw):
            raise InvariantViolationException(
                "Invalid server metadata, expected managedProjectIds to be a string array",
                managed_project_ids=raw,
            )
        return cls(tuple(dict.fromkeys(raw)))

    def with_project(self, project_id: str) -> "ManagedProjects":
        """Return a registry that also contains project_id (appended once)."""
        if project_id in self.project_ids:
            return self
        return ManagedProjects((*self.project_ids, project_id))

    def merge_into(self, server_metadata: dict[str, Any] | None) -> dict[str, Any]:
        """Return a copy of server_metadata with this registry written back."""
        merged = dict(server_metadata or {})
        merged[MANAGED_PROJECT_IDS_KEY] = list(self.project_ids)
        return merged
