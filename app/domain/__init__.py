"""Domain layer: value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import (
    ContactChannelType,
    PermissionScope,
    TeamSystemPermission,
    VariantType,
)
from app.domain.exceptions import (
    InvariantViolationException,
    PlatformException,
    ProjectNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)
from app.domain.value_objects import (
    ManagedProjects,
    SharedEmailVariant,
    SharedOAuthVariant,
    StandardEmailVariant,
    StandardOAuthVariant,
)

__all__ = [
    # Enums
    "ContactChannelType",
    "PermissionScope",
    "TeamSystemPermission",
    "VariantType",
    # Exceptions
    "InvariantViolationException",
    "PlatformException",
    "ProjectNotFoundException",
    "SqlNotConfiguredException",
    "ValidationException",
    # Value objects
    "ManagedProjects",
    "SharedEmailVariant",
    "SharedOAuthVariant",
    "StandardEmailVariant",
    "StandardOAuthVariant",
]
