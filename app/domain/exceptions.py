"""Domain exceptions for the project configuration service.

Defines domain-level exceptions that represent caller errors and broken
internal invariants. These exceptions are independent of infrastructure
concerns. Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class PlatformException(Exception):
    """Base exception for all application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, record id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body (error, message, details)."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(PlatformException):
    """Raised when caller input is malformed or incomplete.

    Examples: a standard OAuth provider without client_secret, an unknown
    provider id for its declared type, a standard email config missing host.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class InvariantViolationException(PlatformException):
    """Raised when stored or in-flight data breaks an internal consistency rule.

    Never caused by caller input: both/neither variant populated on a
    sub-record, a config without email service, an OAuth entry that vanished
    between creation and auth-method wiring. Always fatal to the operation.
    """

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize with message and record context.

        Args:
            message: Description of the broken invariant.
            **context: Identifiers of the offending record (e.g. project_id).
        """
        super().__init__(message, "INVARIANT_VIOLATION", dict(context))


class ProjectNotFoundException(PlatformException):
    """Raised when a requested project is not found."""

    def __init__(self, project_id: str) -> None:
        super().__init__(
            f"Project not found: {project_id}",
            "PROJECT_NOT_FOUND",
            {"project_id": project_id},
        )


class SqlNotConfiguredException(PlatformException):
    """Raised when an operation requires Postgres but the database is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
