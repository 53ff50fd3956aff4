"""Domain exceptions for the task tracker.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class TaskTrackerException(Exception):
    """Base exception for all task tracker errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field errors, resource_id).
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
        """Return the JSON error body used by the API exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TaskTrackerException):
    """Raised when input validation fails.

    Carries every violated field, not just the first, in details["errors"]
    as a list of {"field": ..., "message": ...} dicts.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        errors: list[dict[str, str]] | None = None,
    ) -> None:
        """Initialize with message and either a single field or a list of field errors.

        Args:
            message: Description of the validation failure.
            field: Optional single field that failed validation.
            errors: Optional list of field errors (field + message).
        """
        field_errors = list(errors or [])
        if field and not field_errors:
            field_errors.append({"field": field, "message": message})
        details: dict[str, Any] = {}
        if field_errors:
            details["errors"] = field_errors
        super().__init__(message, "VALIDATION_ERROR", details)

    @property
    def fields(self) -> list[str]:
        """Names of all fields that failed validation, in report order."""
        return [e["field"] for e in self.details.get("errors", [])]


class AuthenticationException(TaskTrackerException):
    """Raised when the bearer token is missing, invalid, or expired."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResourceNotFoundException(TaskTrackerException):
    """Raised when a requested resource is absent or not owned by the caller.

    The two cases are deliberately indistinguishable to the caller.
    """

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'task').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )
