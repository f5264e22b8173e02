"""
Exception hierarchy for the course records service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class CourseRecordsException(Exception):
    """Base exception for all course records application errors."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the human-readable message."""
        return self.message


class ValidationError(CourseRecordsException):
    """Raised when input validation fails."""

    status_code = 400

    def __init__(
        self,
        message: str,
        fields: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            fields: Names of the fields that failed validation
            details: Additional context
        """
        details = details or {}
        if fields:
            details["fields"] = fields
        super().__init__(message, details)


class NotFoundError(CourseRecordsException):
    """Raised when a referenced identifier does not resolve."""

    status_code = 404

    def __init__(
        self,
        resource: str,
        resource_id: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            resource: Resource kind (e.g. "Course")
            resource_id: Identifier that was looked up
            details: Additional context
        """
        self.resource = resource
        self.resource_id = resource_id
        details = details or {}
        details["resource_id"] = str(resource_id)
        super().__init__(f"{resource} not found", details)


class ConflictError(CourseRecordsException):
    """Raised when a write collides with existing state."""

    status_code = 409


class InternalError(CourseRecordsException):
    """Raised when an unexpected store failure occurs."""

    status_code = 500
