"""
Exception hierarchy for the College Directory application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DirectoryException(Exception):
    """Base exception for all College Directory errors."""

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
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class DatasetLoadError(DirectoryException):
    """Raised when the mock dataset cannot be read or mapped."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize dataset load error.

        Args:
            message: Error message
            path: Dataset path that failed to load
            details: Additional context
        """
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)


class RecordNotFoundError(DirectoryException):
    """Raised when a record cannot be found at some level of the hierarchy."""

    kind = "record"

    def __init__(self, record_id: int, details: dict[str, Any] | None = None) -> None:
        """
        Initialize not found error.

        Args:
            record_id: ID of the missing record
            details: Additional context (e.g. parent ids)
        """
        self.record_id = record_id
        super().__init__(f"{self.kind.capitalize()} {record_id} not found", details)


class CollegeNotFoundError(RecordNotFoundError):
    """Raised when a college cannot be found."""

    kind = "college"


class DepartmentNotFoundError(RecordNotFoundError):
    """Raised when a department cannot be found."""

    kind = "department"


class ClassNotFoundError(RecordNotFoundError):
    """Raised when a class cannot be found."""

    kind = "class"


class StudentNotFoundError(RecordNotFoundError):
    """Raised when a student cannot be found."""

    kind = "student"


class InvalidQueryError(DirectoryException):
    """Raised when a search or listing query is malformed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid query error.

        Args:
            message: Error message
            field: Query parameter that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)
