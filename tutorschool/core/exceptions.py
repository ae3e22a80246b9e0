"""
Exception hierarchy for the tutoring school application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class TutorSchoolException(Exception):
    """Base exception for all tutoring school application errors."""

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


class ValidationError(TutorSchoolException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class NotFoundError(TutorSchoolException):
    """Raised when a requested record does not exist."""

    def __init__(
        self,
        entity: str,
        entity_id: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details[f"{entity}_id"] = entity_id
        super().__init__(f"{entity.replace('_', ' ').capitalize()} not found: {entity_id}", details)


class LessonSessionNotFoundError(NotFoundError):
    """Raised when a lesson session cannot be found."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        super().__init__("lesson_session", session_id, details)


class StudentNotFoundError(NotFoundError):
    """Raised when a student cannot be found."""

    def __init__(self, student_id: str, details: dict[str, Any] | None = None) -> None:
        super().__init__("student", student_id, details)


class GroupNotFoundError(NotFoundError):
    """Raised when a group cannot be found."""

    def __init__(self, group_id: str, details: dict[str, Any] | None = None) -> None:
        super().__init__("group", group_id, details)


class ScheduleConflictError(TutorSchoolException):
    """Raised when a booking overlaps the teacher's existing sessions."""

    def __init__(self, result: Any, details: dict[str, Any] | None = None) -> None:
        """
        Initialize schedule conflict error.

        Args:
            result: TeacherOverlapValidationResult describing the conflicts
            details: Additional context
        """
        self.result = result
        super().__init__(result.conflict_message or "Schedule conflict", details)


class ScheduleCheckError(TutorSchoolException):
    """Raised when the conflict check cannot be performed and fail-open is disabled."""

    def __init__(
        self,
        message: str,
        teacher_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if teacher_id:
            details["teacher_id"] = teacher_id
        super().__init__(message, details)


class ExchangeRateError(TutorSchoolException):
    """Raised when the exchange rate provider cannot be reached or answers badly."""

    def __init__(
        self,
        message: str,
        base_currency: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if base_currency:
            details["base_currency"] = base_currency
        super().__init__(message, details)


class UnsupportedCurrencyError(ValidationError):
    """Raised when a currency code has no known rate."""

    def __init__(self, currency: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Unsupported currency: {currency}", field="currency", details=details)
