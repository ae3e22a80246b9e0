"""
Lesson session validation utilities.

Business rules not covered by the Pydantic request models.

Dependencies: tutorschool.models.lesson_session
System role: Lesson session request validation
"""

from datetime import date

from tutorschool.core.exceptions import ValidationError
from tutorschool.models.lesson_session import CreateLessonSessionRequest


def validate_session_creation(request: CreateLessonSessionRequest) -> None:
    """
    Validate lesson session creation request.

    Raises:
        ValidationError: If the teacher id is blank
    """
    if not request.teacher_id.strip():
        raise ValidationError("Teacher id cannot be empty or whitespace-only", field="teacher_id")


def validate_date_range(date_from: date | None, date_to: date | None) -> None:
    """
    Validate a listing date window.

    Raises:
        ValidationError: If date_from is after date_to
    """
    if date_from and date_to and date_from > date_to:
        raise ValidationError("date_from must not be after date_to", field="date_from")
