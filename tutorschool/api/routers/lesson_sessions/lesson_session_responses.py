"""
Lesson session response mapping utilities.

Dependencies: tutorschool.models.lesson_session
System role: Lesson session response transformation
"""

from typing import Any

from tutorschool.models.lesson_session import LessonSessionResponse


def map_lesson_session_to_response(session_data: dict[str, Any]) -> LessonSessionResponse:
    """
    Transform lesson session dictionary into LessonSessionResponse.

    Args:
        session_data: Dictionary produced by LessonSessionService

    Returns:
        LessonSessionResponse: Pydantic model for API response
    """
    return LessonSessionResponse(**session_data)


def map_lesson_sessions_to_response(sessions_data: list[dict[str, Any]]) -> list[LessonSessionResponse]:
    return [map_lesson_session_to_response(s) for s in sessions_data]
