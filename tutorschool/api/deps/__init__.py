"""FastAPI dependency factories."""

from tutorschool.api.deps.dependencies import (
    get_currency_service,
    get_group_service,
    get_lesson_session_service,
    get_schedule_validator,
    get_service_cache,
    get_settings_dependency,
    get_student_service,
)

__all__ = [
    "get_currency_service",
    "get_group_service",
    "get_lesson_session_service",
    "get_schedule_validator",
    "get_service_cache",
    "get_settings_dependency",
    "get_student_service",
]
