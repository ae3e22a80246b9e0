"""Application services orchestrating CRUD, scheduling and currency."""

from tutorschool.application.services.currency_service import CurrencyService
from tutorschool.application.services.lesson_session_service import (
    LessonSessionService,
    lesson_session_to_dict,
)
from tutorschool.application.services.roster_service import GroupService, StudentService

__all__ = [
    "CurrencyService",
    "GroupService",
    "LessonSessionService",
    "StudentService",
    "lesson_session_to_dict",
]
