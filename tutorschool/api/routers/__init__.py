"""API routers."""

from .currencies import router as currencies_router
from .health import router as health_router
from .lesson_sessions import router as lesson_sessions_router
from .schedule import router as schedule_router
from .students import groups_router, students_router

__all__ = [
    "currencies_router",
    "groups_router",
    "health_router",
    "lesson_sessions_router",
    "schedule_router",
    "students_router",
]
