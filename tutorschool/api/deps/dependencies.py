"""
Dependency injection container.

Factory functions for FastAPI dependencies. Process-wide objects (the
exchange rate cache and client) live in ServiceCache; everything bound to
a database session is built per request.

Dependencies: tutorschool.configs, tutorschool.application, tutorschool.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tutorschool.application.adapters import SqlAlchemySessionStore
from tutorschool.application.services import (
    CurrencyService,
    GroupService,
    LessonSessionService,
    StudentService,
)
from tutorschool.boundary.currency import ExchangeRateClient
from tutorschool.boundary.db import get_async_db
from tutorschool.configs import Settings, get_settings
from tutorschool.core.cache import TTLCache
from tutorschool.core.scheduling import TeacherScheduleValidator


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._rates_cache = None
        self._exchange_rate_client = None

    @property
    def rates_cache(self) -> TTLCache:
        """Get cached exchange rate TTL cache."""
        if self._rates_cache is None:
            settings = get_settings()
            self._rates_cache = TTLCache(ttl_seconds=settings.currency.cache_ttl_seconds)
        return self._rates_cache

    @property
    def exchange_rate_client(self) -> ExchangeRateClient:
        """Get cached exchange rate client."""
        if self._exchange_rate_client is None:
            settings = get_settings()
            self._exchange_rate_client = ExchangeRateClient(
                base_url=settings.currency.api_base_url,
                timeout=settings.currency.request_timeout_seconds,
            )
        return self._exchange_rate_client

    def clear(self) -> None:
        """Clear all cached instances."""
        self._rates_cache = None
        self._exchange_rate_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_schedule_validator(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> TeacherScheduleValidator:
    """
    Get teacher schedule validator bound to the request's database session.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        TeacherScheduleValidator: Validator reading from the lesson_sessions table
    """
    return TeacherScheduleValidator(
        SqlAlchemySessionStore(db),
        fail_open=settings.scheduling.fail_open,
        default_duration=settings.scheduling.default_duration_minutes,
    )


def get_lesson_session_service(
    db: AsyncSession = Depends(get_async_db),
    validator: TeacherScheduleValidator = Depends(get_schedule_validator),
) -> LessonSessionService:
    """
    Get lesson session service instance.

    Args:
        db: Async database session (injected via Depends)
        validator: Schedule validator sharing the same session

    Returns:
        LessonSessionService: Lesson session service instance
    """
    return LessonSessionService(db=db, validator=validator)


def get_student_service(db: AsyncSession = Depends(get_async_db)) -> StudentService:
    """Get student service instance."""
    return StudentService(db=db)


def get_group_service(db: AsyncSession = Depends(get_async_db)) -> GroupService:
    """Get group service instance."""
    return GroupService(db=db)


def get_currency_service() -> CurrencyService:
    """
    Get currency service instance.

    The cache and client are process-wide so cached rates survive across
    requests.

    Returns:
        CurrencyService: Currency service instance
    """
    cache = get_service_cache()
    return CurrencyService(client=cache.exchange_rate_client, cache=cache.rates_cache)
