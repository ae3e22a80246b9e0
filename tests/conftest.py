"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database sessions, seeded roster rows, service mocks
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from datetime import date, time
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine bound to a single shared connection
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    import tutorschool.boundary.db.models  # noqa: F401
    from tutorschool.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    """Session factory configured like the application's."""
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_async_db(test_session_factory):
    """
    Create in-memory SQLite async database session for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    async with test_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def student(test_async_db):
    """Persisted student Alice Smith."""
    from tutorschool.boundary.db.CRUD.student_crud import student_crud

    return await student_crud.create(
        test_async_db,
        first_name="Alice",
        last_name="Smith",
        school_id="school-1",
    )


@pytest.fixture
async def group(test_async_db):
    """Persisted group Beginners."""
    from tutorschool.boundary.db.CRUD.student_crud import group_crud

    return await group_crud.create(test_async_db, name="Beginners", school_id="school-1")


@pytest.fixture
def lesson_date() -> date:
    """A Monday."""
    return date(2024, 5, 6)


@pytest.fixture
def make_lesson(test_async_db, lesson_date):
    """
    Factory persisting lesson sessions for teacher-1 on lesson_date.

    Returns:
        Callable: async (start "HH:MM", duration, **overrides) -> LessonSessionModel
    """
    from tutorschool.boundary.db.CRUD.lesson_session_crud import lesson_session_crud
    from tutorschool.boundary.db.models.lesson_session_model import LessonSessionStatus

    async def _make(start: str, duration: int | None = 60, **overrides):
        hours, minutes = (int(part) for part in start.split(":"))
        values = {
            "teacher_id": "teacher-1",
            "scheduled_date": lesson_date,
            "start_time": time(hours, minutes),
            "duration_minutes": duration,
            "status": LessonSessionStatus.SCHEDULED,
        }
        values.update(overrides)
        return await lesson_session_crud.create(test_async_db, **values)

    return _make


@pytest.fixture
def mock_lesson_session_service():
    """
    Create mock LessonSessionService for testing.

    Returns:
        AsyncMock: Mocked service with async methods
    """
    service = AsyncMock()
    service.db = AsyncMock()
    return service


@pytest.fixture
def session_id() -> uuid.UUID:
    """Generate a test lesson session ID."""
    return uuid.uuid4()
