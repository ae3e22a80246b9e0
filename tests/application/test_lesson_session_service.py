"""
Test suite for LessonSessionService.

Runs the service with the real validator and an in-memory database so
booking, rescheduling and status changes go through the conflict check.

System role: Verification of lesson session use cases
"""

import uuid
from datetime import date, time
from unittest.mock import AsyncMock

import pytest

from tutorschool.application.adapters import SqlAlchemySessionStore
from tutorschool.application.services.lesson_session_service import LessonSessionService
from tutorschool.boundary.db.models.lesson_session_model import LessonSessionStatus
from tutorschool.core.exceptions import (
    LessonSessionNotFoundError,
    ScheduleCheckError,
    ScheduleConflictError,
    StudentNotFoundError,
    ValidationError,
)
from tutorschool.core.scheduling import TeacherScheduleValidator


@pytest.fixture
def service(test_async_db) -> LessonSessionService:
    """Provide LessonSessionService backed by the test database."""
    validator = TeacherScheduleValidator(SqlAlchemySessionStore(test_async_db))
    return LessonSessionService(db=test_async_db, validator=validator)


class TestCreateSession:
    """Test suite for LessonSessionService.create_session()."""

    async def test_create_session_should_book_free_slot(self, service, student, lesson_date) -> None:
        # Act
        created = await service.create_session(
            teacher_id="teacher-1",
            scheduled_date=lesson_date,
            start_time=time(10, 0),
            duration_minutes=60,
            student_id=student.id,
            school_id="school-1",
        )

        # Assert
        assert created["status"] == LessonSessionStatus.SCHEDULED
        assert created["display_name"] == "Alice Smith"
        assert created["is_group"] is False
        assert created["schedule_check"].has_conflict is False

    async def test_create_session_should_reject_overlap(
        self, service, make_lesson, student, lesson_date
    ) -> None:
        # Arrange: 10:00-11:00 already booked
        existing = await make_lesson("10:00", 60, student_id=student.id)

        # Act
        with pytest.raises(ScheduleConflictError) as exc_info:
            await service.create_session(
                teacher_id="teacher-1",
                scheduled_date=lesson_date,
                start_time=time(10, 30),
                duration_minutes=30,
                student_id=student.id,
            )

        # Assert
        result = exc_info.value.result
        assert result.has_conflict is True
        assert [c.id for c in result.conflicting_sessions] == [existing.id]

    async def test_create_session_should_allow_overlap_when_requested(
        self, service, make_lesson, group, lesson_date
    ) -> None:
        await make_lesson("10:00", 60, group_id=group.id)

        created = await service.create_session(
            teacher_id="teacher-1",
            scheduled_date=lesson_date,
            start_time=time(10, 30),
            duration_minutes=30,
            group_id=group.id,
            allow_conflicts=True,
        )

        assert created["schedule_check"].has_conflict is True
        assert created["display_name"] == "Beginners"
        assert created["is_group"] is True

    async def test_create_session_should_allow_back_to_back(
        self, service, make_lesson, student, lesson_date
    ) -> None:
        await make_lesson("10:00", 60, student_id=student.id)

        created = await service.create_session(
            teacher_id="teacher-1",
            scheduled_date=lesson_date,
            start_time=time(11, 0),
            duration_minutes=30,
            student_id=student.id,
        )

        assert created["schedule_check"].has_conflict is False

    async def test_create_session_should_ignore_cancelled_sessions(
        self, service, make_lesson, student, lesson_date
    ) -> None:
        await make_lesson("10:00", 60, student_id=student.id, status=LessonSessionStatus.CANCELLED)

        created = await service.create_session(
            teacher_id="teacher-1",
            scheduled_date=lesson_date,
            start_time=time(10, 0),
            student_id=student.id,
        )

        assert created["schedule_check"].has_conflict is False

    @pytest.mark.parametrize("both", [True, False])
    async def test_create_session_should_require_exactly_one_counterparty(
        self, service, lesson_date, both: bool
    ) -> None:
        ids = {"student_id": uuid.uuid4(), "group_id": uuid.uuid4()} if both else {}

        with pytest.raises(ValidationError):
            await service.create_session(
                teacher_id="teacher-1",
                scheduled_date=lesson_date,
                start_time=time(10, 0),
                **ids,
            )

    async def test_create_session_should_reject_unknown_student(self, service, lesson_date) -> None:
        with pytest.raises(StudentNotFoundError):
            await service.create_session(
                teacher_id="teacher-1",
                scheduled_date=lesson_date,
                start_time=time(10, 0),
                student_id=uuid.uuid4(),
            )

    async def test_create_session_should_propagate_fail_closed_error(
        self, test_async_db, student, lesson_date
    ) -> None:
        # Arrange
        store = AsyncMock()
        store.find_scheduled_sessions.side_effect = RuntimeError("db down")
        service = LessonSessionService(
            db=test_async_db,
            validator=TeacherScheduleValidator(store, fail_open=False),
        )

        # Act / Assert
        with pytest.raises(ScheduleCheckError):
            await service.create_session(
                teacher_id="teacher-1",
                scheduled_date=lesson_date,
                start_time=time(10, 0),
                student_id=student.id,
            )

    async def test_create_session_should_book_when_check_fails_open(
        self, test_async_db, student, lesson_date
    ) -> None:
        store = AsyncMock()
        store.find_scheduled_sessions.side_effect = RuntimeError("db down")
        service = LessonSessionService(db=test_async_db, validator=TeacherScheduleValidator(store))

        created = await service.create_session(
            teacher_id="teacher-1",
            scheduled_date=lesson_date,
            start_time=time(10, 0),
            student_id=student.id,
        )

        assert created["schedule_check"].check_failed is True


class TestRescheduleSession:
    """Test suite for LessonSessionService.reschedule_session()."""

    async def test_reschedule_should_not_conflict_with_itself(
        self, service, make_lesson, student, lesson_date
    ) -> None:
        lesson = await make_lesson("10:00", 60, student_id=student.id)

        moved = await service.reschedule_session(lesson.id, lesson_date, time(10, 30))

        assert moved["start_time"] == time(10, 30)
        assert moved["duration_minutes"] == 60
        assert moved["schedule_check"].has_conflict is False

    async def test_reschedule_should_reject_overlap_with_other_session(
        self, service, make_lesson, student, lesson_date
    ) -> None:
        # Arrange
        lesson = await make_lesson("09:00", 60, student_id=student.id)
        other = await make_lesson("12:00", 60, student_id=student.id)

        # Act
        with pytest.raises(ScheduleConflictError) as exc_info:
            await service.reschedule_session(lesson.id, lesson_date, time(12, 30), duration_minutes=45)

        # Assert
        assert [c.id for c in exc_info.value.result.conflicting_sessions] == [other.id]

    async def test_reschedule_should_move_to_another_date(self, service, make_lesson, student) -> None:
        lesson = await make_lesson("10:00", 60, student_id=student.id)

        moved = await service.reschedule_session(lesson.id, date(2024, 5, 8), time(9, 0), duration_minutes=90)

        assert moved["scheduled_date"] == date(2024, 5, 8)
        assert moved["duration_minutes"] == 90

    async def test_reschedule_should_raise_for_missing_session(self, service, session_id, lesson_date) -> None:
        with pytest.raises(LessonSessionNotFoundError):
            await service.reschedule_session(session_id, lesson_date, time(10, 0))


class TestStatusAndDelete:
    """Test suite for status changes, reads and deletes."""

    async def test_update_status_should_free_the_slot(
        self, service, make_lesson, student, lesson_date
    ) -> None:
        # Arrange
        lesson = await make_lesson("10:00", 60, student_id=student.id)

        # Act
        updated = await service.update_status(lesson.id, LessonSessionStatus.CANCELLED)
        rebooked = await service.create_session(
            teacher_id="teacher-1",
            scheduled_date=lesson_date,
            start_time=time(10, 0),
            student_id=student.id,
        )

        # Assert
        assert updated["status"] == LessonSessionStatus.CANCELLED
        assert rebooked["schedule_check"].has_conflict is False

    async def test_update_status_should_reject_reactivating_into_taken_slot(
        self, service, make_lesson, student, lesson_date
    ) -> None:
        # Arrange: 10:00 lesson cancelled, then the slot is booked again
        lesson = await make_lesson("10:00", 60, student_id=student.id)
        await service.update_status(lesson.id, LessonSessionStatus.CANCELLED)
        rebooked = await service.create_session(
            teacher_id="teacher-1",
            scheduled_date=lesson_date,
            start_time=time(10, 0),
            student_id=student.id,
        )

        # Act
        with pytest.raises(ScheduleConflictError) as exc_info:
            await service.update_status(lesson.id, LessonSessionStatus.SCHEDULED)

        # Assert
        assert [c.id for c in exc_info.value.result.conflicting_sessions] == [rebooked["id"]]
        assert (await service.get_session(lesson.id))["status"] == LessonSessionStatus.CANCELLED

    async def test_update_status_should_reactivate_free_slot_with_check(
        self, service, make_lesson, student
    ) -> None:
        lesson = await make_lesson("10:00", 60, student_id=student.id, status=LessonSessionStatus.CANCELLED)

        updated = await service.update_status(lesson.id, LessonSessionStatus.SCHEDULED)

        assert updated["status"] == LessonSessionStatus.SCHEDULED
        assert updated["schedule_check"].has_conflict is False

    async def test_update_status_should_reactivate_over_conflict_when_requested(
        self, service, make_lesson, student
    ) -> None:
        lesson = await make_lesson("10:00", 60, student_id=student.id, status=LessonSessionStatus.CANCELLED)
        await make_lesson("10:30", 30, student_id=student.id)

        updated = await service.update_status(
            lesson.id, LessonSessionStatus.SCHEDULED, allow_conflicts=True
        )

        assert updated["status"] == LessonSessionStatus.SCHEDULED
        assert updated["schedule_check"].has_conflict is True

    async def test_update_status_should_skip_check_when_leaving_schedule(
        self, service, make_lesson, student
    ) -> None:
        lesson = await make_lesson("10:00", 60, student_id=student.id)
        await make_lesson("10:00", 60, student_id=student.id)

        updated = await service.update_status(lesson.id, LessonSessionStatus.COMPLETED)

        assert updated["status"] == LessonSessionStatus.COMPLETED
        assert updated["schedule_check"] is None


    async def test_update_status_should_raise_for_missing_session(self, service, session_id) -> None:
        with pytest.raises(LessonSessionNotFoundError):
            await service.update_status(session_id, LessonSessionStatus.COMPLETED)

    async def test_get_and_delete_session(self, service, make_lesson, student) -> None:
        lesson = await make_lesson("10:00", 60, student_id=student.id)

        assert (await service.get_session(lesson.id))["id"] == lesson.id
        assert await service.delete_session(lesson.id) is True

        with pytest.raises(LessonSessionNotFoundError):
            await service.get_session(lesson.id)
        with pytest.raises(LessonSessionNotFoundError):
            await service.delete_session(lesson.id)

    async def test_list_teacher_sessions(self, service, make_lesson, student) -> None:
        first = await make_lesson("09:00", 60, student_id=student.id)
        second = await make_lesson("11:00", 60, student_id=student.id)

        sessions = await service.list_teacher_sessions("teacher-1")

        assert [s["id"] for s in sessions] == [first.id, second.id]

    async def test_list_teacher_sessions_should_reject_inverted_window(self, service) -> None:
        with pytest.raises(ValidationError):
            await service.list_teacher_sessions(
                "teacher-1", date_from=date(2024, 5, 10), date_to=date(2024, 5, 1)
            )
