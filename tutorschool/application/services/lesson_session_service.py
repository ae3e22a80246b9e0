"""
Lesson session service orchestrator.

Coordinates booking, rescheduling, status changes and removal of lesson
sessions. Booking and rescheduling run the teacher schedule conflict check
first; the check and the write are separate statements, so two concurrent
bookings of the same slot can both pass.

Dependencies: tutorschool.boundary.db.CRUD, tutorschool.core.scheduling
System role: Lesson session use case orchestration
"""

import logging
from datetime import date, time
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tutorschool.boundary.db.CRUD.lesson_session_crud import lesson_session_crud
from tutorschool.boundary.db.CRUD.student_crud import group_crud, student_crud
from tutorschool.boundary.db.models.lesson_session_model import (
    LessonSessionModel,
    LessonSessionStatus,
)
from tutorschool.core.exceptions import (
    GroupNotFoundError,
    LessonSessionNotFoundError,
    ScheduleConflictError,
    StudentNotFoundError,
    TutorSchoolException,
    ValidationError,
)
from tutorschool.core.scheduling.schemas import ScheduleSlot, TeacherOverlapValidationResult
from tutorschool.core.scheduling.validator import TeacherScheduleValidator

logger = logging.getLogger(__name__)


def lesson_session_to_dict(
    lesson: LessonSessionModel,
    schedule_check: TeacherOverlapValidationResult | None = None,
) -> dict:
    """
    Flatten a lesson session with its loaded student/group into a dict.

    Args:
        lesson: LessonSessionModel with student and group relationships loaded
        schedule_check: Conflict check result to attach, if one was run

    Returns:
        dict: Session fields plus counterparty display name
    """
    if lesson.group is not None:
        display_name = lesson.group.name
    elif lesson.student is not None:
        display_name = lesson.student.full_name
    else:
        display_name = None

    return {
        "id": lesson.id,
        "school_id": lesson.school_id,
        "teacher_id": lesson.teacher_id,
        "scheduled_date": lesson.scheduled_date,
        "start_time": lesson.start_time,
        "duration_minutes": lesson.duration_minutes,
        "status": lesson.status,
        "student_id": lesson.student_id,
        "group_id": lesson.group_id,
        "subscription_id": lesson.subscription_id,
        "display_name": display_name,
        "is_group": lesson.group_id is not None,
        "notes": lesson.notes,
        "created_at": lesson.created_at,
        "updated_at": lesson.updated_at,
        "schedule_check": schedule_check,
    }


class LessonSessionService:
    """Lesson session service orchestrator."""

    def __init__(self, db: AsyncSession, validator: TeacherScheduleValidator) -> None:
        """
        Initialize lesson session service.

        Args:
            db: Async SQLAlchemy session
            validator: Teacher schedule conflict validator
        """
        self.db = db
        self.validator = validator

    async def _check_slot(
        self,
        teacher_id: str,
        scheduled_date: date,
        start_time: time,
        duration_minutes: int,
        allow_conflicts: bool,
        exclude_session_id: UUID | None = None,
    ) -> TeacherOverlapValidationResult:
        result = await self.validator.validate(
            ScheduleSlot(
                teacher_id=teacher_id,
                session_date=scheduled_date,
                start_time=start_time,
                duration_minutes=duration_minutes,
                exclude_session_id=exclude_session_id,
            )
        )
        if result.has_conflict and not allow_conflicts:
            raise ScheduleConflictError(
                result,
                details={"teacher_id": teacher_id, "date": scheduled_date.isoformat()},
            )
        return result

    async def create_session(
        self,
        teacher_id: str,
        scheduled_date: date,
        start_time: time,
        duration_minutes: int = 60,
        student_id: UUID | None = None,
        group_id: UUID | None = None,
        school_id: str | None = None,
        subscription_id: UUID | None = None,
        notes: str | None = None,
        allow_conflicts: bool = False,
    ) -> dict:
        """
        Book a lesson session after checking the teacher's schedule.

        Args:
            teacher_id: Teacher identifier
            scheduled_date: Lesson date
            start_time: Lesson start time
            duration_minutes: Lesson length
            student_id: Student for an individual lesson
            group_id: Group for a group lesson
            school_id: Owning school
            subscription_id: Subscription the lesson belongs to
            notes: Free-form notes
            allow_conflicts: Book even when the slot overlaps other sessions

        Returns:
            dict: Created session including the schedule check result

        Raises:
            ValidationError: If neither or both of student_id/group_id are given
            StudentNotFoundError / GroupNotFoundError: Unknown counterparty
            ScheduleConflictError: Slot overlaps and allow_conflicts is False
        """
        if (student_id is None) == (group_id is None):
            raise ValidationError(
                "Exactly one of student_id or group_id must be provided",
                field="student_id",
            )

        try:
            if student_id is not None and not await student_crud.exists(self.db, student_id):
                raise StudentNotFoundError(str(student_id))
            if group_id is not None and not await group_crud.exists(self.db, group_id):
                raise GroupNotFoundError(str(group_id))

            check = await self._check_slot(
                teacher_id, scheduled_date, start_time, duration_minutes, allow_conflicts
            )

            lesson = await lesson_session_crud.create(
                self.db,
                teacher_id=teacher_id,
                scheduled_date=scheduled_date,
                start_time=start_time,
                duration_minutes=duration_minutes,
                student_id=student_id,
                group_id=group_id,
                school_id=school_id,
                subscription_id=subscription_id,
                notes=notes,
                status=LessonSessionStatus.SCHEDULED,
            )
            await self.db.commit()

            logger.info(
                "Lesson session created",
                extra={
                    "session_id": str(lesson.id),
                    "teacher_id": teacher_id,
                    "date": scheduled_date.isoformat(),
                    "booked_over_conflict": check.has_conflict,
                },
            )
            return await self.get_session(lesson.id, schedule_check=check)
        except TutorSchoolException:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to create lesson session",
                extra={"error": str(e), "teacher_id": teacher_id},
            )
            raise

    async def get_session(
        self,
        session_id: UUID,
        schedule_check: TeacherOverlapValidationResult | None = None,
    ) -> dict:
        """
        Get lesson session by ID.

        Raises:
            LessonSessionNotFoundError: If the session does not exist
        """
        lesson = await lesson_session_crud.get_with_counterparty(self.db, session_id)
        if not lesson:
            raise LessonSessionNotFoundError(str(session_id))
        return lesson_session_to_dict(lesson, schedule_check)

    async def list_teacher_sessions(
        self,
        teacher_id: str,
        date_from: date | None = None,
        date_to: date | None = None,
        status: LessonSessionStatus | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict]:
        """
        List a teacher's sessions chronologically.

        Raises:
            ValidationError: If date_from is after date_to
        """
        if date_from and date_to and date_from > date_to:
            raise ValidationError("date_from must not be after date_to", field="date_from")

        lessons = await lesson_session_crud.list_for_teacher(
            self.db,
            teacher_id,
            date_from=date_from,
            date_to=date_to,
            status=status,
            limit=limit,
            offset=offset,
        )
        return [lesson_session_to_dict(lesson) for lesson in lessons]

    async def reschedule_session(
        self,
        session_id: UUID,
        scheduled_date: date,
        start_time: time,
        duration_minutes: int | None = None,
        allow_conflicts: bool = False,
    ) -> dict:
        """
        Move a session to a new date/time, checking against the teacher's
        other sessions (the session itself is excluded).

        Args:
            session_id: Session UUID
            scheduled_date: New date
            start_time: New start time
            duration_minutes: New length, None keeps the current one
            allow_conflicts: Move even when the new slot overlaps

        Returns:
            dict: Updated session including the schedule check result

        Raises:
            LessonSessionNotFoundError: If the session does not exist
            ScheduleConflictError: New slot overlaps and allow_conflicts is False
        """
        try:
            lesson = await lesson_session_crud.get_by_id(self.db, session_id)
            if not lesson:
                raise LessonSessionNotFoundError(str(session_id))

            duration = duration_minutes or lesson.duration_minutes or self.validator.default_duration
            check = await self._check_slot(
                lesson.teacher_id,
                scheduled_date,
                start_time,
                duration,
                allow_conflicts,
                exclude_session_id=session_id,
            )

            await lesson_session_crud.update_by_id(
                self.db,
                session_id,
                scheduled_date=scheduled_date,
                start_time=start_time,
                duration_minutes=duration,
            )
            await self.db.commit()

            logger.info(
                "Lesson session rescheduled",
                extra={
                    "session_id": str(session_id),
                    "date": scheduled_date.isoformat(),
                    "start_time": start_time.isoformat(),
                },
            )
            return await self.get_session(session_id, schedule_check=check)
        except TutorSchoolException:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to reschedule lesson session",
                extra={"error": str(e), "session_id": str(session_id)},
            )
            raise

    async def update_status(
        self,
        session_id: UUID,
        status: LessonSessionStatus,
        allow_conflicts: bool = False,
    ) -> dict:
        """
        Change a session's lifecycle state.

        Returning a cancelled or completed session to scheduled puts it back
        on the teacher's calendar, so the slot is checked the same way a
        reschedule is.

        Raises:
            LessonSessionNotFoundError: If the session does not exist
            ScheduleConflictError: Reactivated slot overlaps and
                allow_conflicts is False
        """
        try:
            lesson = await lesson_session_crud.get_by_id(self.db, session_id)
            if not lesson:
                raise LessonSessionNotFoundError(str(session_id))

            check = None
            if status == LessonSessionStatus.SCHEDULED and lesson.status != LessonSessionStatus.SCHEDULED:
                check = await self._check_slot(
                    lesson.teacher_id,
                    lesson.scheduled_date,
                    lesson.start_time,
                    lesson.duration_minutes or self.validator.default_duration,
                    allow_conflicts,
                    exclude_session_id=session_id,
                )

            await lesson_session_crud.update_by_id(self.db, session_id, status=status)
            await self.db.commit()

            logger.info(
                "Lesson session status changed",
                extra={"session_id": str(session_id), "status": status.value},
            )
            return await self.get_session(session_id, schedule_check=check)
        except TutorSchoolException:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to change lesson session status",
                extra={"error": str(e), "session_id": str(session_id)},
            )
            raise

    async def delete_session(self, session_id: UUID) -> bool:
        """
        Delete a session.

        Raises:
            LessonSessionNotFoundError: If the session does not exist
        """
        deleted = await lesson_session_crud.delete_by_id(self.db, session_id)
        if not deleted:
            raise LessonSessionNotFoundError(str(session_id))
        await self.db.commit()

        logger.info("Lesson session deleted", extra={"session_id": str(session_id)})
        return True
