"""
Teacher schedule overlap validator.

Checks a proposed session time against the teacher's other scheduled
sessions on the same date. The check is advisory: it reports conflicts,
callers decide whether to block the booking.

Dependencies: tutorschool.core.scheduling, tutorschool.core.exceptions
System role: Conflict detection used by booking and rescheduling flows
"""

import logging
import uuid
from datetime import date
from typing import Protocol, Sequence

from tutorschool.core.exceptions import ScheduleCheckError, ValidationError
from tutorschool.core.scheduling.overlap import (
    DEFAULT_DURATION_MINUTES,
    build_conflict_message,
    find_conflicts,
)
from tutorschool.core.scheduling.schemas import (
    ScheduledSession,
    ScheduleSlot,
    TeacherOverlapValidationResult,
)
from tutorschool.core.scheduling.time_utils import time_to_minutes

logger = logging.getLogger(__name__)


class SessionStore(Protocol):
    """Read access to a teacher's scheduled sessions."""

    async def find_scheduled_sessions(
        self,
        teacher_id: str,
        on_date: date,
        exclude_session_id: uuid.UUID | None = None,
    ) -> Sequence[ScheduledSession]:
        ...


class TeacherScheduleValidator:
    """
    Overlap validator for teacher schedules.

    Attributes:
        store: Session store queried for existing sessions
        fail_open: When True a failed query yields "no conflict" with
            check_failed set; when False it raises ScheduleCheckError
        default_duration: Duration assumed for sessions stored without one
    """

    def __init__(
        self,
        store: SessionStore,
        fail_open: bool = True,
        default_duration: int = DEFAULT_DURATION_MINUTES,
    ) -> None:
        self.store = store
        self.fail_open = fail_open
        self.default_duration = default_duration

    async def validate(self, slot: ScheduleSlot) -> TeacherOverlapValidationResult:
        """
        Validate a proposed slot against the teacher's scheduled sessions.

        Args:
            slot: Teacher, date, start time, duration and optional excluded session

        Returns:
            TeacherOverlapValidationResult: Conflict flag, display message and
            the conflicting sessions in the order the store returned them

        Raises:
            ValidationError: If the slot is malformed
            ScheduleCheckError: If the query fails and fail_open is disabled
        """
        if not slot.teacher_id.strip():
            raise ValidationError("Teacher id cannot be empty", field="teacher_id")
        if slot.duration_minutes <= 0:
            raise ValidationError("Duration must be a positive number of minutes", field="duration_minutes")

        start_minutes = time_to_minutes(slot.start_time)
        end_minutes = start_minutes + slot.duration_minutes

        try:
            sessions = await self.store.find_scheduled_sessions(
                slot.teacher_id,
                slot.session_date,
                exclude_session_id=slot.exclude_session_id,
            )
        except Exception as e:
            logger.exception(
                "Teacher schedule query failed",
                extra={
                    "teacher_id": slot.teacher_id,
                    "date": slot.session_date.isoformat(),
                    "fail_open": self.fail_open,
                    "error_type": type(e).__name__,
                },
            )
            if not self.fail_open:
                raise ScheduleCheckError(
                    "Unable to verify teacher schedule",
                    teacher_id=slot.teacher_id,
                    details={"date": slot.session_date.isoformat()},
                ) from e
            return TeacherOverlapValidationResult(has_conflict=False, check_failed=True)

        # The store already filters, this guards adapters that do not
        if slot.exclude_session_id is not None:
            sessions = [s for s in sessions if s.id != slot.exclude_session_id]

        conflicts = find_conflicts(
            start_minutes,
            end_minutes,
            sessions,
            default_duration=self.default_duration,
        )
        if not conflicts:
            return TeacherOverlapValidationResult(has_conflict=False)

        logger.info(
            "Teacher schedule conflict detected",
            extra={
                "teacher_id": slot.teacher_id,
                "date": slot.session_date.isoformat(),
                "conflict_count": len(conflicts),
            },
        )
        return TeacherOverlapValidationResult(
            has_conflict=True,
            conflict_message=build_conflict_message(slot.session_date, start_minutes, end_minutes, conflicts),
            conflicting_sessions=conflicts,
        )
