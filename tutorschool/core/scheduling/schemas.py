"""
Scheduling domain schemas.

Records exchanged between the session store, the overlap validator and
its callers.

Dependencies: pydantic
System role: Contracts for teacher schedule conflict checks
"""

import uuid
from datetime import date, time

from pydantic import BaseModel, Field


class ScheduleSlot(BaseModel):
    """A proposed session time for one teacher."""

    teacher_id: str = Field(..., min_length=1, description="Teacher identifier")
    session_date: date = Field(..., description="Calendar date of the session")
    start_time: time = Field(..., description="Start time (24-hour)")
    duration_minutes: int = Field(..., gt=0, description="Length of the session in minutes")
    exclude_session_id: uuid.UUID | None = Field(
        default=None,
        description="Session ignored by the check, used when rescheduling a session",
    )


class ScheduledSession(BaseModel):
    """A teacher's existing scheduled session as returned by the session store."""

    id: uuid.UUID
    start_time: time
    duration_minutes: int | None = None
    student_name: str | None = None
    group_id: uuid.UUID | None = None
    group_name: str | None = None

    @property
    def is_group(self) -> bool:
        return self.group_id is not None or self.group_name is not None


class ConflictingSession(BaseModel):
    """An existing session that overlaps the proposed slot."""

    id: uuid.UUID
    start_time: str = Field(description="Start time as HH:MM")
    end_time: str = Field(description="End time as HH:MM")
    time_range: str = Field(description="Human readable range, e.g. 10:30 AM - 11:00 AM")
    display_name: str = Field(description="Student name, or group name for group sessions")
    is_group: bool = False
    group_name: str | None = None


class TeacherOverlapValidationResult(BaseModel):
    """Outcome of a teacher schedule conflict check."""

    has_conflict: bool
    conflict_message: str | None = None
    conflicting_sessions: list[ConflictingSession] = Field(default_factory=list)
    check_failed: bool = Field(
        default=False,
        description="True when the session query failed and the check was skipped",
    )
