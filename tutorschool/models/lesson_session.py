"""
Lesson session schemas.

Request/response schemas for booking, rescheduling and status changes.

Dependencies: pydantic
System role: Lesson session API contracts
"""

import uuid
from datetime import date, datetime, time

from pydantic import BaseModel, Field, model_validator

from tutorschool.boundary.db.models.lesson_session_model import LessonSessionStatus
from tutorschool.core.scheduling.schemas import TeacherOverlapValidationResult


class CreateLessonSessionRequest(BaseModel):
    """Request schema for booking a lesson session."""

    teacher_id: str = Field(..., min_length=1, max_length=128, description="Teacher identifier")
    scheduled_date: date = Field(..., description="Lesson date")
    start_time: time = Field(..., description="Start time, HH:MM")
    duration_minutes: int = Field(60, gt=0, le=24 * 60, description="Lesson length in minutes")
    student_id: uuid.UUID | None = Field(None, description="Student for an individual lesson")
    group_id: uuid.UUID | None = Field(None, description="Group for a group lesson")
    school_id: str | None = Field(None, max_length=64)
    subscription_id: uuid.UUID | None = None
    notes: str | None = Field(None, max_length=4096)
    allow_conflicts: bool = Field(
        False, description="Book even if the teacher already has an overlapping session"
    )

    @model_validator(mode="after")
    def check_counterparty(self) -> "CreateLessonSessionRequest":
        if (self.student_id is None) == (self.group_id is None):
            raise ValueError("Exactly one of student_id or group_id must be provided")
        return self


class RescheduleLessonSessionRequest(BaseModel):
    """Request schema for moving a lesson session."""

    scheduled_date: date
    start_time: time
    duration_minutes: int | None = Field(None, gt=0, le=24 * 60)
    allow_conflicts: bool = False


class UpdateLessonSessionStatusRequest(BaseModel):
    """Request schema for changing a session's lifecycle state."""

    status: LessonSessionStatus
    allow_conflicts: bool = False


class LessonSessionResponse(BaseModel):
    """Response schema for lesson session operations."""

    id: uuid.UUID
    school_id: str | None
    teacher_id: str
    scheduled_date: date
    start_time: time
    duration_minutes: int | None
    status: LessonSessionStatus
    student_id: uuid.UUID | None
    group_id: uuid.UUID | None
    subscription_id: uuid.UUID | None
    display_name: str | None
    is_group: bool
    notes: str | None
    created_at: datetime
    updated_at: datetime
    schedule_check: TeacherOverlapValidationResult | None = Field(
        None, description="Conflict check result for create and reschedule"
    )
