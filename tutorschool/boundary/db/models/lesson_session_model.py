"""
Lesson session ORM model.

Represents one scheduled lesson occurrence for a teacher with either an
individual student or a group.

Dependencies: sqlalchemy, tutorschool.boundary.db.base
System role: Session persistence for scheduling and conflict checks
"""

import enum
import uuid
from datetime import date, time

from sqlalchemy import Date, Enum, ForeignKey, Index, Integer, String, Text, Time, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tutorschool.boundary.db.base import Base, SchoolScopedMixin, TimestampMixin, UUIDMixin


class LessonSessionStatus(str, enum.Enum):
    """
    Lesson session lifecycle states.

    SCHEDULED: Booked and counted by the teacher conflict check
    CANCELLED: Cancelled, ignored by the conflict check
    COMPLETED: Took place
    """

    SCHEDULED = "scheduled"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class LessonSessionModel(Base, UUIDMixin, TimestampMixin, SchoolScopedMixin):
    """
    Lesson session ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        school_id: Owning school
        teacher_id: Teacher identifier from the identity provider
        scheduled_date: Calendar date of the lesson
        start_time: Start time-of-day
        duration_minutes: Length in minutes, NULL means the default (60)
        status: Lifecycle state
        student_id: Student for individual sessions
        group_id: Group for group sessions
        subscription_id: Subscription this occurrence was materialized from
        moved_from_session_id: Original session when created by a move
        notes: Free-form notes

    Indexes:
        (teacher_id, scheduled_date, status): serves the conflict check query
    """

    __tablename__ = "lesson_sessions"
    __table_args__ = (
        Index("ix_lesson_sessions_teacher_date_status", "teacher_id", "scheduled_date", "status"),
    )

    teacher_id: Mapped[str] = mapped_column(String(128), nullable=False)
    scheduled_date: Mapped[date] = mapped_column(Date, nullable=False)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    duration_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True, default=60)

    status: Mapped[LessonSessionStatus] = mapped_column(
        Enum(
            LessonSessionStatus,
            native_enum=False,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=LessonSessionStatus.SCHEDULED,
    )

    student_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=True,
    )
    group_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("groups.id", ondelete="CASCADE"),
        nullable=True,
    )
    subscription_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("subscriptions.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    moved_from_session_id: Mapped[uuid.UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    student = relationship("StudentModel", back_populates="lesson_sessions")
    group = relationship("GroupModel", back_populates="lesson_sessions")
    subscription = relationship("SubscriptionModel", back_populates="lesson_sessions")
