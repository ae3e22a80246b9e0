"""
Lesson session CRUD operations.

Provides Create, Read, Update, Delete operations for LessonSessionModel
with the teacher-day query used by the schedule conflict check.

Dependencies: sqlalchemy, tutorschool.boundary.db.models
System role: Lesson session persistence operations
"""

from datetime import date
from typing import Sequence
from uuid import UUID

from sqlalchemy import Row, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from tutorschool.boundary.db.CRUD.base_crud import BaseCRUD
from tutorschool.boundary.db.models.lesson_session_model import (
    LessonSessionModel,
    LessonSessionStatus,
)
from tutorschool.boundary.db.models.student_model import GroupModel, StudentModel


class LessonSessionCRUD(BaseCRUD[LessonSessionModel]):
    """
    CRUD operations for LessonSessionModel.

    Extends BaseCRUD with teacher schedule queries and eager loading of
    the student or group each session belongs to.
    """

    def __init__(self) -> None:
        """Initialize LessonSessionCRUD with LessonSessionModel."""
        super().__init__(LessonSessionModel)

    async def find_scheduled_for_teacher(
        self,
        session: AsyncSession,
        teacher_id: str,
        on_date: date,
        exclude_id: UUID | None = None,
    ) -> Sequence[Row]:
        """
        Fetch a teacher's scheduled sessions on one date with counterparty names.

        Args:
            session: Async database session
            teacher_id: Teacher identifier
            on_date: Calendar date
            exclude_id: Session left out of the result (the one being moved)

        Returns:
            Rows of (id, start_time, duration_minutes, group_id, first_name,
            last_name, group_name), ordered by start time then creation time
        """
        stmt = (
            select(
                LessonSessionModel.id,
                LessonSessionModel.start_time,
                LessonSessionModel.duration_minutes,
                LessonSessionModel.group_id,
                StudentModel.first_name,
                StudentModel.last_name,
                GroupModel.name.label("group_name"),
            )
            .outerjoin(StudentModel, LessonSessionModel.student_id == StudentModel.id)
            .outerjoin(GroupModel, LessonSessionModel.group_id == GroupModel.id)
            .where(
                LessonSessionModel.teacher_id == teacher_id,
                LessonSessionModel.scheduled_date == on_date,
                LessonSessionModel.status == LessonSessionStatus.SCHEDULED,
            )
            .order_by(LessonSessionModel.start_time, LessonSessionModel.created_at)
        )
        if exclude_id is not None:
            stmt = stmt.where(LessonSessionModel.id != exclude_id)
        result = await session.execute(stmt)
        return result.all()

    async def get_with_counterparty(
        self,
        session: AsyncSession,
        id: UUID,
    ) -> LessonSessionModel | None:
        """
        Retrieve a session with its student and group eagerly loaded.

        Args:
            session: Async database session
            id: Lesson session UUID

        Returns:
            LessonSessionModel with student/group loaded, None if not found
        """
        stmt = (
            select(LessonSessionModel)
            .where(LessonSessionModel.id == id)
            .options(
                selectinload(LessonSessionModel.student),
                selectinload(LessonSessionModel.group),
            )
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_teacher(
        self,
        session: AsyncSession,
        teacher_id: str,
        date_from: date | None = None,
        date_to: date | None = None,
        status: LessonSessionStatus | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[LessonSessionModel]:
        """
        List a teacher's sessions in a date range, chronologically.

        Args:
            session: Async database session
            teacher_id: Teacher identifier
            date_from: Inclusive lower bound (None for open)
            date_to: Inclusive upper bound (None for open)
            status: Restrict to one lifecycle state
            limit: Maximum number of sessions
            offset: Number of sessions to skip

        Returns:
            Sequence of LessonSessionModel with student/group loaded
        """
        stmt = (
            select(LessonSessionModel)
            .where(LessonSessionModel.teacher_id == teacher_id)
            .options(
                selectinload(LessonSessionModel.student),
                selectinload(LessonSessionModel.group),
            )
            .order_by(LessonSessionModel.scheduled_date, LessonSessionModel.start_time)
            .offset(offset)
        )
        if date_from is not None:
            stmt = stmt.where(LessonSessionModel.scheduled_date >= date_from)
        if date_to is not None:
            stmt = stmt.where(LessonSessionModel.scheduled_date <= date_to)
        if status is not None:
            stmt = stmt.where(LessonSessionModel.status == status)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


lesson_session_crud = LessonSessionCRUD()
