"""
SQLAlchemy-backed session store for the schedule validator.

Adapts LessonSessionCRUD rows to the ScheduledSession records the
TeacherScheduleValidator consumes.

Dependencies: sqlalchemy, tutorschool.boundary.db.CRUD, tutorschool.core.scheduling
System role: Query adapter between the validator and the database
"""

import uuid
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from tutorschool.boundary.db.CRUD.lesson_session_crud import lesson_session_crud
from tutorschool.core.scheduling.schemas import ScheduledSession


class SqlAlchemySessionStore:
    """Session store reading scheduled lesson sessions from the database."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize store with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def find_scheduled_sessions(
        self,
        teacher_id: str,
        on_date: date,
        exclude_session_id: uuid.UUID | None = None,
    ) -> list[ScheduledSession]:
        """
        Fetch the teacher's scheduled sessions on a date.

        Args:
            teacher_id: Teacher identifier
            on_date: Calendar date
            exclude_session_id: Session to leave out

        Returns:
            list[ScheduledSession]: Sessions ordered by start time
        """
        rows = await lesson_session_crud.find_scheduled_for_teacher(
            self.db,
            teacher_id,
            on_date,
            exclude_id=exclude_session_id,
        )
        sessions = []
        for row in rows:
            student_name = None
            if row.first_name is not None:
                student_name = f"{row.first_name} {row.last_name or ''}".strip()
            sessions.append(
                ScheduledSession(
                    id=row.id,
                    start_time=row.start_time,
                    duration_minutes=row.duration_minutes,
                    student_name=student_name,
                    group_id=row.group_id,
                    group_name=row.group_name,
                )
            )
        return sessions
