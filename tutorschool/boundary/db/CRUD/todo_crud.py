"""
Todo CRUD operations.

Dependencies: sqlalchemy, tutorschool.boundary.db.models
System role: Todo persistence and tenant backfill queries
"""

from typing import Sequence

from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tutorschool.boundary.db.CRUD.base_crud import BaseCRUD
from tutorschool.boundary.db.models.todo_model import TodoModel


class TodoCRUD(BaseCRUD[TodoModel]):
    """
    CRUD operations for TodoModel.

    Adds queries for rows written without a school id.
    """

    def __init__(self) -> None:
        super().__init__(TodoModel)

    @staticmethod
    def _missing_school():
        return or_(TodoModel.school_id.is_(None), TodoModel.school_id == "")

    async def get_without_school(self, session: AsyncSession) -> Sequence[TodoModel]:
        """Retrieve todos whose school_id is NULL or empty."""
        stmt = select(TodoModel).where(self._missing_school()).order_by(TodoModel.created_at)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def assign_school_to_orphans(self, session: AsyncSession, school_id: str) -> int:
        """
        Set school_id on every todo that has none.

        Args:
            session: Async database session
            school_id: School to assign

        Returns:
            Number of updated rows
        """
        stmt = (
            update(TodoModel)
            .where(self._missing_school())
            .values(school_id=school_id)
            .execution_options(synchronize_session="fetch")
        )
        result = await session.execute(stmt)
        return result.rowcount


todo_crud = TodoCRUD()
