"""
Student and group CRUD operations.

Dependencies: sqlalchemy, tutorschool.boundary.db.models
System role: Roster persistence operations
"""

from typing import Sequence

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from tutorschool.boundary.db.CRUD.base_crud import BaseCRUD
from tutorschool.boundary.db.models.student_model import GroupModel, StudentModel


class StudentCRUD(BaseCRUD[StudentModel]):
    """CRUD operations for StudentModel."""

    def __init__(self) -> None:
        super().__init__(StudentModel)

    async def get_with_phones(self, session: AsyncSession) -> Sequence[StudentModel]:
        """
        Retrieve every student that has a phone or parent phone stored.

        Args:
            session: Async database session

        Returns:
            Sequence of StudentModel, oldest first
        """
        stmt = (
            select(StudentModel)
            .where(or_(StudentModel.phone.is_not(None), StudentModel.parent_phone.is_not(None)))
            .order_by(StudentModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


class GroupCRUD(BaseCRUD[GroupModel]):
    """CRUD operations for GroupModel."""

    def __init__(self) -> None:
        super().__init__(GroupModel)


student_crud = StudentCRUD()
group_crud = GroupCRUD()
