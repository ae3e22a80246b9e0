"""
Student and group services.

Thin orchestration over roster CRUD: create, read, list by school and
delete. Returned values are plain dicts for the API response mappers.

Dependencies: tutorschool.boundary.db.CRUD
System role: Roster use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tutorschool.boundary.db.CRUD.student_crud import group_crud, student_crud
from tutorschool.boundary.db.models.student_model import GroupModel, StudentModel
from tutorschool.core.exceptions import StudentNotFoundError, ValidationError

logger = logging.getLogger(__name__)


def student_to_dict(student: StudentModel) -> dict:
    return {
        "id": student.id,
        "school_id": student.school_id,
        "first_name": student.first_name,
        "last_name": student.last_name,
        "full_name": student.full_name,
        "phone": student.phone,
        "country_code": student.country_code,
        "parent_phone": student.parent_phone,
        "parent_country_code": student.parent_country_code,
        "created_at": student.created_at,
        "updated_at": student.updated_at,
    }


def group_to_dict(group: GroupModel) -> dict:
    return {
        "id": group.id,
        "school_id": group.school_id,
        "name": group.name,
        "created_at": group.created_at,
        "updated_at": group.updated_at,
    }


class StudentService:
    """Student service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create_student(
        self,
        first_name: str,
        last_name: str = "",
        school_id: str | None = None,
        phone: str | None = None,
        country_code: str | None = "+7",
        parent_phone: str | None = None,
        parent_country_code: str | None = None,
    ) -> dict:
        """
        Create a student.

        Raises:
            ValidationError: If first_name is blank
        """
        if not first_name or not first_name.strip():
            raise ValidationError("first_name is required", field="first_name")

        try:
            student = await student_crud.create(
                self.db,
                first_name=first_name.strip(),
                last_name=last_name.strip(),
                school_id=school_id,
                phone=phone,
                country_code=country_code,
                parent_phone=parent_phone,
                parent_country_code=parent_country_code,
            )
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error("Failed to create student", extra={"error": str(e), "school_id": school_id})
            raise

        logger.info("Student created", extra={"student_id": str(student.id), "school_id": school_id})
        return student_to_dict(student)

    async def get_student(self, student_id: UUID) -> dict:
        """
        Get student by ID.

        Raises:
            StudentNotFoundError: If the student does not exist
        """
        student = await student_crud.get_by_id(self.db, student_id)
        if not student:
            raise StudentNotFoundError(str(student_id))
        return student_to_dict(student)

    async def list_students(
        self,
        school_id: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict]:
        filters = {"school_id": school_id} if school_id is not None else {}
        students = await student_crud.get_all(self.db, limit=limit, offset=offset, **filters)
        return [student_to_dict(s) for s in students]

    async def delete_student(self, student_id: UUID) -> bool:
        """
        Delete a student together with their individual sessions.

        Raises:
            StudentNotFoundError: If the student does not exist
        """
        deleted = await student_crud.delete_by_id(self.db, student_id)
        if not deleted:
            raise StudentNotFoundError(str(student_id))
        await self.db.commit()
        logger.info("Student deleted", extra={"student_id": str(student_id)})
        return True


class GroupService:
    """Group service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create_group(self, name: str, school_id: str | None = None) -> dict:
        """
        Create a group.

        Raises:
            ValidationError: If name is blank
        """
        if not name or not name.strip():
            raise ValidationError("name is required", field="name")

        try:
            group = await group_crud.create(self.db, name=name.strip(), school_id=school_id)
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error("Failed to create group", extra={"error": str(e), "school_id": school_id})
            raise

        logger.info("Group created", extra={"group_id": str(group.id), "school_id": school_id})
        return group_to_dict(group)

    async def list_groups(self, school_id: str | None = None) -> list[dict]:
        filters = {"school_id": school_id} if school_id is not None else {}
        groups = await group_crud.get_all(self.db, **filters)
        return [group_to_dict(g) for g in groups]
