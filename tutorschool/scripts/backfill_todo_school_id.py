"""
Assign a school to todos created before todos were school scoped.

Usage:
    python -m tutorschool.scripts backfill-todo-school-id --school-id SCHOOL [--dry-run]
"""

from sqlalchemy.ext.asyncio import AsyncSession

from tutorschool.boundary.db.CRUD.todo_crud import todo_crud
from tutorschool.core.exceptions import ValidationError
from tutorschool.scripts.base_job import JobReport, MaintenanceJob


class BackfillTodoSchoolIdJob(MaintenanceJob):
    """Set school_id on todos whose school_id is null or empty."""

    name = "backfill-todo-school-id"

    def __init__(self, db: AsyncSession, school_id: str, dry_run: bool = False) -> None:
        super().__init__(db, dry_run=dry_run)
        if not school_id or not school_id.strip():
            raise ValidationError("school_id is required", field="school_id")
        self.school_id = school_id.strip()

    async def execute(self, report: JobReport) -> None:
        orphans = await todo_crud.get_without_school(self.db)
        report.checked = len(orphans)
        report.details = [{"todo_id": str(todo.id), "title": todo.title} for todo in orphans]

        if self.dry_run:
            report.changed = len(orphans)
            return
        report.changed = await todo_crud.assign_school_to_orphans(self.db, self.school_id)
