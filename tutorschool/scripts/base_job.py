"""
Maintenance job base class.

A job inspects rows, applies changes through the session and reports what
it did. Changes are committed only outside dry-run; in dry-run the session
is rolled back so the report shows what would change.

Dependencies: sqlalchemy, pydantic
System role: Shared lifecycle for one-off data repair jobs
"""

import logging
from typing import Any

from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class JobReport(BaseModel):
    """Outcome of a maintenance job run."""

    job: str
    dry_run: bool
    checked: int = 0
    changed: int = 0
    errors: list[str] = Field(default_factory=list)
    details: list[dict[str, Any]] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class MaintenanceJob:
    """
    Base class for maintenance jobs.

    Subclasses set `name` and implement `execute(report)`.

    Attributes:
        db: Async database session
        dry_run: Report changes without committing them
    """

    name: str = "maintenance"

    def __init__(self, db: AsyncSession, dry_run: bool = False) -> None:
        self.db = db
        self.dry_run = dry_run

    async def execute(self, report: JobReport) -> None:
        raise NotImplementedError

    async def run(self) -> JobReport:
        """
        Run the job and commit or roll back.

        Returns:
            JobReport: Counts, per-row details and errors
        """
        report = JobReport(job=self.name, dry_run=self.dry_run)
        logger.info("Starting job", extra={"job": self.name, "dry_run": self.dry_run})

        try:
            await self.execute(report)
        except Exception as e:
            await self.db.rollback()
            logger.exception("Job failed", extra={"job": self.name})
            report.errors.append(f"{type(e).__name__}: {e}")
            return report

        if self.dry_run:
            await self.db.rollback()
        else:
            await self.db.commit()

        logger.info(
            "Job finished",
            extra={
                "job": self.name,
                "dry_run": self.dry_run,
                "checked": report.checked,
                "changed": report.changed,
                "error_count": len(report.errors),
            },
        )
        return report
