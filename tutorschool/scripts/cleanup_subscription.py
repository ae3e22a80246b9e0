"""
Remove a subscription together with its lessons, payments and transactions.

Usage:
    python -m tutorschool.scripts cleanup-subscription --subscription-id UUID [--dry-run]
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tutorschool.boundary.db.CRUD.billing_crud import (
    payment_crud,
    subscription_crud,
    transaction_crud,
)
from tutorschool.boundary.db.CRUD.lesson_session_crud import lesson_session_crud
from tutorschool.scripts.base_job import JobReport, MaintenanceJob

logger = logging.getLogger(__name__)


class CleanupSubscriptionJob(MaintenanceJob):
    """Delete a subscription and every row that references it."""

    name = "cleanup-subscription"

    def __init__(self, db: AsyncSession, subscription_id: UUID, dry_run: bool = False) -> None:
        super().__init__(db, dry_run=dry_run)
        self.subscription_id = subscription_id

    async def execute(self, report: JobReport) -> None:
        if not await subscription_crud.exists(self.db, self.subscription_id):
            logger.warning("Subscription not found", extra={"subscription_id": str(self.subscription_id)})
            report.details.append({"subscription_id": str(self.subscription_id), "found": False})
            return

        report.checked = 1
        # Dependents first, then the subscription itself
        for table, crud in (
            ("lesson_sessions", lesson_session_crud),
            ("payments", payment_crud),
            ("transactions", transaction_crud),
        ):
            count = await crud.count(self.db, subscription_id=self.subscription_id)
            if count and not self.dry_run:
                await crud.delete_where(self.db, subscription_id=self.subscription_id)
            report.details.append({"table": table, "deleted": count})
            report.changed += count

        if not self.dry_run:
            await subscription_crud.delete_by_id(self.db, self.subscription_id)
        report.details.append({"table": "subscriptions", "deleted": 1})
        report.changed += 1
