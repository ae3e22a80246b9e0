"""
Maintenance jobs.

Run with: python -m tutorschool.scripts <job> [--dry-run] [options]
"""

from tutorschool.scripts.backfill_todo_school_id import BackfillTodoSchoolIdJob
from tutorschool.scripts.base_job import JobReport, MaintenanceJob
from tutorschool.scripts.cleanup_subscription import CleanupSubscriptionJob
from tutorschool.scripts.fix_phone_numbers import FixPhoneNumbersJob

__all__ = [
    "BackfillTodoSchoolIdJob",
    "CleanupSubscriptionJob",
    "FixPhoneNumbersJob",
    "JobReport",
    "MaintenanceJob",
]
