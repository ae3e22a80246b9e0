"""
Repair student phone numbers imported with the dialing code embedded.

Usage:
    python -m tutorschool.scripts fix-phone-numbers [--dry-run]
"""

import logging

from tutorschool.boundary.db.CRUD.student_crud import student_crud
from tutorschool.core.phone_numbers import normalize_phone
from tutorschool.scripts.base_job import JobReport, MaintenanceJob

logger = logging.getLogger(__name__)

# (phone column, dialing code column)
PHONE_FIELDS = (
    ("phone", "country_code"),
    ("parent_phone", "parent_country_code"),
)


class FixPhoneNumbersJob(MaintenanceJob):
    """Normalise student and parent phone numbers."""

    name = "fix-phone-numbers"

    async def execute(self, report: JobReport) -> None:
        students = await student_crud.get_with_phones(self.db)

        for student in students:
            report.checked += 1
            updates = {}
            for phone_field, code_field in PHONE_FIELDS:
                fix = normalize_phone(getattr(student, phone_field), getattr(student, code_field))
                if fix is None:
                    continue
                updates[phone_field] = fix.phone
                updates[code_field] = fix.country_code
                report.details.append(
                    {
                        "student_id": str(student.id),
                        "field": phone_field,
                        "before": getattr(student, phone_field),
                        "after": fix.phone,
                        "country_code": fix.country_code,
                        "rule": fix.rule,
                    }
                )

            if not updates:
                continue

            report.changed += 1
            if not self.dry_run:
                await student_crud.update_by_id(self.db, student.id, **updates)
            logger.debug("Phone fix", extra={"student_id": str(student.id), "fields": list(updates)})
