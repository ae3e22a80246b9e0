"""
Maintenance job runner.

Usage:
    python -m tutorschool.scripts fix-phone-numbers [--dry-run]
    python -m tutorschool.scripts backfill-todo-school-id --school-id SCHOOL [--dry-run]
    python -m tutorschool.scripts cleanup-subscription --subscription-id UUID [--dry-run]

Prints the job report as JSON. Exit code is 0 on success, 1 when the
report contains errors.
"""

import argparse
import asyncio
import logging
import sys
from uuid import UUID

from tutorschool.boundary.db import get_async_session_factory
from tutorschool.observability import configure_logging
from tutorschool.scripts.backfill_todo_school_id import BackfillTodoSchoolIdJob
from tutorschool.scripts.base_job import JobReport
from tutorschool.scripts.cleanup_subscription import CleanupSubscriptionJob
from tutorschool.scripts.fix_phone_numbers import FixPhoneNumbersJob

logger = logging.getLogger(__name__)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="python -m tutorschool.scripts",
        description="Run a maintenance job against the school database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    subparsers = parser.add_subparsers(dest="job", required=True)

    phones = subparsers.add_parser("fix-phone-numbers", help="Normalise student phone numbers")
    phones.add_argument("--dry-run", action="store_true", help="Report changes without committing")

    todos = subparsers.add_parser("backfill-todo-school-id", help="Assign a school to orphan todos")
    todos.add_argument("--school-id", required=True, help="School to assign")
    todos.add_argument("--dry-run", action="store_true", help="Report changes without committing")

    cleanup = subparsers.add_parser("cleanup-subscription", help="Delete a subscription and its rows")
    cleanup.add_argument("--subscription-id", required=True, type=UUID, help="Subscription UUID")
    cleanup.add_argument("--dry-run", action="store_true", help="Report changes without committing")

    return parser.parse_args(argv)


def build_job(args: argparse.Namespace, db):
    if args.job == "fix-phone-numbers":
        return FixPhoneNumbersJob(db, dry_run=args.dry_run)
    if args.job == "backfill-todo-school-id":
        return BackfillTodoSchoolIdJob(db, school_id=args.school_id, dry_run=args.dry_run)
    if args.job == "cleanup-subscription":
        return CleanupSubscriptionJob(db, subscription_id=args.subscription_id, dry_run=args.dry_run)
    raise ValueError(f"Unknown job: {args.job}")


async def run_job(args: argparse.Namespace, session_factory=None) -> JobReport:
    """
    Open a session, run the selected job and return its report.

    Args:
        args: Parsed arguments
        session_factory: async_sessionmaker, the configured database by default
    """
    session_factory = session_factory or get_async_session_factory()
    async with session_factory() as db:
        job = build_job(args, db)
        return await job.run()


def main(argv: list[str] | None = None) -> int:
    args = parse_arguments(argv)
    configure_logging(args.log_level)

    report = asyncio.run(run_job(args))
    print(report.model_dump_json(indent=2))

    if not report.ok:
        logger.error("Job finished with errors", extra={"job": report.job, "error_count": len(report.errors)})
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
