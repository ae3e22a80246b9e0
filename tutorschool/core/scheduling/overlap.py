"""
Half-open interval overlap detection for lesson sessions.

Dependencies: tutorschool.core.scheduling
System role: Pure conflict computation behind the schedule validator
"""

from datetime import date
from typing import Iterable

from tutorschool.core.scheduling.schemas import ConflictingSession, ScheduledSession
from tutorschool.core.scheduling.time_utils import (
    day_name,
    format_time_range,
    minutes_to_time,
    time_to_minutes,
)

DEFAULT_DURATION_MINUTES = 60


def intervals_overlap(start_a: int, end_a: int, start_b: int, end_b: int) -> bool:
    """
    Check whether [start_a, end_a) and [start_b, end_b) intersect.

    Touching endpoints do not overlap.
    """
    return start_a < end_b and end_a > start_b


def find_conflicts(
    start_minutes: int,
    end_minutes: int,
    sessions: Iterable[ScheduledSession],
    default_duration: int = DEFAULT_DURATION_MINUTES,
) -> list[ConflictingSession]:
    """
    Collect every session overlapping the candidate interval, in input order.

    Args:
        start_minutes: Candidate start, minutes since midnight
        end_minutes: Candidate end, minutes since midnight
        sessions: Existing scheduled sessions for the same teacher and date
        default_duration: Duration used when a session has none stored

    Returns:
        list[ConflictingSession]: Overlapping sessions annotated for display
    """
    conflicts: list[ConflictingSession] = []
    for session in sessions:
        existing_start = time_to_minutes(session.start_time)
        duration = default_duration if session.duration_minutes is None else session.duration_minutes
        existing_end = existing_start + duration

        if not intervals_overlap(start_minutes, end_minutes, existing_start, existing_end):
            continue

        if session.is_group:
            display_name = session.group_name or "Unnamed group"
        else:
            display_name = session.student_name or "Unknown student"

        conflicts.append(
            ConflictingSession(
                id=session.id,
                start_time=minutes_to_time(existing_start),
                end_time=minutes_to_time(existing_end),
                time_range=format_time_range(existing_start, existing_end),
                display_name=display_name,
                is_group=session.is_group,
                group_name=session.group_name if session.is_group else None,
            )
        )
    return conflicts


def build_conflict_message(
    on_date: date,
    start_minutes: int,
    end_minutes: int,
    conflicts: list[ConflictingSession],
) -> str:
    """
    Describe all conflicts in a single message for display to the user.

    Example:
        Teacher already has 2 sessions on Monday, 2024-05-06 overlapping
        10:00 AM - 11:00 AM:
        - 10:30 AM - 11:00 AM with Alice Smith
        - 10:45 AM - 11:45 AM with Beginners (group)
    """
    noun = "session" if len(conflicts) == 1 else "sessions"
    header = (
        f"Teacher already has {len(conflicts)} {noun} on "
        f"{day_name(on_date)}, {on_date.isoformat()} overlapping "
        f"{format_time_range(start_minutes, end_minutes)}:"
    )
    lines = [
        f"- {c.time_range} with {c.display_name}{' (group)' if c.is_group else ''}"
        for c in conflicts
    ]
    return "\n".join([header, *lines])
