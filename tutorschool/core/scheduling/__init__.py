"""
Teacher schedule conflict detection.

Exports:
  - TeacherScheduleValidator, SessionStore: Validator and its store protocol
  - ScheduleSlot, ScheduledSession, ConflictingSession,
    TeacherOverlapValidationResult: Scheduling schemas
  - intervals_overlap, find_conflicts: Pure overlap helpers
"""

from tutorschool.core.scheduling.overlap import find_conflicts, intervals_overlap
from tutorschool.core.scheduling.schemas import (
    ConflictingSession,
    ScheduledSession,
    ScheduleSlot,
    TeacherOverlapValidationResult,
)
from tutorschool.core.scheduling.validator import SessionStore, TeacherScheduleValidator

__all__ = [
    "TeacherScheduleValidator",
    "SessionStore",
    "ScheduleSlot",
    "ScheduledSession",
    "ConflictingSession",
    "TeacherOverlapValidationResult",
    "intervals_overlap",
    "find_conflicts",
]
