"""
Schedule validation schemas.

The request is a proposed slot; the response is the validator result
unchanged.

Dependencies: pydantic
System role: Schedule check API contracts
"""

from tutorschool.core.scheduling.schemas import ScheduleSlot, TeacherOverlapValidationResult


class ValidateScheduleRequest(ScheduleSlot):
    """Request schema for checking a slot against the teacher's sessions."""


ValidateScheduleResponse = TeacherOverlapValidationResult
