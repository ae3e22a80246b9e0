"""
Schedule check API endpoint.

Routes: POST /schedule/validate - Check a proposed slot against the
teacher's scheduled lessons without booking anything.

Dependencies: tutorschool.core.scheduling
System role: Teacher schedule conflict check HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from tutorschool.api.deps.dependencies import get_schedule_validator
from tutorschool.api.routers.router_utils import handle_service_errors
from tutorschool.core.scheduling import TeacherScheduleValidator
from tutorschool.models.schedule import ValidateScheduleRequest, ValidateScheduleResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schedule", tags=["schedule"])


@router.post("/validate", response_model=ValidateScheduleResponse)
@handle_service_errors
async def validate_schedule(
    request: ValidateScheduleRequest,
    validator: TeacherScheduleValidator = Depends(get_schedule_validator),
) -> ValidateScheduleResponse:
    """
    Check a slot for teacher schedule conflicts.

    A conflict is reported in the body with 200; the check is advisory.

    Raises:
        HTTPException(400): Blank teacher id
        HTTPException(503): Schedule query failed and fail-open is disabled
    """
    result = await validator.validate(request)
    logger.info(
        "Schedule validated",
        extra={
            "teacher_id": request.teacher_id,
            "has_conflict": result.has_conflict,
            "check_failed": result.check_failed,
        },
    )
    return result
