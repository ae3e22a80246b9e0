"""
Lesson session API endpoints.

Routes:
- POST /lesson-sessions - Book a lesson (409 on teacher schedule conflict)
- GET /lesson-sessions - List a teacher's lessons
- GET /lesson-sessions/{id} - Get single lesson
- PUT /lesson-sessions/{id}/schedule - Move a lesson
- PATCH /lesson-sessions/{id}/status - Change lesson status
- DELETE /lesson-sessions/{id} - Delete lesson

Dependencies: tutorschool.application.services, tutorschool.models
System role: Lesson session HTTP API
"""

import logging
from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from tutorschool.api.deps.dependencies import get_lesson_session_service
from tutorschool.api.routers.router_utils import handle_service_errors
from tutorschool.application.services.lesson_session_service import LessonSessionService
from tutorschool.boundary.db.models.lesson_session_model import LessonSessionStatus
from tutorschool.models.common import DeleteResponse
from tutorschool.models.lesson_session import (
    CreateLessonSessionRequest,
    LessonSessionResponse,
    RescheduleLessonSessionRequest,
    UpdateLessonSessionStatusRequest,
)

from .lesson_session_responses import (
    map_lesson_session_to_response,
    map_lesson_sessions_to_response,
)
from .lesson_session_validators import (
    validate_date_range,
    validate_session_creation,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lesson-sessions", tags=["lesson-sessions"])


@router.post("", response_model=LessonSessionResponse, status_code=201)
@handle_service_errors
async def create_lesson_session(
    request: CreateLessonSessionRequest,
    service: LessonSessionService = Depends(get_lesson_session_service),
) -> LessonSessionResponse:
    """
    Book a lesson session.

    Args:
        request: CreateLessonSessionRequest
        service: Injected LessonSessionService

    Returns:
        LessonSessionResponse: Created lesson with the schedule check result

    Raises:
        HTTPException(400): Invalid request
        HTTPException(404): Student or group not found
        HTTPException(409): Teacher already has an overlapping lesson
        HTTPException(503): Schedule check failed and fail-open is disabled
    """
    validate_session_creation(request)

    logger.info(
        "Booking lesson session",
        extra={
            "teacher_id": request.teacher_id,
            "date": request.scheduled_date.isoformat(),
            "allow_conflicts": request.allow_conflicts,
        },
    )

    session_data = await service.create_session(
        teacher_id=request.teacher_id,
        scheduled_date=request.scheduled_date,
        start_time=request.start_time,
        duration_minutes=request.duration_minutes,
        student_id=request.student_id,
        group_id=request.group_id,
        school_id=request.school_id,
        subscription_id=request.subscription_id,
        notes=request.notes,
        allow_conflicts=request.allow_conflicts,
    )
    return map_lesson_session_to_response(session_data)


@router.get("", response_model=list[LessonSessionResponse])
@handle_service_errors
async def list_lesson_sessions(
    teacher_id: str = Query(..., min_length=1),
    date_from: date | None = None,
    date_to: date | None = None,
    status: LessonSessionStatus | None = None,
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    service: LessonSessionService = Depends(get_lesson_session_service),
) -> list[LessonSessionResponse]:
    """List a teacher's lessons ordered by date and start time."""
    validate_date_range(date_from, date_to)

    sessions = await service.list_teacher_sessions(
        teacher_id,
        date_from=date_from,
        date_to=date_to,
        status=status,
        limit=limit,
        offset=offset,
    )
    logger.info("Lesson sessions retrieved", extra={"teacher_id": teacher_id, "count": len(sessions)})
    return map_lesson_sessions_to_response(sessions)


@router.get("/{session_id}", response_model=LessonSessionResponse)
@handle_service_errors
async def get_lesson_session(
    session_id: UUID,
    service: LessonSessionService = Depends(get_lesson_session_service),
) -> LessonSessionResponse:
    """Get single lesson by ID."""
    return map_lesson_session_to_response(await service.get_session(session_id))


@router.put("/{session_id}/schedule", response_model=LessonSessionResponse)
@handle_service_errors
async def reschedule_lesson_session(
    session_id: UUID,
    request: RescheduleLessonSessionRequest,
    service: LessonSessionService = Depends(get_lesson_session_service),
) -> LessonSessionResponse:
    """
    Move a lesson to a new date and time.

    The lesson itself is ignored by the conflict check.

    Raises:
        HTTPException(404): Lesson not found
        HTTPException(409): New slot overlaps another lesson of the teacher
    """
    logger.info(
        "Rescheduling lesson session",
        extra={"session_id": str(session_id), "date": request.scheduled_date.isoformat()},
    )

    session_data = await service.reschedule_session(
        session_id,
        scheduled_date=request.scheduled_date,
        start_time=request.start_time,
        duration_minutes=request.duration_minutes,
        allow_conflicts=request.allow_conflicts,
    )
    return map_lesson_session_to_response(session_data)


@router.patch("/{session_id}/status", response_model=LessonSessionResponse)
@handle_service_errors
async def update_lesson_session_status(
    session_id: UUID,
    request: UpdateLessonSessionStatusRequest,
    service: LessonSessionService = Depends(get_lesson_session_service),
) -> LessonSessionResponse:
    """Change a lesson's status (scheduled, cancelled, completed)."""
    session_data = await service.update_status(
        session_id, request.status, allow_conflicts=request.allow_conflicts
    )
    return map_lesson_session_to_response(session_data)


@router.delete("/{session_id}", response_model=DeleteResponse)
@handle_service_errors
async def delete_lesson_session(
    session_id: UUID,
    service: LessonSessionService = Depends(get_lesson_session_service),
) -> DeleteResponse:
    """Delete a lesson."""
    await service.delete_session(session_id)
    return DeleteResponse(id=str(session_id))
