"""
Student and group API endpoints.

Routes:
- POST /students - Create student
- GET /students - List students, optionally by school
- GET /students/{id} - Get single student
- DELETE /students/{id} - Delete student
- POST /groups - Create group
- GET /groups - List groups, optionally by school

Dependencies: tutorschool.application.services, tutorschool.models
System role: Roster HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from tutorschool.api.deps.dependencies import get_group_service, get_student_service
from tutorschool.api.routers.router_utils import handle_service_errors
from tutorschool.application.services.roster_service import GroupService, StudentService
from tutorschool.models.common import DeleteResponse
from tutorschool.models.student import (
    CreateGroupRequest,
    CreateStudentRequest,
    GroupResponse,
    StudentResponse,
)

logger = logging.getLogger(__name__)

students_router = APIRouter(prefix="/students", tags=["students"])
groups_router = APIRouter(prefix="/groups", tags=["groups"])


@students_router.post("", response_model=StudentResponse, status_code=201)
@handle_service_errors
async def create_student(
    request: CreateStudentRequest,
    service: StudentService = Depends(get_student_service),
) -> StudentResponse:
    """Create a student."""
    student = await service.create_student(**request.model_dump())
    return StudentResponse(**student)


@students_router.get("", response_model=list[StudentResponse])
@handle_service_errors
async def list_students(
    school_id: str | None = None,
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    service: StudentService = Depends(get_student_service),
) -> list[StudentResponse]:
    """List students, oldest first."""
    students = await service.list_students(school_id=school_id, limit=limit, offset=offset)
    logger.info("Students retrieved", extra={"count": len(students), "school_id": school_id})
    return [StudentResponse(**s) for s in students]


@students_router.get("/{student_id}", response_model=StudentResponse)
@handle_service_errors
async def get_student(
    student_id: UUID,
    service: StudentService = Depends(get_student_service),
) -> StudentResponse:
    return StudentResponse(**await service.get_student(student_id))


@students_router.delete("/{student_id}", response_model=DeleteResponse)
@handle_service_errors
async def delete_student(
    student_id: UUID,
    service: StudentService = Depends(get_student_service),
) -> DeleteResponse:
    await service.delete_student(student_id)
    return DeleteResponse(id=str(student_id))


@groups_router.post("", response_model=GroupResponse, status_code=201)
@handle_service_errors
async def create_group(
    request: CreateGroupRequest,
    service: GroupService = Depends(get_group_service),
) -> GroupResponse:
    """Create a group."""
    group = await service.create_group(name=request.name, school_id=request.school_id)
    return GroupResponse(**group)


@groups_router.get("", response_model=list[GroupResponse])
@handle_service_errors
async def list_groups(
    school_id: str | None = None,
    service: GroupService = Depends(get_group_service),
) -> list[GroupResponse]:
    groups = await service.list_groups(school_id=school_id)
    return [GroupResponse(**g) for g in groups]
