"""
Student and group schemas.

Dependencies: pydantic
System role: Roster API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class CreateStudentRequest(BaseModel):
    """Request schema for creating a student."""

    first_name: str = Field(..., min_length=1, max_length=120)
    last_name: str = Field("", max_length=120)
    school_id: str | None = Field(None, max_length=64)
    phone: str | None = Field(None, max_length=32)
    country_code: str | None = Field("+7", max_length=8)
    parent_phone: str | None = Field(None, max_length=32)
    parent_country_code: str | None = Field(None, max_length=8)


class StudentResponse(BaseModel):
    """Response schema for student operations."""

    id: uuid.UUID
    school_id: str | None
    first_name: str
    last_name: str
    full_name: str
    phone: str | None
    country_code: str | None
    parent_phone: str | None
    parent_country_code: str | None
    created_at: datetime
    updated_at: datetime


class CreateGroupRequest(BaseModel):
    """Request schema for creating a group."""

    name: str = Field(..., min_length=1, max_length=255)
    school_id: str | None = Field(None, max_length=64)


class GroupResponse(BaseModel):
    """Response schema for group operations."""

    id: uuid.UUID
    school_id: str | None
    name: str
    created_at: datetime
    updated_at: datetime
