"""
Student and group ORM models.

Represents the counterparties of lesson sessions: individual students and
named student groups.

Dependencies: sqlalchemy, tutorschool.boundary.db.base
System role: Roster persistence
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tutorschool.boundary.db.base import Base, SchoolScopedMixin, TimestampMixin, UUIDMixin


class StudentModel(Base, UUIDMixin, TimestampMixin, SchoolScopedMixin):
    """
    Student ORM model.

    Phone numbers are stored in national form with the dialing code kept
    separately in country_code / parent_country_code.

    Attributes:
        id: UUID primary key (auto-generated)
        school_id: Owning school
        first_name: Given name
        last_name: Family name
        phone: Student phone number (national form)
        country_code: Dialing code for phone, e.g. "+7"
        parent_phone: Parent phone number (national form)
        parent_country_code: Dialing code for parent_phone
        lesson_sessions: Individual sessions booked for this student
    """

    __tablename__ = "students"

    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    last_name: Mapped[str] = mapped_column(String(120), nullable=False, default="")
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    country_code: Mapped[str | None] = mapped_column(String(8), nullable=True, default="+7")
    parent_phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    parent_country_code: Mapped[str | None] = mapped_column(String(8), nullable=True)

    lesson_sessions = relationship("LessonSessionModel", back_populates="student")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class GroupModel(Base, UUIDMixin, TimestampMixin, SchoolScopedMixin):
    """
    Student group ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        school_id: Owning school
        name: Group display name
        lesson_sessions: Group sessions
    """

    __tablename__ = "groups"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    lesson_sessions = relationship("LessonSessionModel", back_populates="group")
