"""
Todo ORM model.

Dependencies: sqlalchemy, tutorschool.boundary.db.base
System role: Staff task list persistence
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from tutorschool.boundary.db.base import Base, SchoolScopedMixin, TimestampMixin, UUIDMixin


class TodoModel(Base, UUIDMixin, TimestampMixin, SchoolScopedMixin):
    """
    Todo ORM model.

    school_id is nullable because older rows were written without it;
    the backfill maintenance job repairs them.
    """

    __tablename__ = "todos"

    title: Mapped[str] = mapped_column(String(512), nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
