"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin, SchoolScopedMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - Model classes and CRUD singletons for every entity

Dependencies: sqlalchemy, tutorschool.configs
System role: Database adapter providing persistent storage for the school
"""

from tutorschool.boundary.db.base import Base, SchoolScopedMixin, TimestampMixin, UUIDMixin
from tutorschool.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from tutorschool.boundary.db.models import (
    GroupModel,
    LessonSessionModel,
    LessonSessionStatus,
    PaymentModel,
    StudentModel,
    SubscriptionModel,
    TodoModel,
    TransactionModel,
)
from tutorschool.boundary.db.CRUD import (
    BaseCRUD,
    group_crud,
    lesson_session_crud,
    payment_crud,
    student_crud,
    subscription_crud,
    todo_crud,
    transaction_crud,
)

__all__ = [
    # Base classes
    "Base",
    "SchoolScopedMixin",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "GroupModel",
    "LessonSessionModel",
    "LessonSessionStatus",
    "PaymentModel",
    "StudentModel",
    "SubscriptionModel",
    "TodoModel",
    "TransactionModel",
    # CRUD
    "BaseCRUD",
    "group_crud",
    "lesson_session_crud",
    "payment_crud",
    "student_crud",
    "subscription_crud",
    "todo_crud",
    "transaction_crud",
]
