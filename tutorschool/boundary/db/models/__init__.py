"""
Database models package.

Exports:
  - StudentModel, GroupModel: Roster models
  - LessonSessionModel, LessonSessionStatus: Lesson session model and status enum
  - SubscriptionModel, PaymentModel, TransactionModel: Billing models
  - TodoModel: Staff todo model

Dependencies: sqlalchemy, tutorschool.boundary.db.base
System role: Database model definitions for domain entities
"""

from tutorschool.boundary.db.models.student_model import GroupModel, StudentModel
from tutorschool.boundary.db.models.lesson_session_model import (
    LessonSessionModel,
    LessonSessionStatus,
)
from tutorschool.boundary.db.models.billing_model import (
    PaymentModel,
    SubscriptionModel,
    TransactionModel,
)
from tutorschool.boundary.db.models.todo_model import TodoModel

__all__ = [
    "StudentModel",
    "GroupModel",
    "LessonSessionModel",
    "LessonSessionStatus",
    "SubscriptionModel",
    "PaymentModel",
    "TransactionModel",
    "TodoModel",
]
