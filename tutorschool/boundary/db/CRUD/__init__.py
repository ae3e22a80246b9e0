"""
CRUD operations for database models.

Exports base CRUD class and entity-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from tutorschool.boundary.db.CRUD import lesson_session_crud

    # Use singleton instances
    lesson = await lesson_session_crud.get_by_id(db, session_id)
"""

from tutorschool.boundary.db.CRUD.base_crud import BaseCRUD
from tutorschool.boundary.db.CRUD.lesson_session_crud import LessonSessionCRUD, lesson_session_crud
from tutorschool.boundary.db.CRUD.student_crud import GroupCRUD, StudentCRUD, group_crud, student_crud
from tutorschool.boundary.db.CRUD.billing_crud import (
    PaymentCRUD,
    SubscriptionCRUD,
    TransactionCRUD,
    payment_crud,
    subscription_crud,
    transaction_crud,
)
from tutorschool.boundary.db.CRUD.todo_crud import TodoCRUD, todo_crud

__all__ = [
    "BaseCRUD",
    "LessonSessionCRUD",
    "StudentCRUD",
    "GroupCRUD",
    "SubscriptionCRUD",
    "PaymentCRUD",
    "TransactionCRUD",
    "TodoCRUD",
    "lesson_session_crud",
    "student_crud",
    "group_crud",
    "subscription_crud",
    "payment_crud",
    "transaction_crud",
    "todo_crud",
]
