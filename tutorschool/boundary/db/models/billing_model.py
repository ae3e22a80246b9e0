"""
Subscription, payment and transaction ORM models.

Subscriptions are packages of lessons bought by a student; payments and
transactions record money received against them.

Dependencies: sqlalchemy, tutorschool.boundary.db.base
System role: Billing persistence referenced by sessions and cleanup jobs
"""

import uuid
from datetime import date

from sqlalchemy import Date, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tutorschool.boundary.db.base import Base, SchoolScopedMixin, TimestampMixin, UUIDMixin


class SubscriptionModel(Base, UUIDMixin, TimestampMixin, SchoolScopedMixin):
    """
    Subscription ORM model.

    Attributes:
        student_id: Student who bought the package
        status: active, paused, cancelled or completed
        session_count: Number of lessons in the package
        currency: ISO 4217 currency code
        total_price: Package price in currency
        start_date: First lesson date
    """

    __tablename__ = "subscriptions"

    student_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("students.id", ondelete="SET NULL"),
        nullable=True,
    )
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="active")
    session_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    total_price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    lesson_sessions = relationship("LessonSessionModel", back_populates="subscription")


class PaymentModel(Base, UUIDMixin, TimestampMixin, SchoolScopedMixin):
    """Payment received from a student, optionally against a subscription."""

    __tablename__ = "payments"

    subscription_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("subscriptions.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")


class TransactionModel(Base, UUIDMixin, TimestampMixin, SchoolScopedMixin):
    """Ledger transaction, optionally linked to a subscription."""

    __tablename__ = "transactions"

    subscription_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("subscriptions.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    description: Mapped[str | None] = mapped_column(String(512), nullable=True)
