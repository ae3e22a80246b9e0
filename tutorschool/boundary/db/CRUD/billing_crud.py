"""
Subscription, payment and transaction CRUD operations.

Dependencies: tutorschool.boundary.db.models
System role: Billing persistence operations
"""

from tutorschool.boundary.db.CRUD.base_crud import BaseCRUD
from tutorschool.boundary.db.models.billing_model import (
    PaymentModel,
    SubscriptionModel,
    TransactionModel,
)


class SubscriptionCRUD(BaseCRUD[SubscriptionModel]):
    """CRUD operations for SubscriptionModel."""

    def __init__(self) -> None:
        super().__init__(SubscriptionModel)


class PaymentCRUD(BaseCRUD[PaymentModel]):
    """CRUD operations for PaymentModel."""

    def __init__(self) -> None:
        super().__init__(PaymentModel)


class TransactionCRUD(BaseCRUD[TransactionModel]):
    """CRUD operations for TransactionModel."""

    def __init__(self) -> None:
        super().__init__(TransactionModel)


subscription_crud = SubscriptionCRUD()
payment_crud = PaymentCRUD()
transaction_crud = TransactionCRUD()
