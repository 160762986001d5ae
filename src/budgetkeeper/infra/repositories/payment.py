"""SQLModel implementation of PendingPayment repository."""

from __future__ import annotations

from typing import Optional

from sqlmodel import select

from ...models.payment import PendingPayment
from ...services.money import round_money
from ..database import SessionFactory


class SQLModelPaymentRepository:
    """SQLModel-based pending payment repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def list_all(self) -> list[PendingPayment]:
        with self.session_factory() as session:
            statement = select(PendingPayment).order_by(
                PendingPayment.created_at, PendingPayment.id  # type: ignore[arg-type]
            )
            return list(session.exec(statement).all())

    def get_by_id(self, payment_id: int) -> Optional[PendingPayment]:
        with self.session_factory() as session:
            return session.get(PendingPayment, payment_id)

    def create(self, *, description: str, amount: float) -> PendingPayment:
        with self.session_factory() as session:
            payment = PendingPayment(description=description, amount=round_money(amount))
            session.add(payment)
            session.commit()
            session.refresh(payment)
            return payment

    def update(
        self,
        payment_id: int,
        *,
        description: Optional[str] = None,
        amount: Optional[float] = None,
        is_paid: Optional[bool] = None,
    ) -> Optional[PendingPayment]:
        """Apply the provided fields; return None when the payment does not exist."""
        with self.session_factory() as session:
            payment = session.get(PendingPayment, payment_id)
            if payment is None:
                return None
            if description is not None:
                payment.description = description
            if amount is not None:
                payment.amount = round_money(amount)
            if is_paid is not None:
                payment.is_paid = is_paid
            payment.touch()
            session.add(payment)
            session.commit()
            session.refresh(payment)
            return payment

    def delete(self, payment_id: int) -> bool:
        with self.session_factory() as session:
            payment = session.get(PendingPayment, payment_id)
            if payment is None:
                return False
            session.delete(payment)
            return True
