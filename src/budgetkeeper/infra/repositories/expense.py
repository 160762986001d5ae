"""SQLModel implementation of RecurringExpense repository."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from sqlmodel import Session, select

from ...domain.repositories.expense import ExpenseWithStatus, MonthlyPaymentStatus
from ...models.expense import RecurringExpense, RecurringExpensePayment
from ...services.money import round_money
from ..database import SessionFactory


def _to_status(payment: RecurringExpensePayment) -> MonthlyPaymentStatus:
    return MonthlyPaymentStatus(
        id=payment.id,  # type: ignore[arg-type]
        recurring_expense_id=payment.recurring_expense_id,
        month=payment.month,
        year=payment.year,
        is_paid=payment.is_paid,
        paid_at=payment.paid_at,
    )


def _to_view(
    expense: RecurringExpense, payment: Optional[RecurringExpensePayment]
) -> ExpenseWithStatus:
    return ExpenseWithStatus(
        id=expense.id,  # type: ignore[arg-type]
        description=expense.description,
        amount=expense.amount,
        created_at=expense.created_at,
        updated_at=expense.updated_at,
        current_month_payment=_to_status(payment) if payment is not None else None,
    )


def _payments_for(
    session: Session, expense_ids: Iterable[int], *, month: int, year: int
) -> dict[int, RecurringExpensePayment]:
    ids = list(expense_ids)
    if not ids:
        return {}
    statement = select(RecurringExpensePayment).where(
        RecurringExpensePayment.recurring_expense_id.in_(ids),  # type: ignore[attr-defined]
        RecurringExpensePayment.month == month,
        RecurringExpensePayment.year == year,
    )
    return {row.recurring_expense_id: row for row in session.exec(statement).all()}


def _upsert_payment(
    session: Session,
    expense_id: int,
    *,
    month: int,
    year: int,
    is_paid: bool,
    paid_at: Optional[datetime],
) -> RecurringExpensePayment:
    payment = _payments_for(session, [expense_id], month=month, year=year).get(expense_id)
    if payment is None:
        payment = RecurringExpensePayment(
            recurring_expense_id=expense_id, month=month, year=year
        )
    else:
        payment.touch()
    payment.is_paid = is_paid
    payment.paid_at = paid_at
    session.add(payment)
    return payment


class SQLModelExpenseRepository:
    """SQLModel-based recurring expense repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def list_with_status(self, *, month: int, year: int) -> list[ExpenseWithStatus]:
        """List expenses (oldest first) joined with their payment record for the month."""
        with self.session_factory() as session:
            statement = select(RecurringExpense).order_by(
                RecurringExpense.created_at, RecurringExpense.id  # type: ignore[arg-type]
            )
            expenses = list(session.exec(statement).all())
            payments = _payments_for(
                session, (e.id for e in expenses), month=month, year=year  # type: ignore[misc]
            )
            return [_to_view(expense, payments.get(expense.id)) for expense in expenses]  # type: ignore[arg-type]

    def get_with_status(
        self, expense_id: int, *, month: int, year: int
    ) -> Optional[ExpenseWithStatus]:
        with self.session_factory() as session:
            expense = session.get(RecurringExpense, expense_id)
            if expense is None:
                return None
            payment = _payments_for(session, [expense_id], month=month, year=year).get(expense_id)
            return _to_view(expense, payment)

    def create(self, *, description: str, amount: float) -> ExpenseWithStatus:
        with self.session_factory() as session:
            expense = RecurringExpense(description=description, amount=round_money(amount))
            session.add(expense)
            session.commit()
            session.refresh(expense)
            return _to_view(expense, None)

    def update(
        self,
        expense_id: int,
        *,
        month: int,
        year: int,
        description: Optional[str] = None,
        amount: Optional[float] = None,
    ) -> Optional[ExpenseWithStatus]:
        with self.session_factory() as session:
            expense = session.get(RecurringExpense, expense_id)
            if expense is None:
                return None
            if description is not None:
                expense.description = description
            if amount is not None:
                expense.amount = round_money(amount)
            expense.touch()
            session.add(expense)
            session.commit()
            session.refresh(expense)
            payment = _payments_for(session, [expense_id], month=month, year=year).get(expense_id)
            return _to_view(expense, payment)

    def delete(self, expense_id: int) -> bool:
        """Delete an expense together with its payment history."""
        with self.session_factory() as session:
            expense = session.get(RecurringExpense, expense_id)
            if expense is None:
                return False
            session.delete(expense)
            return True

    def set_paid(
        self, expense_id: int, *, month: int, year: int, is_paid: bool, now: datetime
    ) -> Optional[MonthlyPaymentStatus]:
        """Upsert the month's payment record; None when the expense does not exist."""
        with self.session_factory() as session:
            if session.get(RecurringExpense, expense_id) is None:
                return None
            payment = _upsert_payment(
                session,
                expense_id,
                month=month,
                year=year,
                is_paid=is_paid,
                paid_at=now if is_paid else None,
            )
            session.commit()
            session.refresh(payment)
            return _to_status(payment)

    def reset_month(self, *, month: int, year: int) -> int:
        """Mark every expense unpaid for the month and return how many were touched."""
        with self.session_factory() as session:
            expense_ids = list(session.exec(select(RecurringExpense.id)).all())
            for expense_id in expense_ids:
                _upsert_payment(
                    session, expense_id, month=month, year=year, is_paid=False, paid_at=None
                )
            return len(expense_ids)
