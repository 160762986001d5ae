"""Recurring expense repository protocol and read projections."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class MonthlyPaymentStatus:
    """Payment record of one recurring expense for one month."""

    id: int
    recurring_expense_id: int
    month: int
    year: int
    is_paid: bool
    paid_at: Optional[datetime]


@dataclass(frozen=True, slots=True)
class ExpenseWithStatus:
    """A recurring expense joined with its payment record for a given month."""

    id: int
    description: str
    amount: float
    created_at: datetime
    updated_at: datetime
    current_month_payment: Optional[MonthlyPaymentStatus] = None

    @property
    def is_paid(self) -> bool:
        """Expenses without a record for the month count as unpaid."""
        payment = self.current_month_payment
        return payment is not None and payment.is_paid


@runtime_checkable
class ExpenseRepository(Protocol):
    """Repository for recurring expenses and their monthly payment records."""

    def list_with_status(self, *, month: int, year: int) -> list[ExpenseWithStatus]:
        ...

    def get_with_status(
        self, expense_id: int, *, month: int, year: int
    ) -> Optional[ExpenseWithStatus]:
        ...

    def create(self, *, description: str, amount: float) -> ExpenseWithStatus:
        ...

    def update(
        self,
        expense_id: int,
        *,
        month: int,
        year: int,
        description: Optional[str] = None,
        amount: Optional[float] = None,
    ) -> Optional[ExpenseWithStatus]:
        ...

    def delete(self, expense_id: int) -> bool:
        ...

    def set_paid(
        self, expense_id: int, *, month: int, year: int, is_paid: bool, now: datetime
    ) -> Optional[MonthlyPaymentStatus]:
        """Upsert the month's payment record; None when the expense does not exist."""
        ...

    def reset_month(self, *, month: int, year: int) -> int:
        """Mark every expense unpaid for the month and return how many were touched."""
        ...
