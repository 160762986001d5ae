"""Recurring monthly expenses and their per-month payment records."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Optional

from sqlalchemy import UniqueConstraint
from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship

from .base import TimestampedModel, timestamp_field


class RecurringExpense(TimestampedModel, table=True):
    """An expense that comes back every calendar month."""

    __tablename__: ClassVar[str] = "recurring_expense"

    id: Optional[int] = Field(default=None, primary_key=True)
    description: str = Field(nullable=False, max_length=200)
    amount: float = Field(nullable=False, ge=0)

    payments: list["RecurringExpensePayment"] = Relationship(
        back_populates="expense",
        sa_relationship=relationship(
            "RecurringExpensePayment",
            back_populates="expense",
            cascade="all, delete-orphan",
        ),
    )


class RecurringExpensePayment(TimestampedModel, table=True):
    """Paid/unpaid status of a recurring expense for one month."""

    __tablename__: ClassVar[str] = "recurring_expense_payment"
    __table_args__ = (
        UniqueConstraint("recurring_expense_id", "month", "year", name="uq_expense_month_year"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    recurring_expense_id: int = Field(
        foreign_key="recurring_expense.id", nullable=False, index=True, ondelete="CASCADE"
    )
    month: int = Field(nullable=False, ge=1, le=12)
    year: int = Field(nullable=False)
    is_paid: bool = Field(default=False, nullable=False)
    paid_at: Optional[datetime] = timestamp_field(default=None)

    expense: "RecurringExpense" = Relationship(
        back_populates="payments",
        sa_relationship=relationship("RecurringExpense", back_populates="payments"),
    )
