"""Budgeting domain services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .money import round_money


@dataclass(frozen=True, slots=True)
class SavingAmount:
    """Money earmarked in a virtual saving; negative for a withdrawal."""

    amount: float


@dataclass(frozen=True, slots=True)
class ExpenseAmount:
    """A recurring expense with its payment status for the current month."""

    amount: float
    is_paid: bool = False


@dataclass(frozen=True, slots=True)
class PaymentAmount:
    amount: float
    is_paid: bool = False


@dataclass(frozen=True, slots=True)
class ReimbursementAmount:
    amount: float


@dataclass(frozen=True, slots=True)
class BudgetSnapshot:
    """Read-only view of everything that feeds the remaining budget."""

    account_balance: float
    virtual_savings: tuple[SavingAmount, ...] = ()
    recurring_expenses: tuple[ExpenseAmount, ...] = ()
    pending_payments: tuple[PaymentAmount, ...] = ()
    pending_reimbursements: tuple[ReimbursementAmount, ...] = ()

    @classmethod
    def of(
        cls,
        account_balance: float,
        *,
        virtual_savings: Iterable[SavingAmount] = (),
        recurring_expenses: Iterable[ExpenseAmount] = (),
        pending_payments: Iterable[PaymentAmount] = (),
        pending_reimbursements: Iterable[ReimbursementAmount] = (),
    ) -> BudgetSnapshot:
        """Materialise arbitrary iterables into an immutable snapshot."""

        return cls(
            account_balance=account_balance,
            virtual_savings=tuple(virtual_savings),
            recurring_expenses=tuple(recurring_expenses),
            pending_payments=tuple(pending_payments),
            pending_reimbursements=tuple(pending_reimbursements),
        )


@dataclass(frozen=True, slots=True)
class BudgetBreakdown:
    """Subtotals behind a remaining-budget figure."""

    account_balance: float
    total_savings: float
    total_unpaid_expenses: float
    total_unpaid_payments: float
    total_reimbursements: float
    remaining: float

    @property
    def committed(self) -> float:
        return round_money(
            self.total_savings + self.total_unpaid_expenses + self.total_unpaid_payments
        )


def _totals(snapshot: BudgetSnapshot) -> tuple[float, float, float, float]:
    total_savings = sum(item.amount for item in snapshot.virtual_savings)
    total_unpaid_expenses = sum(
        item.amount for item in snapshot.recurring_expenses if not item.is_paid
    )
    total_unpaid_payments = sum(
        item.amount for item in snapshot.pending_payments if not item.is_paid
    )
    total_reimbursements = sum(item.amount for item in snapshot.pending_reimbursements)
    return total_savings, total_unpaid_expenses, total_unpaid_payments, total_reimbursements


def calculate_remaining_budget(snapshot: BudgetSnapshot) -> float:
    """Return balance minus unpaid commitments plus pending reimbursements.

    ``balance - (savings + unpaid expenses + unpaid payments) + reimbursements``,
    rounded to cents.
    """

    savings, expenses, payments, reimbursements = _totals(snapshot)
    remaining = snapshot.account_balance - (savings + expenses + payments) + reimbursements
    return round_money(remaining)


def summarize_budget(snapshot: BudgetSnapshot) -> BudgetBreakdown:
    """Compute the remaining budget along with the subtotals used to reach it."""

    savings, expenses, payments, reimbursements = _totals(snapshot)
    return BudgetBreakdown(
        account_balance=round_money(snapshot.account_balance),
        total_savings=round_money(savings),
        total_unpaid_expenses=round_money(expenses),
        total_unpaid_payments=round_money(payments),
        total_reimbursements=round_money(reimbursements),
        remaining=calculate_remaining_budget(snapshot),
    )


__all__ = [
    "BudgetBreakdown",
    "BudgetSnapshot",
    "ExpenseAmount",
    "PaymentAmount",
    "ReimbursementAmount",
    "SavingAmount",
    "calculate_remaining_budget",
    "summarize_budget",
]
