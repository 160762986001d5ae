"""Assemble a budget snapshot from persisted rows."""

from __future__ import annotations

from datetime import date
from typing import Iterable

from ..domain.repositories.expense import ExpenseWithStatus
from ..infra.repositories import Repositories
from ..models import Account, PendingPayment, PendingReimbursement, VirtualSaving
from .budgeting import (
    BudgetSnapshot,
    ExpenseAmount,
    PaymentAmount,
    ReimbursementAmount,
    SavingAmount,
)


def build_snapshot(
    *,
    account: Account,
    savings: Iterable[VirtualSaving],
    expenses: Iterable[ExpenseWithStatus],
    payments: Iterable[PendingPayment],
    reimbursements: Iterable[PendingReimbursement],
) -> BudgetSnapshot:
    """Project persisted rows onto the calculator's input types.

    ``expenses`` must already be joined with the month of interest; an
    expense without a payment record for that month is unpaid.
    """

    return BudgetSnapshot.of(
        float(account.balance),
        virtual_savings=(SavingAmount(amount=float(s.amount)) for s in savings),
        recurring_expenses=(
            ExpenseAmount(amount=float(e.amount), is_paid=e.is_paid) for e in expenses
        ),
        pending_payments=(
            PaymentAmount(amount=float(p.amount), is_paid=p.is_paid) for p in payments
        ),
        pending_reimbursements=(
            ReimbursementAmount(amount=float(r.amount)) for r in reimbursements
        ),
    )


def load_snapshot(repositories: Repositories, *, today: date) -> BudgetSnapshot:
    """Read every collection and build the snapshot for ``today``'s month."""

    return build_snapshot(
        account=repositories.accounts.get_or_create(),
        savings=repositories.savings.list_all(),
        expenses=repositories.expenses.list_with_status(month=today.month, year=today.year),
        payments=repositories.payments.list_all(),
        reimbursements=repositories.reimbursements.list_all(),
    )


__all__ = ["build_snapshot", "load_snapshot"]
