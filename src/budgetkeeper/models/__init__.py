"""SQLModel table exports."""

from .account import Account
from .expense import RecurringExpense, RecurringExpensePayment
from .payment import PendingPayment
from .reimbursement import PendingReimbursement
from .saving import VirtualSaving

__all__ = [
    "Account",
    "PendingPayment",
    "PendingReimbursement",
    "RecurringExpense",
    "RecurringExpensePayment",
    "VirtualSaving",
]
