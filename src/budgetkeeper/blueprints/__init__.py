"""Blueprint exports."""

from . import account, expenses, payments, reimbursements, savings, summary

__all__ = [
    "account",
    "expenses",
    "payments",
    "reimbursements",
    "savings",
    "summary",
]
