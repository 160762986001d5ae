"""Repository protocol definitions for domain layer."""

from .account import AccountRepository
from .expense import ExpenseRepository, ExpenseWithStatus, MonthlyPaymentStatus
from .payment import PaymentRepository
from .reimbursement import ReimbursementRepository
from .saving import SavingRepository

__all__ = [
    "AccountRepository",
    "ExpenseRepository",
    "ExpenseWithStatus",
    "MonthlyPaymentStatus",
    "PaymentRepository",
    "ReimbursementRepository",
    "SavingRepository",
]
