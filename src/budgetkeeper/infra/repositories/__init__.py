"""Concrete repository implementations using SQLModel."""

from __future__ import annotations

from dataclasses import dataclass

from ...domain.repositories import (
    AccountRepository,
    ExpenseRepository,
    PaymentRepository,
    ReimbursementRepository,
    SavingRepository,
)
from ..database import SessionFactory
from .account import SQLModelAccountRepository
from .expense import SQLModelExpenseRepository
from .payment import SQLModelPaymentRepository
from .reimbursement import SQLModelReimbursementRepository
from .saving import SQLModelSavingRepository


@dataclass(frozen=True)
class Repositories:
    """Every repository bound to one session factory, handed down explicitly."""

    accounts: AccountRepository
    savings: SavingRepository
    expenses: ExpenseRepository
    payments: PaymentRepository
    reimbursements: ReimbursementRepository

    @classmethod
    def from_session_factory(cls, session_factory: SessionFactory) -> Repositories:
        return cls(
            accounts=SQLModelAccountRepository(session_factory),
            savings=SQLModelSavingRepository(session_factory),
            expenses=SQLModelExpenseRepository(session_factory),
            payments=SQLModelPaymentRepository(session_factory),
            reimbursements=SQLModelReimbursementRepository(session_factory),
        )


__all__ = [
    "Repositories",
    "SQLModelAccountRepository",
    "SQLModelExpenseRepository",
    "SQLModelPaymentRepository",
    "SQLModelReimbursementRepository",
    "SQLModelSavingRepository",
]
