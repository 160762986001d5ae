"""Demo data for local exploration."""

from __future__ import annotations

from ..infra.repositories import Repositories
from ..logging_config import get_logger

logger = get_logger(__name__)

_DEMO_SAVINGS = (("Holidays", 600.0), ("Emergency fund", 1500.0), ("Car repair", -120.0))
_DEMO_EXPENSES = (("Rent", 850.0), ("Electricity", 64.9), ("Phone plan", 19.99))
_DEMO_PAYMENTS = (("Dentist", 45.0), ("Birthday present", 60.0))
_DEMO_REIMBURSEMENTS = (("Concert tickets from Sam", 38.5),)


def seed_demo_data(repositories: Repositories, *, balance: float = 3250.0) -> int:
    """Insert a small, realistic data set and return the number of rows created."""

    repositories.accounts.set_balance(balance)
    for name, amount in _DEMO_SAVINGS:
        repositories.savings.create(name=name, amount=amount)
    for description, amount in _DEMO_EXPENSES:
        repositories.expenses.create(description=description, amount=amount)
    for description, amount in _DEMO_PAYMENTS:
        repositories.payments.create(description=description, amount=amount)
    for description, amount in _DEMO_REIMBURSEMENTS:
        repositories.reimbursements.create(description=description, amount=amount)

    created = (
        len(_DEMO_SAVINGS) + len(_DEMO_EXPENSES) + len(_DEMO_PAYMENTS) + len(_DEMO_REIMBURSEMENTS)
    )
    logger.info("Demo data seeded", extra={"rows": created})
    return created
