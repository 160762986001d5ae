"""Domain services for BudgetKeeper."""

from .budgeting import calculate_remaining_budget, summarize_budget
from .money import format_currency, parse_currency

__all__ = [
    "calculate_remaining_budget",
    "format_currency",
    "parse_currency",
    "summarize_budget",
]
