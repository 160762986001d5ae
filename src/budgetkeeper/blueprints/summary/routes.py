"""Remaining-budget summary route."""

from __future__ import annotations

from dataclasses import asdict

from flask import jsonify

from ...extensions import get_state
from ...services.budgeting import BudgetBreakdown, summarize_budget
from ...services.money import MoneyFormat, format_currency
from ...services.snapshot import load_snapshot
from . import bp

_FIELD_NAMES = {
    "account_balance": "accountBalance",
    "total_savings": "totalSavings",
    "total_unpaid_expenses": "totalUnpaidExpenses",
    "total_unpaid_payments": "totalUnpaidPayments",
    "total_reimbursements": "totalReimbursements",
    "remaining": "remainingBudget",
}


def serialize_breakdown(breakdown: BudgetBreakdown, money_format: MoneyFormat) -> dict:
    """Raw figures plus their display strings under ``formatted``."""

    figures = {_FIELD_NAMES[key]: value for key, value in asdict(breakdown).items()}
    figures["totalCommitted"] = breakdown.committed
    return {
        **figures,
        "formatted": {key: format_currency(value, money_format) for key, value in figures.items()},
        "currency": money_format.as_dict(),
    }


@bp.get("")
def show_summary():
    state = get_state()
    snapshot = load_snapshot(state.repositories, today=state.clock().date())
    breakdown = summarize_budget(snapshot)
    return jsonify(serialize_breakdown(breakdown, state.money_format))
