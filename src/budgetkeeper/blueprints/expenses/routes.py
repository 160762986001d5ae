"""Recurring expense routes.

Payment status is tracked per calendar month: every listing reports the
record for the month of the application clock, and expenses without one are
unpaid.
"""

from __future__ import annotations

from flask import jsonify, request

from ...domain.repositories.expense import ExpenseWithStatus, MonthlyPaymentStatus
from ...extensions import get_state
from ...logging_config import get_logger
from ..errors import not_found, validation_error
from . import bp
from .forms import ExpenseForm, PaymentStatusForm

logger = get_logger(__name__)


def _serialize_payment(payment: MonthlyPaymentStatus | None) -> dict | None:
    if payment is None:
        return None
    return {
        "id": payment.id,
        "recurringExpenseId": payment.recurring_expense_id,
        "month": payment.month,
        "year": payment.year,
        "isPaid": payment.is_paid,
        "paidAt": payment.paid_at.isoformat() if payment.paid_at else None,
    }


def _serialize(expense: ExpenseWithStatus) -> dict:
    return {
        "id": expense.id,
        "description": expense.description,
        "amount": expense.amount,
        "isPaid": expense.is_paid,
        "createdAt": expense.created_at.isoformat(),
        "updatedAt": expense.updated_at.isoformat(),
        "currentMonthPayment": _serialize_payment(expense.current_month_payment),
    }


def _current_period() -> tuple[int, int]:
    now = get_state().clock()
    return now.month, now.year


@bp.get("")
def list_expenses():
    month, year = _current_period()
    expenses = get_state().repositories.expenses.list_with_status(month=month, year=year)
    return jsonify([_serialize(expense) for expense in expenses])


@bp.post("")
def create_expense():
    state = get_state()
    form = ExpenseForm.from_mapping(request.get_json(silent=True), money_format=state.money_format)
    if not form.validate():
        return validation_error(form)

    expense = state.repositories.expenses.create(
        description=form.description, amount=form.amount  # type: ignore[arg-type]
    )
    logger.info("Recurring expense created", extra={"expense_id": expense.id})
    return jsonify(_serialize(expense)), 201


@bp.get("/<int:expense_id>")
def show_expense(expense_id: int):
    month, year = _current_period()
    expense = get_state().repositories.expenses.get_with_status(
        expense_id, month=month, year=year
    )
    if expense is None:
        return not_found("Expense")
    return jsonify(_serialize(expense))


@bp.put("/<int:expense_id>")
def update_expense(expense_id: int):
    state = get_state()
    form = ExpenseForm.from_mapping(
        request.get_json(silent=True), partial=True, money_format=state.money_format
    )
    if not form.validate():
        return validation_error(form)

    month, year = _current_period()
    expense = state.repositories.expenses.update(
        expense_id, month=month, year=year, description=form.description, amount=form.amount
    )
    if expense is None:
        return not_found("Expense")
    logger.info("Recurring expense updated", extra={"expense_id": expense_id})
    return jsonify(_serialize(expense))


@bp.delete("/<int:expense_id>")
def delete_expense(expense_id: int):
    if not get_state().repositories.expenses.delete(expense_id):
        return not_found("Expense")
    logger.info("Recurring expense deleted", extra={"expense_id": expense_id})
    return "", 204


@bp.patch("/<int:expense_id>/pay")
def toggle_expense_payment(expense_id: int):
    """Mark the expense paid or unpaid for the current month."""

    state = get_state()
    form = PaymentStatusForm.from_mapping(request.get_json(silent=True))
    if not form.validate():
        return validation_error(form)

    now = state.clock()
    payment = state.repositories.expenses.set_paid(
        expense_id,
        month=now.month,
        year=now.year,
        is_paid=form.is_paid,  # type: ignore[arg-type]
        now=now,
    )
    if payment is None:
        return not_found("Expense")
    logger.info(
        "Recurring expense payment toggled",
        extra={"expense_id": expense_id, "is_paid": payment.is_paid, "period": f"{now:%Y-%m}"},
    )
    return jsonify(_serialize_payment(payment))


@bp.post("/reset-payments")
def reset_payments():
    """Mark every recurring expense unpaid for the current month."""

    month, year = _current_period()
    count = get_state().repositories.expenses.reset_month(month=month, year=year)
    logger.info("Monthly payments reset", extra={"count": count, "month": month, "year": year})
    return jsonify(
        {
            "message": "All payments reset successfully",
            "count": count,
            "month": month,
            "year": year,
        }
    )
