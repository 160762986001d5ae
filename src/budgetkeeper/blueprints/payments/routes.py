"""Pending payment routes."""

from __future__ import annotations

from flask import jsonify, request

from ...extensions import get_state
from ...logging_config import get_logger
from ...models.payment import PendingPayment
from ..errors import not_found, validation_error
from . import bp
from .forms import PaymentForm

logger = get_logger(__name__)


def _serialize(payment: PendingPayment) -> dict:
    return {
        "id": payment.id,
        "description": payment.description,
        "amount": payment.amount,
        "isPaid": payment.is_paid,
        "createdAt": payment.created_at.isoformat(),
        "updatedAt": payment.updated_at.isoformat(),
    }


@bp.get("")
def list_payments():
    payments = get_state().repositories.payments.list_all()
    return jsonify([_serialize(payment) for payment in payments])


@bp.post("")
def create_payment():
    state = get_state()
    form = PaymentForm.from_mapping(request.get_json(silent=True), money_format=state.money_format)
    if not form.validate():
        return validation_error(form)

    payment = state.repositories.payments.create(
        description=form.description, amount=form.amount  # type: ignore[arg-type]
    )
    logger.info("Pending payment created", extra={"payment_id": payment.id})
    return jsonify(_serialize(payment)), 201


@bp.patch("/<int:payment_id>")
def update_payment(payment_id: int):
    state = get_state()
    form = PaymentForm.from_mapping(
        request.get_json(silent=True), partial=True, money_format=state.money_format
    )
    if not form.validate():
        return validation_error(form)

    payment = state.repositories.payments.update(
        payment_id, description=form.description, amount=form.amount, is_paid=form.is_paid
    )
    if payment is None:
        return not_found("Payment")
    logger.info("Pending payment updated", extra={"payment_id": payment_id})
    return jsonify(_serialize(payment))


@bp.delete("/<int:payment_id>")
def delete_payment(payment_id: int):
    """Remove a payment, typically once it has gone through."""

    if not get_state().repositories.payments.delete(payment_id):
        return not_found("Payment")
    logger.info("Pending payment deleted", extra={"payment_id": payment_id})
    return "", 204
