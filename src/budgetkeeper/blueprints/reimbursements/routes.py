"""Pending reimbursement routes."""

from __future__ import annotations

from flask import jsonify, request

from ...extensions import get_state
from ...logging_config import get_logger
from ...models.reimbursement import PendingReimbursement
from ..errors import not_found, validation_error
from . import bp
from .forms import ReimbursementForm

logger = get_logger(__name__)


def _serialize(reimbursement: PendingReimbursement) -> dict:
    return {
        "id": reimbursement.id,
        "description": reimbursement.description,
        "amount": reimbursement.amount,
        "createdAt": reimbursement.created_at.isoformat(),
        "updatedAt": reimbursement.updated_at.isoformat(),
    }


@bp.get("")
def list_reimbursements():
    reimbursements = get_state().repositories.reimbursements.list_all()
    return jsonify([_serialize(item) for item in reimbursements])


@bp.post("")
def create_reimbursement():
    state = get_state()
    form = ReimbursementForm.from_mapping(
        request.get_json(silent=True), money_format=state.money_format
    )
    if not form.validate():
        return validation_error(form)

    reimbursement = state.repositories.reimbursements.create(
        description=form.description, amount=form.amount  # type: ignore[arg-type]
    )
    logger.info("Reimbursement created", extra={"reimbursement_id": reimbursement.id})
    return jsonify(_serialize(reimbursement)), 201


@bp.delete("/<int:reimbursement_id>")
def delete_reimbursement(reimbursement_id: int):
    if not get_state().repositories.reimbursements.delete(reimbursement_id):
        return not_found("Reimbursement")
    logger.info("Reimbursement deleted", extra={"reimbursement_id": reimbursement_id})
    return "", 204
