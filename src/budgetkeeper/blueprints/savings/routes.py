"""Virtual savings routes."""

from __future__ import annotations

from flask import jsonify, request

from ...extensions import get_state
from ...logging_config import get_logger
from ...models.saving import VirtualSaving
from ..errors import not_found, validation_error
from . import bp
from .forms import SavingForm

logger = get_logger(__name__)


def _serialize(saving: VirtualSaving) -> dict:
    return {
        "id": saving.id,
        "name": saving.name,
        "amount": saving.amount,
        "createdAt": saving.created_at.isoformat(),
        "updatedAt": saving.updated_at.isoformat(),
    }


@bp.get("")
def list_savings():
    savings = get_state().repositories.savings.list_all()
    return jsonify([_serialize(saving) for saving in savings])


@bp.post("")
def create_saving():
    state = get_state()
    form = SavingForm.from_mapping(request.get_json(silent=True), money_format=state.money_format)
    if not form.validate():
        return validation_error(form)

    saving = state.repositories.savings.create(
        name=form.name, amount=form.amount  # type: ignore[arg-type]
    )
    logger.info("Saving created", extra={"saving_id": saving.id, "amount": saving.amount})
    return jsonify(_serialize(saving)), 201


@bp.put("/<int:saving_id>")
def update_saving(saving_id: int):
    """Apply a partial update: only the provided fields change."""

    state = get_state()
    form = SavingForm.from_mapping(
        request.get_json(silent=True), partial=True, money_format=state.money_format
    )
    if not form.validate():
        return validation_error(form)

    saving = state.repositories.savings.update(saving_id, name=form.name, amount=form.amount)
    if saving is None:
        return not_found("Saving")
    logger.info("Saving updated", extra={"saving_id": saving_id})
    return jsonify(_serialize(saving))


@bp.delete("/<int:saving_id>")
def delete_saving(saving_id: int):
    if not get_state().repositories.savings.delete(saving_id):
        return not_found("Saving")
    logger.info("Saving deleted", extra={"saving_id": saving_id})
    return "", 204
