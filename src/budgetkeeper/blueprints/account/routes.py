"""Account routes."""

from __future__ import annotations

from flask import jsonify, request

from ...extensions import get_state
from ...logging_config import get_logger
from ...models.account import Account
from ..errors import validation_error
from . import bp
from .forms import AccountForm

logger = get_logger(__name__)


def _serialize(account: Account) -> dict:
    return {
        "id": account.id,
        "balance": account.balance,
        "createdAt": account.created_at.isoformat(),
        "updatedAt": account.updated_at.isoformat(),
    }


@bp.get("")
def show_account():
    """Return the account, creating it with a zero balance on first use."""

    account = get_state().repositories.accounts.get_or_create()
    return jsonify(_serialize(account))


@bp.put("")
def update_account():
    state = get_state()
    form = AccountForm.from_mapping(
        request.get_json(silent=True), money_format=state.money_format
    )
    if not form.validate():
        return validation_error(form)

    account = state.repositories.accounts.set_balance(form.balance)  # type: ignore[arg-type]
    logger.info("Account balance updated", extra={"balance": account.balance})
    return jsonify(_serialize(account))
