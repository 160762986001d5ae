"""Account form validation helpers."""

from __future__ import annotations

from dataclasses import dataclass

from ..forms import JsonForm


@dataclass(slots=True)
class AccountForm(JsonForm):
    """Balance update; negative balances (overdraft) are accepted."""

    balance: float | None = None

    def validate(self) -> bool:
        if self.errors:
            return False
        self.balance = self._read_amount("balance", label="Balance", allow_negative=True)
        return not self.errors
