"""Virtual saving form validation helpers."""

from __future__ import annotations

from dataclasses import dataclass

from ..forms import JsonForm


@dataclass(slots=True)
class SavingForm(JsonForm):
    """Name and amount of a saving.

    Negative amounts are allowed and represent withdrawals.
    """

    name: str | None = None
    amount: float | None = None

    def validate(self) -> bool:
        if self.errors:
            return False
        self.name = self._read_text("name", label="Name", max_length=100)
        self.amount = self._read_amount("amount", allow_negative=True)
        return not self.errors
