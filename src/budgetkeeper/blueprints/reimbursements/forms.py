"""Pending reimbursement form validation helpers."""

from __future__ import annotations

from dataclasses import dataclass

from ..forms import JsonForm


@dataclass(slots=True)
class ReimbursementForm(JsonForm):
    description: str | None = None
    amount: float | None = None

    def validate(self) -> bool:
        if self.errors:
            return False
        self.description = self._read_text("description", label="Description", max_length=200)
        self.amount = self._read_amount("amount", allow_zero=False)
        return not self.errors
