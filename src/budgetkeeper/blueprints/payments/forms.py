"""Pending payment form validation helpers."""

from __future__ import annotations

from dataclasses import dataclass

from ..forms import JsonForm


@dataclass(slots=True)
class PaymentForm(JsonForm):
    """Description, strictly positive amount and, on update, the paid flag."""

    description: str | None = None
    amount: float | None = None
    is_paid: bool | None = None

    def validate(self) -> bool:
        if self.errors:
            return False
        self.description = self._read_text("description", label="Description", max_length=200)
        self.amount = self._read_amount("amount", allow_zero=False)
        if self.partial:
            self.is_paid = self._read_bool("isPaid", label="isPaid")
        return not self.errors
