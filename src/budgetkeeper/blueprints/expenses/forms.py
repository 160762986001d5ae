"""Recurring expense form validation helpers."""

from __future__ import annotations

from dataclasses import dataclass

from ..forms import JsonForm


@dataclass(slots=True)
class ExpenseForm(JsonForm):
    description: str | None = None
    amount: float | None = None

    def validate(self) -> bool:
        if self.errors:
            return False
        self.description = self._read_text("description", label="Description", max_length=200)
        self.amount = self._read_amount("amount")
        return not self.errors


@dataclass(slots=True)
class PaymentStatusForm(JsonForm):
    """``{"isPaid": bool}`` toggle for the current month."""

    is_paid: bool | None = None

    def validate(self) -> bool:
        if self.errors:
            return False
        self.is_paid = self._read_bool("isPaid", label="isPaid")
        return not self.errors
