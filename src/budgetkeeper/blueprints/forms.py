"""Field helpers shared by the JSON request forms."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..services.money import (
    DEFAULT_FORMAT,
    MoneyFormat,
    has_at_most_cents,
    read_currency,
    round_money,
)

_MISSING = object()


@dataclass(slots=True)
class JsonForm:
    """Base for request payload validation.

    Subclasses bind a JSON object with :meth:`load`, then :meth:`validate`
    populates typed attributes and ``errors``. With ``partial`` set, only the
    keys present in the payload are validated.
    """

    partial: bool = False
    money_format: MoneyFormat = DEFAULT_FORMAT
    errors: dict[str, list[str]] = field(default_factory=dict, init=False)
    raw_data: dict[str, Any] = field(default_factory=dict, init=False)

    @classmethod
    def from_mapping(
        cls,
        data: Any,
        *,
        partial: bool = False,
        money_format: MoneyFormat | None = None,
    ):
        """Create a form populated from a decoded JSON body."""

        form = cls(partial=partial, money_format=money_format or DEFAULT_FORMAT)
        form.load(data)
        return form

    def load(self, data: Any) -> None:
        self.errors.clear()
        if not isinstance(data, Mapping):
            self.raw_data = {}
            self._add_error("body", "Request body must be a JSON object.")
            return
        self.raw_data = dict(data)

    def validate(self) -> bool:  # pragma: no cover - overridden
        raise NotImplementedError

    def provided(self, key: str) -> bool:
        return self.raw_data.get(key, _MISSING) is not _MISSING

    def _add_error(self, field_name: str, message: str) -> None:
        """Accumulate validation errors for a specific field."""

        self.errors.setdefault(field_name, []).append(message)

    def _read_text(self, key: str, *, label: str, max_length: int) -> str | None:
        if not self.provided(key):
            if not self.partial:
                self._add_error(key, f"{label} is required")
            return None
        value = self.raw_data[key]
        if not isinstance(value, str):
            self._add_error(key, f"{label} must be a string")
            return None
        value = value.strip()
        if not value:
            self._add_error(key, f"{label} is required")
            return None
        if len(value) > max_length:
            self._add_error(key, f"{label} must be at most {max_length} characters")
            return None
        return value

    def _read_amount(
        self,
        key: str,
        *,
        label: str = "Amount",
        allow_negative: bool = False,
        allow_zero: bool = True,
    ) -> float | None:
        """Read a monetary field given as a JSON number or as user-typed text."""

        if not self.provided(key):
            if not self.partial:
                self._add_error(key, f"{label} is required")
            return None
        value = self.raw_data[key]
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            self._add_error(key, f"{label} must be a number")
            return None
        if isinstance(value, str):
            amount = read_currency(value, self.money_format)
        else:
            try:
                amount = float(value)
            except OverflowError:
                amount = None
        if amount is None or not math.isfinite(amount):
            self._add_error(key, f"{label} must be a valid number")
            return None
        if not has_at_most_cents(amount):
            self._add_error(key, f"{label} must have at most 2 decimal places")
            return None
        amount = round_money(amount)
        if not allow_negative and amount < 0:
            self._add_error(key, f"{label} must be positive or zero")
            return None
        if not allow_zero and amount == 0:
            self._add_error(key, f"{label} must be greater than zero")
            return None
        return amount

    def _read_bool(self, key: str, *, label: str) -> bool | None:
        if not self.provided(key):
            if not self.partial:
                self._add_error(key, f"{label} is required")
            return None
        value = self.raw_data[key]
        if not isinstance(value, bool):
            self._add_error(key, f"{label} must be a boolean")
            return None
        return value


def format_errors(errors: Mapping[str, list[str]]) -> str:
    """Flatten field errors into ``field: message, field: message``."""

    return ", ".join(f"{name}: {message}" for name, messages in errors.items() for message in messages)
