"""Account repository protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ...models.account import Account


@runtime_checkable
class AccountRepository(Protocol):
    """Repository for the single tracked account."""

    def get_or_create(self) -> Account:
        """Return the account, creating it with a zero balance when missing."""
        ...

    def set_balance(self, balance: float) -> Account:
        """Persist a new balance, creating the account if needed."""
        ...
