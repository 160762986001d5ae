"""Pending payment repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ...models.payment import PendingPayment


@runtime_checkable
class PaymentRepository(Protocol):
    def list_all(self) -> list[PendingPayment]:
        ...

    def get_by_id(self, payment_id: int) -> Optional[PendingPayment]:
        ...

    def create(self, *, description: str, amount: float) -> PendingPayment:
        ...

    def update(
        self,
        payment_id: int,
        *,
        description: Optional[str] = None,
        amount: Optional[float] = None,
        is_paid: Optional[bool] = None,
    ) -> Optional[PendingPayment]:
        ...

    def delete(self, payment_id: int) -> bool:
        ...
