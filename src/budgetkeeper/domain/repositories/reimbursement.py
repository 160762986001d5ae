"""Pending reimbursement repository protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ...models.reimbursement import PendingReimbursement


@runtime_checkable
class ReimbursementRepository(Protocol):
    def list_all(self) -> list[PendingReimbursement]:
        ...

    def create(self, *, description: str, amount: float) -> PendingReimbursement:
        ...

    def delete(self, reimbursement_id: int) -> bool:
        ...
