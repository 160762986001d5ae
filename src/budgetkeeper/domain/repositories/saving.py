"""Virtual saving repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ...models.saving import VirtualSaving


@runtime_checkable
class SavingRepository(Protocol):
    """Repository for managing virtual savings."""

    def list_all(self) -> list[VirtualSaving]:
        """List savings, oldest first."""
        ...

    def get_by_id(self, saving_id: int) -> Optional[VirtualSaving]:
        ...

    def create(self, *, name: str, amount: float) -> VirtualSaving:
        ...

    def update(
        self, saving_id: int, *, name: Optional[str] = None, amount: Optional[float] = None
    ) -> Optional[VirtualSaving]:
        """Apply the provided fields; return None when the saving does not exist."""
        ...

    def delete(self, saving_id: int) -> bool:
        """Delete a saving; return False when it does not exist."""
        ...
