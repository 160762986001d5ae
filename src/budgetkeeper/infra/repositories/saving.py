"""SQLModel implementation of VirtualSaving repository."""

from __future__ import annotations

from typing import Optional

from sqlmodel import select

from ...models.saving import VirtualSaving
from ...services.money import round_money
from ..database import SessionFactory


class SQLModelSavingRepository:
    """SQLModel-based virtual saving repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def list_all(self) -> list[VirtualSaving]:
        """List savings, oldest first."""
        with self.session_factory() as session:
            statement = select(VirtualSaving).order_by(
                VirtualSaving.created_at, VirtualSaving.id  # type: ignore[arg-type]
            )
            return list(session.exec(statement).all())

    def get_by_id(self, saving_id: int) -> Optional[VirtualSaving]:
        with self.session_factory() as session:
            return session.get(VirtualSaving, saving_id)

    def create(self, *, name: str, amount: float) -> VirtualSaving:
        with self.session_factory() as session:
            saving = VirtualSaving(name=name, amount=round_money(amount))
            session.add(saving)
            session.commit()
            session.refresh(saving)
            return saving

    def update(
        self, saving_id: int, *, name: Optional[str] = None, amount: Optional[float] = None
    ) -> Optional[VirtualSaving]:
        """Apply the provided fields; return None when the saving does not exist."""
        with self.session_factory() as session:
            saving = session.get(VirtualSaving, saving_id)
            if saving is None:
                return None
            if name is not None:
                saving.name = name
            if amount is not None:
                saving.amount = round_money(amount)
            saving.touch()
            session.add(saving)
            session.commit()
            session.refresh(saving)
            return saving

    def delete(self, saving_id: int) -> bool:
        with self.session_factory() as session:
            saving = session.get(VirtualSaving, saving_id)
            if saving is None:
                return False
            session.delete(saving)
            return True
