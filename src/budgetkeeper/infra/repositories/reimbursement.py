"""SQLModel implementation of PendingReimbursement repository."""

from __future__ import annotations

from sqlmodel import select

from ...models.reimbursement import PendingReimbursement
from ...services.money import round_money
from ..database import SessionFactory


class SQLModelReimbursementRepository:
    """SQLModel-based pending reimbursement repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def list_all(self) -> list[PendingReimbursement]:
        with self.session_factory() as session:
            statement = select(PendingReimbursement).order_by(
                PendingReimbursement.created_at, PendingReimbursement.id  # type: ignore[arg-type]
            )
            return list(session.exec(statement).all())

    def create(self, *, description: str, amount: float) -> PendingReimbursement:
        with self.session_factory() as session:
            reimbursement = PendingReimbursement(
                description=description, amount=round_money(amount)
            )
            session.add(reimbursement)
            session.commit()
            session.refresh(reimbursement)
            return reimbursement

    def delete(self, reimbursement_id: int) -> bool:
        with self.session_factory() as session:
            reimbursement = session.get(PendingReimbursement, reimbursement_id)
            if reimbursement is None:
                return False
            session.delete(reimbursement)
            return True
