"""SQLModel implementation of Account repository."""

from __future__ import annotations

from sqlmodel import Session, select

from ...models.account import Account
from ...services.money import round_money
from ..database import SessionFactory


def _first_account(session: Session) -> Account | None:
    return session.exec(select(Account).order_by(Account.id)).first()  # type: ignore[arg-type]


class SQLModelAccountRepository:
    """SQLModel-based account repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_or_create(self) -> Account:
        """Return the account, creating it with a zero balance when missing."""
        with self.session_factory() as session:
            account = _first_account(session)
            if account is None:
                account = Account(balance=0.0)
                session.add(account)
                session.commit()
                session.refresh(account)
            return account

    def set_balance(self, balance: float) -> Account:
        """Persist a new balance, creating the account if needed."""
        with self.session_factory() as session:
            account = _first_account(session)
            if account is None:
                account = Account(balance=round_money(balance))
            else:
                account.balance = round_money(balance)
                account.touch()
            session.add(account)
            session.commit()
            session.refresh(account)
            return account
