"""Bank account balance."""

from __future__ import annotations

from typing import ClassVar, Optional

from sqlmodel import Field

from .base import TimestampedModel


class Account(TimestampedModel, table=True):
    """The single tracked bank account; the balance may be negative."""

    __tablename__: ClassVar[str] = "account"

    id: Optional[int] = Field(default=None, primary_key=True)
    balance: float = Field(default=0.0, nullable=False)
