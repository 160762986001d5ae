"""One-off upcoming payments."""

from __future__ import annotations

from typing import ClassVar, Optional

from sqlmodel import Field

from .base import TimestampedModel


class PendingPayment(TimestampedModel, table=True):
    """A single obligation tracked until it is paid and removed."""

    __tablename__: ClassVar[str] = "pending_payment"

    id: Optional[int] = Field(default=None, primary_key=True)
    description: str = Field(nullable=False, max_length=200)
    amount: float = Field(nullable=False)
    is_paid: bool = Field(default=False, nullable=False)
