"""Money owed back to the user."""

from __future__ import annotations

from typing import ClassVar, Optional

from sqlmodel import Field

from .base import TimestampedModel


class PendingReimbursement(TimestampedModel, table=True):
    __tablename__: ClassVar[str] = "pending_reimbursement"

    id: Optional[int] = Field(default=None, primary_key=True)
    description: str = Field(nullable=False, max_length=200)
    amount: float = Field(nullable=False)
