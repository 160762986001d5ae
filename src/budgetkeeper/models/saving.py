"""Virtual savings buckets."""

from __future__ import annotations

from typing import ClassVar, Optional

from sqlmodel import Field

from .base import TimestampedModel


class VirtualSaving(TimestampedModel, table=True):
    """Money set aside inside the account; a negative amount records a withdrawal."""

    __tablename__: ClassVar[str] = "virtual_saving"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=100)
    amount: float = Field(nullable=False)
