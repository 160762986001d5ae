"""Shared column definitions."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def timestamp_field(**kwargs: Any) -> Any:
    """A timezone-aware ``DateTime`` column."""

    return Field(sa_type=DateTime(timezone=True), **kwargs)


class TimestampedModel(SQLModel):
    """Adds creation and modification timestamps (UTC)."""

    created_at: datetime = timestamp_field(default_factory=utcnow, nullable=False)
    updated_at: datetime = timestamp_field(default_factory=utcnow, nullable=False)

    def touch(self) -> None:
        self.updated_at = utcnow()
