"""Notification model — recorded once per fully completed chain."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlmodel import SQLModel
from sqlmodel import Field as SQLField


class Notification(SQLModel, table=True):
    """Chain-terminal signal addressed to the chain's creator."""

    __tablename__ = "notifications"

    id: int | None = SQLField(default=None, primary_key=True)
    user_id: int = SQLField(foreign_key="users.id", index=True)
    message: str
    created_at: datetime = SQLField(default_factory=lambda: datetime.now(timezone.utc))
