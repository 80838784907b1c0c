"""Task model and the TaskStatus enumeration.

A delegation chain is a sequence of Task rows sharing one chain_id.
Completing a task never advances it in place: the next role-holder
gets a new row.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import IntEnum
from uuid import uuid4

from sqlmodel import Column, SQLModel
from sqlmodel import Field as SQLField

from taskflow.models.types import IntEnumType


class TaskStatus(IntEnum):
    PENDING = 0
    IN_PROGRESS = 1  # Declared only; no transition uses it
    COMPLETED = 2


class Task(SQLModel, table=True):
    """One role-holder's step in a delegation chain."""

    __tablename__ = "tasks"

    id: int | None = SQLField(default=None, primary_key=True)
    title: str
    description: str
    comment: str | None = None  # Set on completion
    created_by_user_id: int = SQLField(foreign_key="users.id")  # Chain initiator, never changes
    assigned_to_user_id: int = SQLField(foreign_key="users.id", index=True)
    status: TaskStatus = SQLField(
        default=TaskStatus.PENDING,
        sa_column=Column(IntEnumType(TaskStatus), nullable=False),
    )
    created_at: datetime = SQLField(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: datetime | None = None
    chain_id: str = SQLField(default_factory=lambda: str(uuid4()), index=True)
