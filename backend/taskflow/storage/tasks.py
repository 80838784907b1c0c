"""Task store — task rows and the completion update."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from sqlalchemy import update
from sqlmodel import Session, select

from taskflow.models.task import Task, TaskStatus


class TaskStore:
    """Read/write accessor for Task rows. Never commits."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, task_id: int) -> Task | None:
        return self.session.get(Task, task_id)

    def add(self, task: Task) -> Task:
        """Stage a task and flush so its generated id is available."""
        self.session.add(task)
        self.session.flush()
        return task

    def list_active_for_user(self, user_id: int) -> Sequence[Task]:
        """Active inbox: tasks assigned to the user that are not completed."""
        statement = (
            select(Task)
            .where(Task.assigned_to_user_id == user_id)
            .where(Task.status != TaskStatus.COMPLETED)
            .order_by(Task.id)
        )
        return self.session.exec(statement).all()

    def list_chain(self, chain_id: str) -> Sequence[Task]:
        statement = select(Task).where(Task.chain_id == chain_id).order_by(Task.id)
        return self.session.exec(statement).all()

    def mark_completed(self, task_id: int, comment: str, completed_at: datetime) -> bool:
        """Flip a not-yet-completed task to COMPLETED.

        The status guard is part of the UPDATE itself, so of two concurrent
        completions of one task only the first matches a row.

        Returns:
            True if the task was updated, False if it was already completed.
        """
        statement = (
            update(Task)
            .where(Task.id == task_id)
            .where(Task.status != TaskStatus.COMPLETED)
            .values(status=TaskStatus.COMPLETED, comment=comment, completed_at=completed_at)
            .execution_options(synchronize_session=False)
        )
        result = self.session.exec(statement)  # type: ignore[call-overload]
        return result.rowcount == 1
