"""Task Flow Engine — role-chain delegation state machine.

Per task:   PENDING → COMPLETED (one way, never reopened)
Per chain:  Owner creates → Director → Manager → Supervisor → Employee
            → notification to the Owner

Each arrow of the chain is one complete_task() call, which closes the
current row and either opens a new row for the next role-holder or, at
the terminal role, records a notification. Both writes share a single
commit.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Sequence

from sqlmodel import Session

from taskflow.models.task import Task, TaskStatus
from taskflow.models.user import Role
from taskflow.storage.notifications import NotificationStore
from taskflow.storage.tasks import TaskStore
from taskflow.storage.users import UserStore
from taskflow.workflows.errors import (
    AssigneeNotFoundError,
    CreatorNotOwnerError,
    NoSuccessorRoleError,
    RoleNotInChainError,
    SuccessorUserNotFoundError,
    TaskAlreadyCompletedError,
    TaskFlowError,
    TaskNotFoundError,
)
from taskflow.workflows.role_flow import RoleFlow

logger = logging.getLogger(__name__)

__all__ = [
    "TaskFlowEngine",
    "TaskFlowError",
    "AssigneeNotFoundError",
    "CreatorNotOwnerError",
    "NoSuccessorRoleError",
    "RoleNotInChainError",
    "SuccessorUserNotFoundError",
    "TaskAlreadyCompletedError",
    "TaskNotFoundError",
]


class TaskFlowEngine:
    """Creates chains and advances them on completion.

    The engine holds no state of its own; everything lives in the
    session's database. One engine instance serves one request.

    Usage:
        engine = TaskFlowEngine(session, RoleFlow())
        task = engine.create_initial_task("Approve budget", "Q3", created_by_user_id=1)
        engine.complete_task(task.id, comment="ok")
        engine.get_tasks_for_user(3)  # Manager's inbox now holds the successor
    """

    def __init__(self, session: Session, role_flow: RoleFlow | None = None) -> None:
        self.session = session
        self.role_flow = role_flow or RoleFlow()
        self.users = UserStore(session)
        self.tasks = TaskStore(session)
        self.notifications = NotificationStore(session)

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create_initial_task(self, title: str, description: str, created_by_user_id: int) -> Task:
        """Start a chain: assign a new task to the initiator's successor.

        Raises:
            CreatorNotOwnerError: Creator missing or not the chain initiator.
            NoSuccessorRoleError: The initiator has no successor role.
            SuccessorUserNotFoundError: Nobody holds the successor role.
        """
        creator = self.users.get(created_by_user_id)
        if creator is None or creator.role != self.role_flow.initiator:
            raise CreatorNotOwnerError(created_by_user_id)

        next_role = self.role_flow.successor(creator.role)
        if next_role is None:
            raise NoSuccessorRoleError(creator.role)

        next_user = self.users.get_by_role(next_role)
        if next_user is None:
            raise SuccessorUserNotFoundError(next_role)

        task = Task(
            title=title,
            description=description,
            created_by_user_id=creator.id,
            assigned_to_user_id=next_user.id,
            status=TaskStatus.PENDING,
        )
        with self._unit_of_work():
            self.tasks.add(task)
        self.session.refresh(task)
        logger.info(
            "Chain %s started by user %d: task %d assigned to %s (user %d)",
            task.chain_id, creator.id, task.id, next_role.name, next_user.id,
        )
        return task

    # ------------------------------------------------------------------
    # Complete
    # ------------------------------------------------------------------

    def complete_task(self, task_id: int, comment: str) -> Task:
        """Complete a task and hand the chain to the next role-holder.

        If the assignee's role has a successor, a new PENDING task cloning
        title/description/creator/chain is assigned to the user holding it.
        If nobody holds the successor role the chain stops here without a
        notification. At the terminal role a notification is recorded for
        the chain's creator instead.

        Raises:
            TaskNotFoundError: No task with this id.
            TaskAlreadyCompletedError: The task was completed before.
            AssigneeNotFoundError: The assigned user no longer exists.
            RoleNotInChainError: The assignee's role is outside the chain.
        """
        task = self.tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        if task.status == TaskStatus.COMPLETED:
            raise TaskAlreadyCompletedError(task_id)

        with self._unit_of_work():
            now = datetime.now(timezone.utc)
            if not self.tasks.mark_completed(task_id, comment, now):
                raise TaskAlreadyCompletedError(task_id)
            self.session.refresh(task)

            assignee = self.users.get(task.assigned_to_user_id)
            if assignee is None:
                raise AssigneeNotFoundError(task.assigned_to_user_id)
            if assignee.role not in self.role_flow:
                raise RoleNotInChainError(assignee.role)

            if self.role_flow.is_terminal(assignee.role):
                self.notifications.add(
                    task.created_by_user_id,
                    f"Task '{task.title}' fully completed by {assignee.name}",
                )
                logger.info(
                    "Chain %s finished by %s (user %d); creator %d notified",
                    task.chain_id, assignee.name, assignee.id, task.created_by_user_id,
                )
            else:
                self._hand_off(task, self.role_flow.successor(assignee.role))

        self.session.refresh(task)
        return task

    def _hand_off(self, task: Task, next_role: Role) -> None:
        next_user = self.users.get_by_role(next_role)
        if next_user is None:
            logger.warning(
                "Chain %s stops at task %d: no user holds %s",
                task.chain_id, task.id, next_role.name,
            )
            return

        successor = self.tasks.add(
            Task(
                title=task.title,
                description=task.description,
                created_by_user_id=task.created_by_user_id,
                assigned_to_user_id=next_user.id,
                status=TaskStatus.PENDING,
                chain_id=task.chain_id,
            )
        )
        logger.info(
            "Chain %s: task %d completed, task %d assigned to %s (user %d)",
            task.chain_id, task.id, successor.id, next_role.name, next_user.id,
        )

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_tasks_for_user(self, user_id: int) -> Sequence[Task]:
        """Active inbox of a user. Unknown users get an empty list."""
        return self.tasks.list_active_for_user(user_id)

    def get_chain(self, chain_id: str) -> Sequence[Task]:
        """Every task row of one chain, oldest first."""
        return self.tasks.list_chain(chain_id)

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    @contextmanager
    def _unit_of_work(self) -> Iterator[None]:
        """Commit on success, roll back everything staged on any failure."""
        try:
            yield
        except Exception:
            self.session.rollback()
            raise
        self.session.commit()
