"""Task-flow failures.

Every failure a caller can trigger is a distinct TaskFlowError subclass
carrying the HTTP status the API reports it with.
"""

from __future__ import annotations


class TaskFlowError(Exception):
    """Base class for reportable task-flow failures."""

    status_code: int = 400


class CreatorNotOwnerError(TaskFlowError):
    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"Only Owner can create tasks (user {user_id} not found or not Owner).")


class NoSuccessorRoleError(TaskFlowError):
    def __init__(self, role) -> None:
        self.role = role
        super().__init__(f"Next role not defined for {role.name}.")


class SuccessorUserNotFoundError(TaskFlowError):
    def __init__(self, role) -> None:
        self.role = role
        super().__init__(f"Next role user not found: no user holds {role.name}.")


class RoleNotInChainError(TaskFlowError):
    def __init__(self, role) -> None:
        self.role = role
        super().__init__(f"Role {role.name} is not part of the configured role chain.")


class TaskNotFoundError(TaskFlowError):
    status_code = 404

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task not found: {task_id}")


class AssigneeNotFoundError(TaskFlowError):
    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class TaskAlreadyCompletedError(TaskFlowError):
    status_code = 409

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} is already completed.")


class RoleOccupiedError(TaskFlowError):
    status_code = 409

    def __init__(self, role, holder_id: int) -> None:
        self.role = role
        self.holder_id = holder_id
        super().__init__(f"Role {role.name} is already held by user {holder_id}.")


class DuplicateUserError(TaskFlowError):
    status_code = 409

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User {user_id} already exists.")
