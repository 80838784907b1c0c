"""Request / response bodies. Wire field names are camelCase."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from taskflow.models.notification import Notification
from taskflow.models.task import Task, TaskStatus
from taskflow.models.user import Role, User


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# === Requests ===


class CreateTaskRequest(CamelModel):
    """Start a new chain."""

    title: str = Field(max_length=200)
    description: str
    created_by_user_id: int


class CompleteTaskRequest(CamelModel):
    """Complete the current step of a chain."""

    comment: str


# === Responses ===


class TaskResponse(CamelModel):
    id: int
    title: str
    description: str
    comment: str | None = None
    created_by_user_id: int
    assigned_to_user_id: int
    status: TaskStatus
    created_at: datetime
    completed_at: datetime | None = None
    chain_id: str

    @classmethod
    def from_task(cls, task: Task) -> TaskResponse:
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            comment=task.comment,
            created_by_user_id=task.created_by_user_id,
            assigned_to_user_id=task.assigned_to_user_id,
            status=task.status,
            created_at=task.created_at,
            completed_at=task.completed_at,
            chain_id=task.chain_id,
        )


class NotificationResponse(CamelModel):
    id: int
    user_id: int
    message: str
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> NotificationResponse:
        return cls(
            id=notification.id,
            user_id=notification.user_id,
            message=notification.message,
            created_at=notification.created_at,
        )


class UserResponse(CamelModel):
    id: int
    name: str
    role: Role

    @classmethod
    def from_user(cls, user: User) -> UserResponse:
        return cls(id=user.id, name=user.name, role=user.role)
