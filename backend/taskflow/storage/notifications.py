"""Notification store."""

from __future__ import annotations

from typing import Sequence

from sqlmodel import Session, select

from taskflow.models.notification import Notification


class NotificationStore:
    """Read/write accessor for Notification rows. Never commits."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, user_id: int, message: str) -> Notification:
        notification = Notification(user_id=user_id, message=message)
        self.session.add(notification)
        self.session.flush()
        return notification

    def list_for_user(self, user_id: int) -> Sequence[Notification]:
        """All notifications for a recipient, in storage order."""
        statement = (
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.id)
        )
        return self.session.exec(statement).all()
