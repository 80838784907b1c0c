"""Notification API — GET /notifications/{user_id}."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlmodel import Session

from taskflow.api.schemas import NotificationResponse
from taskflow.db.database import get_session
from taskflow.storage.notifications import NotificationStore

router = APIRouter(tags=["notifications"])


@router.get("/notifications/{user_id}", response_model=list[NotificationResponse])
def list_notifications(
    user_id: int,
    session: Session = Depends(get_session),
) -> list[NotificationResponse]:
    """All notifications for a recipient, in storage order."""
    notifications = NotificationStore(session).list_for_user(user_id)
    return [NotificationResponse.from_notification(n) for n in notifications]
