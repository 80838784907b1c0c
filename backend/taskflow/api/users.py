"""User API — read-only view of the role holders."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from taskflow.api.schemas import UserResponse
from taskflow.db.database import get_session
from taskflow.storage.users import UserStore

router = APIRouter(tags=["users"])


@router.get("/users", response_model=list[UserResponse])
def list_users(session: Session = Depends(get_session)) -> list[UserResponse]:
    return [UserResponse.from_user(u) for u in UserStore(session).list_all()]


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(user_id: int, session: Session = Depends(get_session)) -> UserResponse:
    user = UserStore(session).get(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail=f"User not found: {user_id}")
    return UserResponse.from_user(user)
