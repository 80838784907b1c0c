"""User store — lookups by id and role, provisioning with role uniqueness."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import func
from sqlmodel import Session, select

from taskflow.models.user import Role, User
from taskflow.workflows.errors import DuplicateUserError, RoleOccupiedError


class UserStore:
    """Read/write accessor for User rows. Never commits."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        return self.session.get(User, user_id)

    def get_by_role(self, role: Role) -> User | None:
        """Return the user holding `role` (lowest id if several)."""
        statement = select(User).where(User.role == role).order_by(User.id)
        return self.session.exec(statement).first()

    def add(self, user: User) -> User:
        """Stage a new user, rejecting an id or role that is already taken."""
        if self.get(user.id) is not None:
            raise DuplicateUserError(user.id)
        holder = self.get_by_role(user.role)
        if holder is not None:
            raise RoleOccupiedError(user.role, holder.id)
        self.session.add(user)
        self.session.flush()
        return user

    def list_all(self) -> Sequence[User]:
        return self.session.exec(select(User).order_by(User.id)).all()

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(User)).one()
