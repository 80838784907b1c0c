"""User model and the Role enumeration.

Roles are stored as integer codes:
    0=Owner, 1=Director, 2=Manager, 3=Supervisor, 4=Employee
"""

from __future__ import annotations

from enum import IntEnum

from sqlmodel import Column, SQLModel
from sqlmodel import Field as SQLField

from taskflow.models.types import IntEnumType


class Role(IntEnum):
    OWNER = 0
    DIRECTOR = 1
    MANAGER = 2
    SUPERVISOR = 3
    EMPLOYEE = 4


class User(SQLModel, table=True):
    """An organizational role holder. One user per role."""

    __tablename__ = "users"

    id: int = SQLField(primary_key=True)  # Stable, assigned at provisioning
    name: str
    role: Role = SQLField(sa_column=Column(IntEnumType(Role), nullable=False, unique=True))
