"""Column types shared by the table models."""

from __future__ import annotations

from enum import IntEnum

from sqlalchemy import Integer
from sqlalchemy.types import TypeDecorator


class IntEnumType(TypeDecorator):
    """Persist an IntEnum as its integer code and load it back as the enum."""

    impl = Integer
    cache_ok = True

    def __init__(self, enum_cls: type[IntEnum], *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.enum_cls = enum_cls

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return int(self.enum_cls(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return self.enum_cls(value)
