"""Database setup — SQLite with WAL mode via SQLModel/SQLAlchemy.

- SQLModel: Pydantic v2 + SQLAlchemy in one model class
- SQLite WAL mode: concurrent reads while a completion is being written
- busy_timeout: a second writer waits for the lock instead of failing
- Alembic for migrations of managed databases
"""

from __future__ import annotations

import os
import sqlite3

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from taskflow.config import settings


def get_database_url() -> str:
    """Get database URL, ensuring the data directory exists."""
    url = settings.database_url
    if url.startswith("sqlite:///"):
        db_path = url.replace("sqlite:///", "")
        db_dir = os.path.dirname(db_path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)
    return url


@event.listens_for(Engine, "connect")
def set_sqlite_pragmas(dbapi_connection, connection_record):
    """Enable WAL mode for concurrent reads during task completion."""
    if not isinstance(dbapi_connection, sqlite3.Connection):
        return
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA synchronous=NORMAL")  # Safe with WAL
    cursor.execute("PRAGMA busy_timeout=5000")    # 5s wait on lock
    cursor.close()


_url = get_database_url()
engine = create_engine(
    _url,
    echo=False,
    # Required for SQLite when sessions cross threadpool workers
    connect_args={"check_same_thread": False} if _url.startswith("sqlite") else {},
)


def create_db_and_tables(bind: Engine | None = None) -> None:
    """Create all tables defined by SQLModel metadata."""
    # Register table models on the metadata
    from taskflow.models.notification import Notification  # noqa: F401
    from taskflow.models.task import Task  # noqa: F401
    from taskflow.models.user import User  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)


def get_session():
    """Dependency for FastAPI endpoints."""
    with Session(engine) as session:
        yield session
