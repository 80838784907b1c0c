"""Alembic environment for the TaskFlow schema.

Tracks the three TaskFlow tables (users, tasks, notifications) through
SQLModel.metadata. The target database is TASKFLOW_DATABASE_URL, read via
taskflow.config.settings, so `alembic upgrade head` migrates the same file
the server opens.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlmodel import SQLModel, create_engine

from taskflow.config import settings
from taskflow.models.notification import Notification  # noqa: F401
from taskflow.models.task import Task  # noqa: F401
from taskflow.models.user import User  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = SQLModel.metadata

# SQLite cannot ALTER most constraints in place; batch mode rebuilds the table.
_COMMON_OPTS = {"target_metadata": target_metadata, "render_as_batch": True}


def run_migrations_offline() -> None:
    """Emit the migration SQL without connecting."""
    context.configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_COMMON_OPTS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations to the configured database."""
    connectable = create_engine(settings.database_url, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, **_COMMON_OPTS)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
