"""Shared test fixtures for TaskFlow backend tests."""

import os
import sys

import pytest

# Ensure backend is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
os.environ.setdefault("TASKFLOW_DATABASE_URL", "sqlite:///test.db")
os.environ.setdefault("TASKFLOW_SEED_USERS", "false")

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from taskflow.api.notifications import router as notifications_router
from taskflow.api.tasks import router as tasks_router
from taskflow.api.users import router as users_router
from taskflow.cold_start.seeder import UserSeeder
from taskflow.db.database import create_db_and_tables, get_session


@pytest.fixture
def db_engine():
    """In-memory SQLite shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    with Session(db_engine) as session:
        yield session


@pytest.fixture
def seeded_session(db_session):
    """Session over a database holding the five seed users (ids 1-5)."""
    result = UserSeeder(db_session).seed()
    assert result.users_created == 5
    return db_session


@pytest.fixture
def client(db_engine):
    """Test app with the task, notification and user routers on a seeded DB."""
    with Session(db_engine) as session:
        UserSeeder(session).seed()

    def _session_override():
        with Session(db_engine) as session:
            yield session

    test_app = FastAPI()
    test_app.include_router(users_router)
    test_app.include_router(tasks_router)
    test_app.include_router(notifications_router)
    test_app.dependency_overrides[get_session] = _session_override
    return TestClient(test_app)
