"""Cold Start Seeder — provision one user per role.

Runs at startup (settings.seed_users) and from scripts/seed_users.py.
Seeding only happens on an empty user table, so restarts never touch
existing data.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlmodel import Session

from taskflow.models.user import Role, User
from taskflow.storage.users import UserStore
from taskflow.workflows.errors import TaskFlowError

logger = logging.getLogger(__name__)

# ids 1-5 in role order
SEED_USERS: list[dict] = [
    {"id": 1, "name": "CEO", "role": Role.OWNER},
    {"id": 2, "name": "Director", "role": Role.DIRECTOR},
    {"id": 3, "name": "Manager", "role": Role.MANAGER},
    {"id": 4, "name": "Supervisor", "role": Role.SUPERVISOR},
    {"id": 5, "name": "Employee", "role": Role.EMPLOYEE},
]


@dataclass
class SeedResult:
    """Result of a seeding operation."""

    users_created: int = 0
    skipped: bool = False  # User table already populated
    errors: list[str] = field(default_factory=list)


class UserSeeder:
    """Seeds the user table with the role holders.

    Usage:
        with Session(engine) as session:
            result = UserSeeder(session).seed()
    """

    def __init__(self, session: Session, users: list[dict] | None = None) -> None:
        self.session = session
        self.users = users if users is not None else SEED_USERS

    def seed(self) -> SeedResult:
        """Insert seed users if no user exists yet. All or nothing."""
        result = SeedResult()
        store = UserStore(self.session)

        if store.count() > 0:
            result.skipped = True
            logger.info("User table already populated, seeding skipped")
            return result

        try:
            for defn in self.users:
                store.add(User(id=defn["id"], name=defn["name"], role=defn["role"]))
                result.users_created += 1
            self.session.commit()
        except TaskFlowError as e:
            self.session.rollback()
            result.users_created = 0
            result.errors.append(str(e))
            logger.error("User seeding failed: %s", e)
            return result

        logger.info("Seeded %d users", result.users_created)
        return result
