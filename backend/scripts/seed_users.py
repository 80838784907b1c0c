#!/usr/bin/env python3
"""Seed one user per role into the database.

Usage:
    cd backend
    python -m scripts.seed_users
    python -m scripts.seed_users --list
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

BACKEND_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(BACKEND_DIR))

# Ensure CWD is backend/ so sqlite:///data/taskflow.db resolves correctly
os.chdir(BACKEND_DIR)

from sqlmodel import Session  # noqa: E402

from taskflow.cold_start.seeder import UserSeeder  # noqa: E402
from taskflow.db.database import create_db_and_tables, engine  # noqa: E402
from taskflow.storage.users import UserStore  # noqa: E402

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed TaskFlow role holders")
    parser.add_argument("--list", action="store_true", help="Print users after seeding")
    args = parser.parse_args()

    create_db_and_tables()
    with Session(engine) as session:
        result = UserSeeder(session).seed()
        if result.skipped:
            print("  SKIP: user table already populated")
        else:
            print(f"  CREATED: {result.users_created} users")
        for err in result.errors:
            print(f"  ERROR: {err}")

        if args.list:
            for user in UserStore(session).list_all():
                print(f"  {user.id:>3}  {user.role.name:<10}  {user.name}")

    return 1 if result.errors else 0


if __name__ == "__main__":
    sys.exit(main())
