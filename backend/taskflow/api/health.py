"""Health check endpoint — database connectivity and role-chain config.

Checks: SQLite DB, configured role chain, seeded role holders.
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter()

VERSION = "0.1.0"


class HealthStatus(BaseModel):
    status: str  # "healthy" | "degraded" | "unhealthy"
    version: str
    checks: dict[str, dict]
    timestamp: datetime


@router.get("/health", response_model=HealthStatus)
def health_check() -> HealthStatus:
    """Check the database and the role chain the engine runs with."""
    checks: dict[str, dict] = {}
    overall_healthy = True
    has_warning = False

    # 1. Database
    try:
        from sqlalchemy import text

        from taskflow.db.database import engine
        with engine.connect() as conn:
            conn.execute(text("SELECT 1")).fetchone()
            checks["database"] = {"status": "ok", "detail": engine.url.get_backend_name()}
    except Exception as e:
        checks["database"] = {"status": "error", "detail": str(e)[:200]}
        overall_healthy = False

    # 2. Role chain
    role_flow = None
    try:
        from taskflow.config import get_role_flow
        role_flow = get_role_flow()
        checks["role_chain"] = {
            "status": "ok",
            "detail": " → ".join(r.name for r in role_flow.roles),
        }
    except ValueError as e:
        checks["role_chain"] = {"status": "error", "detail": str(e)}
        overall_healthy = False

    # 3. Every role in the chain has a holder
    if role_flow is not None and checks["database"]["status"] == "ok":
        try:
            from sqlmodel import Session

            from taskflow.db.database import engine
            from taskflow.storage.users import UserStore
            with Session(engine) as session:
                users = UserStore(session)
                missing = [r.name for r in role_flow.roles if users.get_by_role(r) is None]
            if missing:
                checks["role_holders"] = {"status": "warning", "detail": f"no user for {', '.join(missing)}"}
                has_warning = True
            else:
                checks["role_holders"] = {"status": "ok", "detail": f"{len(role_flow.roles)} roles staffed"}
        except Exception as e:
            checks["role_holders"] = {"status": "error", "detail": str(e)[:200]}
            overall_healthy = False

    if not overall_healthy:
        status = "unhealthy"
    elif has_warning:
        status = "degraded"
    else:
        status = "healthy"

    return HealthStatus(
        status=status,
        version=VERSION,
        checks=checks,
        timestamp=datetime.now(timezone.utc),
    )
