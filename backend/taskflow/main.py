"""TaskFlow FastAPI Application.

Entry point for the backend server. Startup creates the tables and,
when enabled, seeds one user per role.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import Session

from taskflow.api.health import VERSION
from taskflow.api.health import router as health_router
from taskflow.api.notifications import router as notifications_router
from taskflow.api.tasks import router as tasks_router
from taskflow.api.users import router as users_router
from taskflow.config import get_role_flow, settings
from taskflow.db.database import create_db_and_tables, engine
from taskflow.middleware.timing import RequestTimingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    create_db_and_tables()

    # Fail fast on a malformed TASKFLOW_ROLE_CHAIN
    role_flow = get_role_flow()
    logger.info("Role chain: %r", role_flow)

    if settings.seed_users:
        from taskflow.cold_start.seeder import UserSeeder

        with Session(engine) as session:
            result = UserSeeder(session).seed()
        if result.errors:
            logger.warning("Seeding finished with errors: %s", "; ".join(result.errors))

    yield


app = FastAPI(
    title="TaskFlow",
    description="Role-based task delegation chains",
    version=VERSION,
    lifespan=lifespan,
)

# Middleware (order matters: first added = innermost)
app.add_middleware(RequestTimingMiddleware, slow_threshold_ms=settings.slow_request_ms)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)


# Global exception handler: storage failures surface as a plain 500
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error."},
    )


# Routes
app.include_router(health_router)
app.include_router(users_router)
app.include_router(tasks_router)
app.include_router(notifications_router)


@app.get("/")
async def root():
    return {"name": "TaskFlow", "version": VERSION, "status": "running"}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=settings.host, port=settings.port)
