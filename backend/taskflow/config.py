"""TaskFlow configuration — settings, role chain."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from taskflow.workflows.role_flow import RoleFlow


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite:///data/taskflow.db"

    # Role chain (comma-separated, first entry initiates chains)
    role_chain: str = "owner,director,manager,supervisor,employee"

    # Insert one user per role on first startup
    seed_users: bool = True

    # CORS (comma-separated origins)
    cors_origins: str = "http://localhost:3000"

    # Request logging
    slow_request_ms: float = 1000.0
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = {"env_prefix": "TASKFLOW_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def get_role_flow() -> RoleFlow:
    """Build the RoleFlow described by settings.role_chain."""
    return RoleFlow.from_names(settings.role_chain.split(","))
