# todo_api/config.py
"""Environment-driven settings for the task API."""

import os
import tempfile
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv(override=False)

DURABLE_DB_PATH = Path("./todos.db")
DB_FILENAME = "todos.db"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def resolve_database_path(app_env: str, override: Optional[str] = None) -> Path:
    """Pick the SQLite file location.

    An explicit override always wins. In production the file lives in the
    system temp directory, since hosted containers only guarantee that it is
    writable; everywhere else it sits next to the working directory.
    """
    if override:
        return Path(override).expanduser()
    if app_env == "production":
        return Path(tempfile.gettempdir()) / DB_FILENAME
    return DURABLE_DB_PATH


class Settings(BaseModel):
    app_env: str = "development"
    database_path: Path = DURABLE_DB_PATH
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    legacy_routes: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        app_env = os.getenv("APP_ENV") or os.getenv("NODE_ENV") or "development"
        return cls(
            app_env=app_env,
            database_path=resolve_database_path(app_env, os.getenv("DATABASE_PATH")),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            cors_origins=[
                origin.strip()
                for origin in os.getenv("CORS_ORIGINS", "*").split(",")
                if origin.strip()
            ],
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            legacy_routes=_env_bool("TODO_API_LEGACY_ROUTES", True),
        )
