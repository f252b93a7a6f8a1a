"""Tests for environment-driven settings."""

import tempfile
from pathlib import Path

from todo_api.config import DURABLE_DB_PATH, Settings, resolve_database_path


def test_development_uses_durable_path():
    assert resolve_database_path("development") == DURABLE_DB_PATH


def test_production_uses_temp_dir():
    assert resolve_database_path("production") == Path(tempfile.gettempdir()) / "todos.db"


def test_explicit_path_wins(tmp_path):
    override = str(tmp_path / "custom.db")
    assert resolve_database_path("production", override) == Path(override)


def test_from_env_defaults(monkeypatch):
    for name in ("APP_ENV", "NODE_ENV", "DATABASE_PATH", "PORT", "HOST",
                 "CORS_ORIGINS", "LOG_LEVEL", "TODO_API_LEGACY_ROUTES"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings.app_env == "development"
    assert settings.database_path == DURABLE_DB_PATH
    assert settings.port == 3000
    assert settings.cors_origins == ["*"]
    assert settings.legacy_routes is True


def test_from_env_overrides(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.setenv("NODE_ENV", "production")
    monkeypatch.delenv("DATABASE_PATH", raising=False)
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_API_LEGACY_ROUTES", "false")
    settings = Settings.from_env()
    assert settings.app_env == "production"
    assert settings.database_path == Path(tempfile.gettempdir()) / "todos.db"
    assert settings.port == 8080
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.log_level == "DEBUG"
    assert settings.legacy_routes is False
