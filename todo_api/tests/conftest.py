"""Shared fixtures: a fresh SQLite file per test."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from todo_api.config import Settings
from todo_api.database import Storage
from todo_api.main import create_app
from todo_api.repository import TaskRepository


@pytest.fixture(name="storage")
def storage_fixture(tmp_path: Path):
    """Open a storage handle on a temporary database file."""
    storage = Storage.open(tmp_path / "todos.db")
    storage.ensure_schema()
    yield storage
    storage.close()


@pytest.fixture(name="repository")
def repository_fixture(storage: Storage) -> TaskRepository:
    return TaskRepository(storage)


@pytest.fixture(name="settings")
def settings_fixture(tmp_path: Path) -> Settings:
    return Settings(database_path=tmp_path / "api.db")


@pytest.fixture(name="client")
def client_fixture(settings: Settings):
    """Create a test client; entering it runs the startup lifespan."""
    with TestClient(create_app(settings)) as client:
        yield client
