"""Tests for the SQLite storage handle."""

from pathlib import Path

import pytest
from sqlalchemy import inspect

from todo_api.database import Storage
from todo_api.errors import StorageError, StorageUnavailable
from todo_api.models import Task


def test_open_creates_file_and_parent_dirs(tmp_path: Path):
    path = tmp_path / "nested" / "dir" / "todos.db"
    storage = Storage.open(path)
    try:
        assert path.exists()
        assert storage.path == path
    finally:
        storage.close()


def test_ensure_schema_creates_task_columns(storage: Storage):
    columns = {col["name"]: col for col in inspect(storage.engine).get_columns("tasks")}
    assert set(columns) == {"id", "title", "description", "dueDate", "isCompleted", "priority"}
    assert columns["title"]["nullable"] is False


def test_ensure_schema_is_idempotent(storage: Storage):
    with storage.session() as session:
        session.add(Task(id="keep", title="Survives restart"))
        session.commit()

    storage.ensure_schema()
    storage.ensure_schema()

    with storage.session() as session:
        task = session.get(Task, "keep")
        assert task is not None
        assert task.title == "Survives restart"


def test_open_directory_raises_storage_unavailable(tmp_path: Path):
    with pytest.raises(StorageUnavailable):
        Storage.open(tmp_path)


def test_open_non_database_file_raises_storage_unavailable(tmp_path: Path):
    path = tmp_path / "garbage.db"
    path.write_bytes(b"this is not a sqlite database " * 64)
    with pytest.raises(StorageUnavailable):
        Storage.open(path)


def test_storage_unavailable_is_a_storage_error():
    assert issubclass(StorageUnavailable, StorageError)
