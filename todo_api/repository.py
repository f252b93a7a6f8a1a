# todo_api/repository.py
"""Task repository: one SQL statement per operation against the tasks table.

Every public method is a coroutine. The blocking SQLite work runs in a
worker thread so only the awaiting request is suspended.
"""

import asyncio
import logging
from typing import Optional

from sqlalchemy import delete, insert, update
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from todo_api.database import Storage
from todo_api.errors import StorageError, ValidationError
from todo_api.models import SAMPLE_TASKS, Task, TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


class TaskRepository:
    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    async def list_all(self) -> list[Task]:
        """Return every task ordered by id, highest first."""
        return await asyncio.to_thread(self._list_all)

    def _list_all(self) -> list[Task]:
        statement = select(Task).order_by(Task.id.desc())
        try:
            with self._storage.session() as session:
                tasks = list(session.exec(statement).all())
        except SQLAlchemyError as e:
            raise StorageError("Failed to read tasks") from e
        logger.info("Fetched %d tasks", len(tasks))
        return tasks

    async def create(self, task: TaskCreate) -> str:
        """Insert a new task and return its id.

        Only id, title and description are written; the remaining columns
        take their database defaults.

        Raises:
            ValidationError: If id or title is missing or empty.
            StorageError: If the insert fails, e.g. on a duplicate id.
        """
        if not task.id or not task.title:
            raise ValidationError("Missing required parameters id and title")
        await asyncio.to_thread(self._create, task)
        return task.id

    def _create(self, task: TaskCreate) -> None:
        statement = insert(Task).values(
            id=task.id, title=task.title, description=task.description or ""
        )
        try:
            with self._storage.begin() as conn:
                conn.execute(statement)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to insert task {task.id}") from e
        logger.info("Task added, id=%s", task.id)

    async def update(self, task: TaskUpdate) -> str:
        """Overwrite every mutable column of the task with the given id.

        Matching no row is not an error; the id is returned either way.

        Raises:
            ValidationError: If id is missing or empty.
            StorageError: If the update fails.
        """
        if not task.id:
            raise ValidationError("Task id must not be empty")
        await asyncio.to_thread(self._update, task)
        return task.id

    def _update(self, task: TaskUpdate) -> None:
        statement = (
            update(Task).where(Task.id == task.id).values(**task.column_values())
        )
        try:
            with self._storage.begin() as conn:
                result = conn.execute(statement)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to update task {task.id}") from e
        logger.info("Task updated, id=%s rows affected=%d", task.id, result.rowcount)

    async def delete(self, task_id: Optional[str]) -> str:
        """Delete the task with the given id. A missing row is not an error.

        Raises:
            ValidationError: If task_id is missing or empty.
            StorageError: If the delete fails.
        """
        if not task_id:
            raise ValidationError("Task id must not be empty")
        await asyncio.to_thread(self._delete, task_id)
        return task_id

    def _delete(self, task_id: str) -> None:
        statement = delete(Task).where(Task.id == task_id)
        try:
            with self._storage.begin() as conn:
                result = conn.execute(statement)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to delete task {task_id}") from e
        logger.info("Task deleted, id=%s rows affected=%d", task_id, result.rowcount)

    async def seed_sample(self) -> int:
        """Insert the sample tasks, skipping ids that already exist.

        All inserts run concurrently and are joined before counting, so the
        result is the exact number of new rows. A row whose insert fails is
        logged and counted as not inserted.
        """
        results = await asyncio.gather(
            *(asyncio.to_thread(self._insert_if_absent, task) for task in SAMPLE_TASKS),
            return_exceptions=True,
        )
        inserted = 0
        for task, result in zip(SAMPLE_TASKS, results):
            if isinstance(result, BaseException):
                logger.error("Sample task %s not inserted: %s", task.id, result)
                continue
            inserted += result
        logger.info("Sample data seeded, %d new tasks", inserted)
        return inserted

    def _insert_if_absent(self, task: TaskCreate) -> int:
        statement = (
            sqlite_insert(Task)
            .values(id=task.id, title=task.title, description=task.description or "")
            .on_conflict_do_nothing(index_elements=["id"])
        )
        try:
            with self._storage.begin() as conn:
                result = conn.execute(statement)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to insert sample task {task.id}") from e
        return result.rowcount
