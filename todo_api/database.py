# todo_api/database.py
"""SQLite storage handle: engine ownership and schema bootstrap using SQLModel."""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

from sqlalchemy import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from todo_api.errors import StorageUnavailable
from todo_api.models import Task

logger = logging.getLogger(__name__)


class Storage:
    """Owns the engine for one SQLite file.

    Created once at startup and handed to the repository, which is the only
    component that reads or writes task rows through it.
    """

    def __init__(self, engine: Engine, path: Path) -> None:
        self.engine = engine
        self.path = path

    @classmethod
    def open(cls, path: Union[str, Path]) -> "Storage":
        """Open or create the database file at ``path``.

        Raises:
            StorageUnavailable: If the location is unwritable or the file is
                locked or not a SQLite database.
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailable(f"Cannot create directory for {path}") from e

        engine = create_engine(
            f"sqlite:///{path}",
            echo=False,
            connect_args={"check_same_thread": False},
        )
        try:
            # Touch the schema so a non-database or locked file fails here, not on first request.
            with engine.connect() as conn:
                conn.exec_driver_sql("PRAGMA schema_version")
        except SQLAlchemyError as e:
            engine.dispose()
            raise StorageUnavailable(f"Cannot open database at {path}") from e

        logger.info("Connected to SQLite database: %s", path)
        return cls(engine, path)

    def ensure_schema(self) -> None:
        """Create the tasks table if it is missing. Existing rows are untouched."""
        try:
            SQLModel.metadata.create_all(self.engine, tables=[Task.__table__])
        except SQLAlchemyError as e:
            raise StorageUnavailable("Cannot create tasks table") from e
        logger.info("Tasks table ready")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield an ORM session bound to this storage."""
        with Session(self.engine) as session:
            yield session

    @contextmanager
    def begin(self) -> Iterator[Connection]:
        """Yield a connection inside a transaction that commits on exit."""
        with self.engine.begin() as conn:
            yield conn

    def close(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()
        logger.info("Closed SQLite database: %s", self.path)
