# todo_api/errors.py
"""Errors raised by the storage layer and repository, mapped to HTTP status by the routes."""


class ValidationError(Exception):
    """A required field (id, title) is missing. Answered with HTTP 400."""


class StorageError(Exception):
    """A read or write against the task table failed. Answered with HTTP 500."""


class StorageUnavailable(StorageError):
    """The database file could not be opened or its schema created."""
