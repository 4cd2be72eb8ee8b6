"""
Error kinds raised by the todo store.
"""

from typing import Optional


class TodoStoreError(Exception):
    """Base class for every error raised by the store."""


class TodoNotFoundError(TodoStoreError):
    """No todo with the requested id exists in the collection."""

    def __init__(self, todo_id: str):
        self.todo_id = todo_id
        super().__init__("Todo Not Found")


class TodoValidationError(TodoStoreError):
    """Input fields do not have the shape a todo requires."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class StoreIOError(TodoStoreError):
    """The backing file could not be read or written."""

    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(f"{message}: {path}")


class StoreReadError(StoreIOError):
    pass


class StoreWriteError(StoreIOError):
    pass


class IdGenerationError(TodoStoreError):
    """A free identifier could not be found within the attempt limit."""
