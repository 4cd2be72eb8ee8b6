"""
Core persistence layer: models, the file-backed store and its errors.
"""

from todokeeper.core.errors import (
    TodoStoreError,
    TodoNotFoundError,
    TodoValidationError,
    StoreIOError,
    StoreReadError,
    StoreWriteError,
    IdGenerationError,
)
from todokeeper.core.models import TodoItem
from todokeeper.core.store import TodoStore

__all__ = [
    "TodoItem",
    "TodoStore",
    "TodoStoreError",
    "TodoNotFoundError",
    "TodoValidationError",
    "StoreIOError",
    "StoreReadError",
    "StoreWriteError",
    "IdGenerationError",
]
