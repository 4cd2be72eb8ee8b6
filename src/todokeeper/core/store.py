"""
File-backed todo store.

Every operation round-trips through the backing file: the whole collection
is loaded, optionally changed in memory and written back in full. Writes go
through a temporary file and an atomic rename, and every
read-modify-write cycle runs under the store's lock so concurrent requests
in one process cannot overwrite each other's changes.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import List, Optional, Union

from todokeeper.core.errors import (
    StoreReadError,
    StoreWriteError,
    TodoNotFoundError,
    TodoValidationError,
)
from todokeeper.core.ids import RandomIdGenerator
from todokeeper.core.models import TodoItem, validate_fields

logger = logging.getLogger(__name__)

LOAD_POLICY_RECOVER = "recover"
LOAD_POLICY_FAIL = "fail"
LOAD_POLICIES = (LOAD_POLICY_RECOVER, LOAD_POLICY_FAIL)


class TodoStore:
    """Manages the todo collection persisted in a single JSON file."""

    def __init__(self, file_path: Union[str, Path], load_policy: str = LOAD_POLICY_RECOVER,
                 id_generator: Optional[RandomIdGenerator] = None):
        """Bind the store to ``file_path``.

        Args:
            file_path: Location of the backing JSON file.
            load_policy: ``"recover"`` resets an unreadable file to an empty
                collection, ``"fail"`` raises ``StoreReadError`` instead.
            id_generator: Source of new ids, mainly for tests.
        """
        if load_policy not in LOAD_POLICIES:
            raise ValueError(f"Unknown load policy: {load_policy!r}")
        self.file_path = Path(file_path)
        self.load_policy = load_policy
        self.id_generator = id_generator or RandomIdGenerator()
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Full collection access
    # ------------------------------------------------------------------
    def load_all(self) -> List[TodoItem]:
        """Load every todo from the backing file."""
        with self._lock:
            try:
                content = self.file_path.read_text(encoding="utf-8")
            except FileNotFoundError:
                logger.info(f"Todo file {self.file_path} does not exist yet")
                if self.load_policy == LOAD_POLICY_RECOVER:
                    self.save_all([])
                return []
            except (OSError, UnicodeDecodeError) as e:
                return self._handle_unreadable(f"Error reading todo file: {str(e)}", e)

            try:
                records = json.loads(content)
                if not isinstance(records, list):
                    raise TodoValidationError(
                        f"Expected a JSON array, got {type(records).__name__}")
                return [TodoItem.from_dict(record) for record in records]
            except (ValueError, RecursionError, TodoValidationError) as e:
                return self._handle_unreadable(f"Error parsing todo file: {str(e)}", e)

    def _handle_unreadable(self, message: str, error: Exception) -> List[TodoItem]:
        """Apply the load policy to a file that could not be loaded."""
        logger.error(message)
        if self.load_policy == LOAD_POLICY_FAIL:
            raise StoreReadError("Could not load todo file", str(self.file_path)) from error
        logger.warning(f"Resetting {self.file_path} to an empty collection")
        self.save_all([])
        return []

    def save_all(self, todos: List[TodoItem]) -> None:
        """Replace the backing file's contents with ``todos``."""
        payload = json.dumps([todo.to_dict() for todo in todos], indent=4, ensure_ascii=False)
        tmp_path = None
        with self._lock:
            try:
                self.file_path.parent.mkdir(parents=True, exist_ok=True)
                with tempfile.NamedTemporaryFile(
                    "w",
                    encoding="utf-8",
                    dir=self.file_path.parent,
                    prefix=f".{self.file_path.name}.",
                    suffix=".tmp",
                    delete=False,
                ) as tmp:
                    tmp_path = tmp.name
                    tmp.write(payload)
                    tmp.flush()
                    os.fsync(tmp.fileno())
                os.replace(tmp_path, self.file_path)
                logger.debug(f"Wrote {len(todos)} todo(s) to {self.file_path}")
            except OSError as e:
                logger.error(f"Error writing todo file: {str(e)}")
                if tmp_path and os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise StoreWriteError("Could not write todo file", str(self.file_path)) from e

    # ------------------------------------------------------------------
    # Single item operations
    # ------------------------------------------------------------------
    def create(self, title: str, description: str, completed: bool = False) -> TodoItem:
        """Add a new todo and return it with its assigned id."""
        validate_fields(title, description)
        with self._lock:
            todos = self.load_all()
            todo_id = self.id_generator.generate_unique(todo.id for todo in todos)
            todo = TodoItem(id=todo_id, title=title, description=description,
                            completed=completed)
            todos.append(todo)
            self.save_all(todos)
        logger.info(f"Created todo {todo.id}")
        return todo

    def fetch_by_id(self, todo_id: str) -> TodoItem:
        """Return the todo with ``todo_id``."""
        for todo in self.load_all():
            if todo.id == todo_id:
                return todo
        raise TodoNotFoundError(todo_id)

    def update(self, todo_id: str, title: Optional[str] = None,
               description: Optional[str] = None,
               completed: Optional[bool] = None) -> TodoItem:
        """Apply a partial update to the todo with ``todo_id``.

        ``title`` and ``description`` only replace the stored value when
        they are non-empty. ``completed`` is always written: anything falsy,
        including leaving it out, stores ``False``.
        """
        with self._lock:
            todos = self.load_all()
            todo = next((t for t in todos if t.id == todo_id), None)
            if todo is None:
                raise TodoNotFoundError(todo_id)

            if title:
                todo.title = title
            if description:
                todo.description = description
            todo.completed = bool(completed)

            self.save_all(todos)
        logger.info(f"Updated todo {todo_id}")
        return todo

    def delete(self, todo_id: str) -> None:
        """Remove the first todo whose id is ``todo_id``."""
        with self._lock:
            todos = self.load_all()
            index = next((i for i, t in enumerate(todos) if t.id == todo_id), None)
            if index is None:
                raise TodoNotFoundError(todo_id)
            del todos[index]
            self.save_all(todos)
        logger.info(f"Deleted todo {todo_id}")
