"""
Data models for todokeeper.
"""

from typing import Dict, Any, Optional

from todokeeper.core.errors import TodoValidationError

class TodoItem:
    """Represents a single todo item."""

    def __init__(self, title: str, description: str,
                 completed: bool = False, id: Optional[str] = None):
        """Initialize a todo item."""
        self.id = id
        self.title = title
        self.description = description
        self.completed = bool(completed)

    def to_dict(self) -> Dict[str, Any]:
        """Convert todo item to dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TodoItem':
        """Create todo item from a persisted record.

        Unknown keys are dropped and a missing or null ``completed``
        becomes ``False``.
        """
        if not isinstance(data, dict):
            raise TodoValidationError(f"Expected an object, got {type(data).__name__}")
        todo_id = data.get("id")
        if not isinstance(todo_id, str) or not todo_id:
            raise TodoValidationError("Todo record has no id", field="id")
        for name in ("title", "description"):
            if not isinstance(data.get(name), str):
                raise TodoValidationError(f"Todo {todo_id} has no string {name}", field=name)
        return cls(
            id=todo_id,
            title=data.get("title"),
            description=data.get("description"),
            completed=bool(data.get("completed", False)),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TodoItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (f"TodoItem(id={self.id!r}, title={self.title!r}, "
                f"description={self.description!r}, completed={self.completed!r})")


def validate_fields(title: Any, description: Any) -> None:
    """Check the fields required to create a todo."""
    if not isinstance(title, str):
        raise TodoValidationError("title must be a string", field="title")
    if not isinstance(description, str):
        raise TodoValidationError("description must be a string", field="description")
