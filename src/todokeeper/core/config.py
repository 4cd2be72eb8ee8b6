"""
Runtime configuration read from environment variables.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

# Project root: src/todokeeper/core -> repository root
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_TODO_FILE = str(PROJECT_ROOT / "todo.json")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    todo_file: str = field(default_factory=lambda: os.getenv("TODO_FILE", DEFAULT_TODO_FILE))
    load_policy: str = field(default_factory=lambda: os.getenv("TODO_LOAD_POLICY", "recover"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))
    api_url: str = field(default_factory=lambda: os.getenv("TODO_API_URL", "http://127.0.0.1:3000"))

    def __post_init__(self):
        self.load_policy = self.load_policy.lower()
        if self.load_policy not in ("recover", "fail"):
            raise ValueError(f"TODO_LOAD_POLICY must be 'recover' or 'fail', got {self.load_policy!r}")


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
