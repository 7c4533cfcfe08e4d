# src/todo_keeper/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store depends on Protocols instead of concrete storage.
This keeps the backing store swappable (SQLite file, in-memory fake in tests).
"""

from collections.abc import Iterable
from typing import Any, Protocol


class KeyValueStore(Protocol):
    """String-keyed store with string values (local-storage semantics)."""

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


class TaskPersistencePort(Protocol):
    """Loads and saves the whole task collection in one piece."""

    def load(self) -> list[Any]: ...
    def save(self, tasks: Iterable[Any]) -> None: ...
