# src/todo_keeper/tasks/task_models.py

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any


class TaskFilter(StrEnum):
    """Which tasks a projection keeps, by completion state."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def from_raw(cls, raw: str | None) -> TaskFilter:
        if not raw:
            return cls.ALL
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.ALL

    def matches(self, completed: bool) -> bool:
        if self is TaskFilter.ACTIVE:
            return not completed
        if self is TaskFilter.COMPLETED:
            return completed
        return True


@dataclass(slots=True)
class Task:
    """
    A single to-do item.

    `id` and `created_at` (ms since epoch) are fixed at creation;
    `text` and `completed` are changed in place by the store.
    """

    id: str
    text: str
    completed: bool
    created_at: int

    def to_dict(self) -> dict[str, Any]:
        # "timestamp" is the persisted field name for created_at.
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "timestamp": self.created_at,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task | None:
        """Build a Task from a persisted entry, or None if the entry is unusable."""
        tid = raw.get("id")
        text = raw.get("text")
        completed = raw.get("completed", False)
        ts = raw.get("timestamp")

        if not isinstance(tid, str) or not tid:
            return None
        if not isinstance(text, str) or not text.strip():
            return None
        if not isinstance(completed, bool):
            return None
        created_at = _timestamp_ms(ts)
        if created_at is None:
            return None

        return cls(id=tid, text=text.strip(), completed=completed, created_at=created_at)


def _timestamp_ms(ts: Any) -> int | None:
    """Coerce a stored ms timestamp, or None if it cannot be shown as a local datetime."""
    # bool is an int subclass; a boolean timestamp is corrupt data.
    if isinstance(ts, bool) or not isinstance(ts, (int, float)):
        return None
    if isinstance(ts, float) and not math.isfinite(ts):
        return None
    ms = int(ts)
    try:
        datetime.fromtimestamp(ms / 1000)
    except (OverflowError, OSError, ValueError):
        return None
    return ms
