# src/todo_keeper/storage/persistence.py

"""
Persistence adapters over a KeyValueStore.

- TaskPersistence: the whole task collection as one JSON array under one key.
- ThemePersistence: the selected theme name under a separate key.

Loading is best-effort: absent or corrupt data falls back to an empty
collection / the default theme, never an exception.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from ..core.ports import KeyValueStore
from ..tasks.task_models import Task
from ..view.theme import Theme

logger = logging.getLogger(__name__)

DEFAULT_TASKS_KEY = "todos"
DEFAULT_THEME_KEY = "todo-theme"


class TaskPersistence:
    def __init__(self, kv: KeyValueStore, key: str = DEFAULT_TASKS_KEY) -> None:
        self._kv = kv
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[Task]:
        """Return stored tasks in stored order (newest first), or [] if absent/corrupt."""
        raw = self._kv.get_item(self._key)
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Stored tasks under key=%s are not valid JSON; starting empty.", self._key)
            return []

        if not isinstance(data, list):
            logger.warning("Stored tasks under key=%s are not a list; starting empty.", self._key)
            return []

        out: list[Task] = []
        seen: set[str] = set()
        skipped = 0
        for entry in data:
            task = Task.from_dict(entry) if isinstance(entry, dict) else None
            if task is None or task.id in seen:
                skipped += 1
                continue
            seen.add(task.id)
            out.append(task)

        if skipped:
            logger.warning("Skipped %d malformed task entries under key=%s", skipped, self._key)
        logger.info("Loaded %d tasks from key=%s", len(out), self._key)
        return out

    def save(self, tasks: Iterable[Task]) -> None:
        payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)
        self._kv.set_item(self._key, payload)


class ThemePersistence:
    def __init__(
        self,
        kv: KeyValueStore,
        key: str = DEFAULT_THEME_KEY,
        default: Theme = Theme.LIGHT,
    ) -> None:
        self._kv = kv
        self._key = key
        self._default = default

    def load(self) -> Theme:
        raw = self._kv.get_item(self._key)
        if raw is None:
            return self._default
        return Theme.from_raw(raw, default=self._default)

    def save(self, theme: Theme) -> None:
        self._kv.set_item(self._key, theme.value)
