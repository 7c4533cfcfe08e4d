# src/todo_keeper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the key-value store, persistence adapters and task store into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..storage.kv_store import SqliteKeyValueStore
from ..storage.persistence import TaskPersistence, ThemePersistence
from ..tasks.task_store import TaskStore
from ..view.theme import Theme

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, kv: KeyValueStore | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the key-value store) injectable makes the app easier
    to test. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if kv is None:
        _ensure_local_dirs(settings)
        kv = SqliteKeyValueStore(settings.storage_db_path)

    default_theme = Theme.from_raw(getattr(settings, "default_theme", None))
    theme_store = ThemePersistence(kv, key=settings.theme_key, default=default_theme)
    store = TaskStore(TaskPersistence(kv, key=settings.tasks_key))

    state = AppState(
        settings=settings,
        store=store,
        theme_store=theme_store,
        theme=theme_store.load(),
        color=bool(getattr(settings, "color", False)),
    )
    logger.info("State ready: %d tasks, theme=%s", len(store), state.theme)
    return state
