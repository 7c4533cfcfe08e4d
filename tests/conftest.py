# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_keeper.cli.bootstrap import create_initial_state
from todo_keeper.core.state import AppState
from todo_keeper.storage.persistence import TaskPersistence
from todo_keeper.tasks.task_store import TaskStore

from .fakes import Clock, FakeKeyValueStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        storage_db_path=tmp_path / "storage.sqlite3",
        tasks_key="todos",
        theme_key="todo-theme",
        default_theme="light",
        color=False,
    )


@pytest.fixture()
def kv() -> FakeKeyValueStore:
    return FakeKeyValueStore()


@pytest.fixture()
def store(kv: FakeKeyValueStore) -> TaskStore:
    return TaskStore(TaskPersistence(kv), clock=Clock())


@pytest.fixture()
def state(settings: SimpleNamespace, kv: FakeKeyValueStore) -> AppState:
    """AppState wired through bootstrap, backed by the in-memory fake store."""
    return create_initial_state(settings=settings, kv=kv)
