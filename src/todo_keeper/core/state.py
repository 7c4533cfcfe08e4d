# src/todo_keeper/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..storage.persistence import ThemePersistence
from ..tasks.task_models import Task, TaskFilter
from ..tasks.task_store import TaskProjection, TaskStore
from ..view.theme import Theme


@dataclass
class AppState:
    """
    Everything one session needs, built once by the composition root.

    The task store is the only owner of tasks; the rest is view state
    (search term, filter, theme) that shapes what gets rendered.
    """

    settings: Any
    store: TaskStore
    theme_store: ThemePersistence

    theme: Theme = Theme.LIGHT
    color: bool = False
    search_term: str = ""
    filter: TaskFilter = TaskFilter.ALL

    def projection(self) -> TaskProjection:
        return self.store.query(self.search_term, self.filter)

    def visible_tasks(self) -> list[Task]:
        return list(self.projection())

    def set_theme(self, theme: Theme) -> None:
        self.theme = theme
        self.theme_store.save(theme)
