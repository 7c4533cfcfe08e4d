# src/todo_keeper/tasks/task_store.py

from __future__ import annotations

import logging
import random
import string
import time
from collections.abc import Callable, Iterator

from ..core.ports import TaskPersistencePort
from .task_models import Task, TaskFilter

logger = logging.getLogger(__name__)

_BASE36 = string.digits + string.ascii_lowercase
_ID_SUFFIX_LEN = 5


def _to_base36(n: int) -> str:
    if n <= 0:
        return "0"
    digits: list[str] = []
    while n:
        n, r = divmod(n, 36)
        digits.append(_BASE36[r])
    return "".join(reversed(digits))


def now_ms() -> int:
    return int(time.time() * 1000)


def generate_id(ts_ms: int | None = None, rng: random.Random | None = None) -> str:
    """Base-36 millisecond time followed by a short random base-36 suffix."""
    ts = now_ms() if ts_ms is None else ts_ms
    r = rng or random
    suffix = "".join(r.choice(_BASE36) for _ in range(_ID_SUFFIX_LEN))
    return _to_base36(ts) + suffix


class TaskProjection:
    """
    Read-only, restartable view over the store's tasks.

    Each iteration re-scans the live collection newest-first, so the
    projection reflects mutations made after it was created.
    """

    def __init__(self, source: Callable[[], Iterator[Task]], search_term: str, task_filter: TaskFilter) -> None:
        self._source = source
        self.search_term = search_term
        self.filter = task_filter
        self._needle = search_term.strip().lower()

    def _matches(self, task: Task) -> bool:
        if not self.filter.matches(task.completed):
            return False
        return self._needle in task.text.lower()

    def __iter__(self) -> Iterator[Task]:
        return (t for t in self._source() if self._matches(t))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    @property
    def total(self) -> int:
        return len(self)


class TaskStore:
    """
    In-memory task collection with write-through persistence.

    Tasks are kept in an insertion-ordered dict keyed by id (oldest first),
    so lookups are O(1) and reversed iteration yields newest-first order.

    Every mutation that changes the collection saves it in full.
    Invalid input and unknown ids are no-ops, never exceptions.
    """

    def __init__(
        self,
        persistence: TaskPersistencePort,
        *,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[int], str] = generate_id,
    ) -> None:
        self._persistence = persistence
        self._clock = clock
        self._id_factory = id_factory
        self._tasks: dict[str, Task] = {}
        self.reload()

    # ---- lifecycle ----

    def reload(self) -> None:
        """Replace the in-memory collection with what persistence holds."""
        loaded = self._persistence.load()
        self._tasks = {}
        # Stored newest-first; keep the dict oldest-first.
        for task in reversed(loaded):
            self._tasks.setdefault(task.id, task)
        logger.info("TaskStore ready total=%d", len(self._tasks))

    def _save(self) -> None:
        try:
            self._persistence.save(list(self))
        except Exception:
            logger.exception("Failed to persist %d tasks; keeping in-memory state.", len(self._tasks))

    def _new_id(self, ts: int) -> str:
        tid = self._id_factory(ts)
        while tid in self._tasks:
            tid = self._id_factory(ts)
        return tid

    # ---- read helpers ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return reversed(self._tasks.values())

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def get(self, task_id: str) -> Task | None:
        return self._tasks.get(task_id)

    def query(self, search_term: str = "", task_filter: TaskFilter | str = TaskFilter.ALL) -> TaskProjection:
        if not isinstance(task_filter, TaskFilter):
            task_filter = TaskFilter.from_raw(task_filter)
        return TaskProjection(lambda: iter(self), search_term or "", task_filter)

    # ---- mutations ----

    def add(self, text: str) -> Task | None:
        clean = (text or "").strip()
        if not clean:
            logger.debug("add ignored: empty text")
            return None

        ts = self._clock()
        task = Task(id=self._new_id(ts), text=clean, completed=False, created_at=ts)
        self._tasks[task.id] = task
        self._save()
        logger.debug("Task added id=%s", task.id)
        return task

    def toggle(self, task_id: str) -> Task | None:
        task = self._tasks.get(task_id)
        if task is None:
            logger.debug("toggle ignored: unknown id=%s", task_id)
            return None
        task.completed = not task.completed
        self._save()
        return task

    def edit(self, task_id: str, new_text: str) -> Task | None:
        task = self._tasks.get(task_id)
        if task is None:
            logger.debug("edit ignored: unknown id=%s", task_id)
            return None
        clean = (new_text or "").strip()
        if not clean:
            logger.debug("edit discarded: empty text id=%s", task_id)
            return None
        task.text = clean
        self._save()
        return task

    def delete(self, task_id: str) -> bool:
        if self._tasks.pop(task_id, None) is None:
            logger.debug("delete ignored: unknown id=%s", task_id)
            return False
        self._save()
        return True

    def set_all_completed(self) -> int:
        changed = 0
        for task in self._tasks.values():
            if not task.completed:
                task.completed = True
                changed += 1
        if changed:
            self._save()
        return changed

    def clear_completed(self) -> int:
        before = len(self._tasks)
        self._tasks = {tid: t for tid, t in self._tasks.items() if not t.completed}
        removed = before - len(self._tasks)
        if removed:
            self._save()
        return removed

    def clear_all(self) -> int:
        removed = len(self._tasks)
        self._tasks = {}
        self._save()
        return removed
