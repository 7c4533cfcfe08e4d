# src/todo_keeper/view/render.py

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from ..tasks.task_models import Task
from .theme import STRIKE, Theme, palette_for, style

EMPTY_MESSAGE = "Empty... add your first task"


def format_timestamp(ts_ms: int) -> str:
    """Local time as DD/MM/YYYY, HH:MM:SS regardless of locale."""
    return datetime.fromtimestamp(ts_ms / 1000).strftime("%d/%m/%Y, %H:%M:%S")


def render_task_line(position: int, task: Task, *, theme: Theme = Theme.LIGHT, color: bool = False) -> str:
    pal = palette_for(theme)
    marker = "[x]" if task.completed else "[ ]"
    text_codes = (pal.muted, STRIKE) if task.completed else (pal.text,)
    ts_codes = (pal.muted, STRIKE) if task.completed else (pal.muted,)

    text = style(task.text, *text_codes, enabled=color)
    ts = style(format_timestamp(task.created_at), *ts_codes, enabled=color)
    tid = style(task.id, pal.accent, enabled=color)
    return f"{position:>3}. {marker} {text}  ({ts})  #{tid}"


def render_list(tasks: Iterable[Task], *, theme: Theme = Theme.LIGHT, color: bool = False) -> str:
    lines = [render_task_line(i, t, theme=theme, color=color) for i, t in enumerate(tasks, start=1)]
    total = len(lines)
    if not lines:
        lines = [EMPTY_MESSAGE]
    lines.append(f"Total: {total}")
    return "\n".join(lines)
