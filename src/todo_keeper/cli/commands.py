# src/todo_keeper/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import TaskFilter
from ..view.render import render_list
from ..view.theme import Theme

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("Any line that is not a command is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def render_state(state: AppState) -> str:
    return render_list(state.projection(), theme=state.theme, color=state.color)


def _with_list(state: AppState, message: str) -> str:
    return f"{message}\n{render_state(state)}"


def resolve_task_ref(state: AppState, ref: str) -> str | None:
    """
    Map a user reference to a task id.

    A reference is either a task id or a 1-based position in the current
    (searched/filtered) view. Ids take precedence.
    """
    ref = ref.strip().lstrip("#")
    if not ref:
        return None
    if ref in state.store:
        return ref
    if ref.isdigit():
        pos = int(ref)
        visible = state.visible_tasks()
        if 1 <= pos <= len(visible):
            return visible[pos - 1].id
    return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_state(state)


def cmd_status(state: AppState, args: list[str]) -> str:
    search = state.search_term or "(none)"
    db = getattr(state.settings, "storage_db_path", "(in-memory)")
    return (
        "Status:\n"
        f"  Tasks: {len(state.store)}\n"
        f"  Search: {search}\n"
        f"  Filter: {state.filter}\n"
        f"  Theme: {state.theme}\n"
        f"  Storage: {db}"
    )


def add_text(state: AppState, text: str) -> str:
    task = state.store.add(text)
    if task is None:
        return _with_list(state, "Nothing to add (empty text).")
    return _with_list(state, f"Added: {task.text}")


def cmd_add(state: AppState, args: list[str]) -> str:
    return add_text(state, " ".join(args))


def cmd_toggle(state: AppState, args: list[str]) -> str:
    """
    /toggle <ref>  -> flip completed for the task at position/id <ref>
    """
    if not args:
        return "Usage: /toggle <position|id>"
    tid = resolve_task_ref(state, args[0])
    task = state.store.toggle(tid) if tid else None
    if task is None:
        return _with_list(state, f"No task {args[0]}.")
    verb = "Completed" if task.completed else "Reopened"
    return _with_list(state, f"{verb}: {task.text}")


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <ref> <new text>  -> replace the task text (empty text is discarded)
    """
    if not args:
        return "Usage: /edit <position|id> <new text>"
    tid = resolve_task_ref(state, args[0])
    if tid is None:
        return _with_list(state, f"No task {args[0]}.")
    task = state.store.edit(tid, " ".join(args[1:]))
    if task is None:
        return _with_list(state, "Edit discarded (empty text).")
    return _with_list(state, f"Edited: {task.text}")


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /del <position|id>"
    tid = resolve_task_ref(state, args[0])
    if tid is None or not state.store.delete(tid):
        return _with_list(state, f"No task {args[0]}.")
    return _with_list(state, "Deleted.")


def cmd_complete_all(state: AppState, args: list[str]) -> str:
    n = state.store.set_all_completed()
    return _with_list(state, f"Marked {n} task(s) completed.")


def cmd_clear_done(state: AppState, args: list[str]) -> str:
    n = state.store.clear_completed()
    return _with_list(state, f"Removed {n} completed task(s).")


def cmd_clear_all(state: AppState, args: list[str]) -> str:
    n = state.store.clear_all()
    return _with_list(state, f"Removed {n} task(s).")


def cmd_search(state: AppState, args: list[str]) -> str:
    """
    /search        -> clear the search term
    /search <term> -> show only tasks containing <term> (case-insensitive)
    """
    state.search_term = " ".join(args).strip()
    return render_state(state)


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter                        -> show the current filter
    /filter all|active|completed   -> change the filter
    """
    if not args:
        return f"Filter is {state.filter}. Use /filter all | active | completed."
    wanted = args[0].lower()
    if wanted not in {f.value for f in TaskFilter}:
        return "Usage: /filter all | active | completed"
    state.filter = TaskFilter(wanted)
    return render_state(state)


def cmd_theme(state: AppState, args: list[str]) -> str:
    if not args:
        return f"Theme is {state.theme}. Use /theme light or /theme dark."
    wanted = args[0].lower()
    if wanted not in {t.value for t in Theme}:
        return "Usage: /theme light | dark"
    state.set_theme(Theme(wanted))
    logger.debug("Theme switched to %s", wanted)
    return _with_list(state, f"Theme: {state.theme}")


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the current task list.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show task count, search, filter and theme.")
registry.register("add", cmd_add, help_text="Add a task: /add <text>.", aliases=["a"])
registry.register("toggle", cmd_toggle, help_text="Toggle completed: /toggle <position|id>.", aliases=["t", "done"])
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <position|id> <new text>.", aliases=["e"])
registry.register("del", cmd_delete, help_text="Delete a task: /del <position|id>.", aliases=["delete", "rm"])
registry.register("complete-all", cmd_complete_all, help_text="Mark every task completed.")
registry.register("clear-done", cmd_clear_done, help_text="Remove completed tasks.")
registry.register("clear-all", cmd_clear_all, help_text="Remove every task.")
registry.register("search", cmd_search, help_text="Search tasks: /search <term> (empty clears).", aliases=["s"])
registry.register("filter", cmd_filter, help_text="Filter tasks: /filter all | active | completed.", aliases=["f"])
registry.register("theme", cmd_theme, help_text="Switch theme: /theme light | dark.")
