# src/todo_keeper/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import add_text, registry as command_registry, render_state
from ..core.state import AppState

logger = logging.getLogger(__name__)


def handle_line(state: AppState, line: str) -> str | None:
    """
    Turn one input line into console output.

    Slash-commands go through the registry; any other non-empty line is a
    new task. Returns None for blank input.
    """
    line = line.strip()
    if not line:
        return None

    response = command_registry.handle(state, line)
    if response is not None:
        return response
    return add_text(state, line)


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (theme=%s).", state.theme)
    print("[CONSOLE] Type a task to add it. Use /help for commands. Use /exit to quit.\n")
    print(render_state(state))

    while True:
        try:
            user_input = input("\n>>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in ("/exit", "/quit", "/q"):
            logger.info("Console exit command received.")
            break

        try:
            response = handle_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is not None:
            print(response)

    logger.info("Console connector finished.")
