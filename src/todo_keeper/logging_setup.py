# src/todo_keeper/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "todo.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Per-source minimum levels for the console, so logs do not drown the task list.

    - our own package: anything the handler level lets through
    - captured warnings.warn(...) ('py.warnings'): WARNING and up
    - everything else (sqlite, dotenv, ...): ERROR and up
    """

    def __init__(
        self,
        package: str = "todo_keeper",
        *,
        warnings_level: int = logging.WARNING,
        third_party_level: int = logging.ERROR,
    ) -> None:
        super().__init__()
        self._prefix = package + "."
        self._thresholds = {"py.warnings": warnings_level}
        self._third_party_level = third_party_level

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(self._prefix):
            return True
        floor = self._thresholds.get(record.name, self._third_party_level)
        return record.levelno >= floor


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(_ConsoleNoiseFilter())
    return handler


def _file_handler(log_dir: Path, level: int) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(str(log_dir / LOG_FILE_NAME), encoding="utf-8")
    handler.setLevel(level)
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Route all logging to stderr (filtered) and to <log_dir>/todo.log (everything).

    Call this ONCE, before the first log call; it replaces existing root handlers.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    for handler in (_console_handler(console_level), _file_handler(Path(log_dir), file_level)):
        handler.setFormatter(fmt)
        root.addHandler(handler)

    logging.captureWarnings(True)
