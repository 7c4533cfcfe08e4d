# src/todo_keeper/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every field has a default.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _default_color() -> bool:
    # NO_COLOR wins; otherwise only color real terminals.
    if os.getenv("NO_COLOR") is not None:
        return False
    return sys.stdout.isatty()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    storage_db_path: Path

    # ---- Storage keys ----
    tasks_key: str
    theme_key: str

    # ---- View ----
    default_theme: str
    color: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo") or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        storage_db_path = _env_path(_k("STORAGE_DB_PATH"), data_dir / "storage.sqlite3")

        tasks_key = _env(_k("TASKS_KEY"), "todos").strip() or "todos"
        theme_key = _env(_k("THEME_KEY"), "todo-theme").strip() or "todo-theme"

        default_theme = _env(_k("DEFAULT_THEME"), "light").strip().lower() or "light"
        color = _env_bool(_k("COLOR"), _default_color())

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            storage_db_path=storage_db_path,
            tasks_key=tasks_key,
            theme_key=theme_key,
            default_theme=default_theme,
            color=color,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
