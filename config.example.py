# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/todo).",
    "TODO_STORAGE_DB_PATH": "Key-value store SQLite path (default: <data_dir>/storage.sqlite3).",
    # Storage keys
    "TODO_TASKS_KEY": "Key holding the JSON task list (default: todos).",
    "TODO_THEME_KEY": "Key holding the theme name (default: todo-theme).",
    # View
    "TODO_DEFAULT_THEME": "Theme used until one is chosen: light | dark (default: light).",
    "TODO_COLOR": "Force ANSI colors on/off (default: on for a TTY unless NO_COLOR is set).",
}
