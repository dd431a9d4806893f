# src/taskpad/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKPAD"

DEFAULT_REMINDER_INTERVAL_SECONDS = 5 * 60


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Connector flags ----
    console_enabled: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path

    # ---- Reminders ----
    notifications_enabled: bool
    reminder_interval_seconds: float
    reminder_channel_id: str
    reminder_channel_name: str
    reminder_channel_description: str
    reminder_title: str
    reminder_body: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskpad").strip() or "taskpad"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskpad"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3")

        notifications_enabled = _env_bool(_k("NOTIFICATIONS_ENABLED"), True)
        reminder_interval_seconds = max(
            1.0,
            _env_float(_k("REMINDER_INTERVAL_SECONDS"), float(DEFAULT_REMINDER_INTERVAL_SECONDS)),
        )

        reminder_channel_id = (
            _env(_k("REMINDER_CHANNEL_ID"), "task_reminder_channel").strip() or "task_reminder_channel"
        )
        reminder_channel_name = _env(_k("REMINDER_CHANNEL_NAME"), "Task reminders")
        reminder_channel_description = _env(
            _k("REMINDER_CHANNEL_DESCRIPTION"), "Channel for task reminders"
        )
        reminder_title = _env(_k("REMINDER_TITLE"), "Task reminder")
        reminder_body = _env(_k("REMINDER_BODY"), "Remember to complete your pending tasks.")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            notifications_enabled=notifications_enabled,
            reminder_interval_seconds=reminder_interval_seconds,
            reminder_channel_id=reminder_channel_id,
            reminder_channel_name=reminder_channel_name,
            reminder_channel_description=reminder_channel_description,
            reminder_title=reminder_title,
            reminder_body=reminder_body,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
