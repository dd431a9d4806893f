# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskpad.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TASKPAD_DATA_DIR",
        "TASKPAD_TASKS_DB_PATH",
        "TASKPAD_NOTIFICATIONS_ENABLED",
        "TASKPAD_REMINDER_INTERVAL_SECONDS",
        "TASKPAD_REMINDER_CHANNEL_ID",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.data_dir == Path(".local/taskpad")
    assert s.tasks_db_path == Path(".local/taskpad") / "tasks.sqlite3"
    assert s.notifications_enabled is True
    assert s.reminder_interval_seconds == 300.0
    assert s.reminder_channel_id == "task_reminder_channel"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKPAD_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("TASKPAD_TASKS_DB_PATH", raising=False)
    monkeypatch.setenv("TASKPAD_NOTIFICATIONS_ENABLED", "off")
    monkeypatch.setenv("TASKPAD_REMINDER_INTERVAL_SECONDS", "90")

    s = Settings.from_env()
    assert s.tasks_db_path == tmp_path / "tasks.sqlite3"
    assert s.notifications_enabled is False
    assert s.reminder_interval_seconds == 90.0


def test_bad_or_tiny_interval(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKPAD_REMINDER_INTERVAL_SECONDS", "soon")
    assert Settings.from_env().reminder_interval_seconds == 300.0

    monkeypatch.setenv("TASKPAD_REMINDER_INTERVAL_SECONDS", "0")
    assert Settings.from_env().reminder_interval_seconds == 1.0
