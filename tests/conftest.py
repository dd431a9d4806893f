# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.core.state import AppState
from taskpad.core.view_model import TaskViewModel
from taskpad.tasks.task_store import TaskStore

from .fakes import FakeNotifier


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the reminder loop.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskpad-test",
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
        notifications_enabled=True,
        reminder_interval_seconds=0.01,
        reminder_channel_id="task_reminder_channel",
        reminder_channel_name="Task reminders",
        reminder_channel_description="Channel for task reminders",
        reminder_title="Task reminder",
        reminder_body="Remember to complete your pending tasks.",
    )


@pytest.fixture()
def task_store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_db_path)


@pytest.fixture()
def state(settings: SimpleNamespace, task_store: TaskStore) -> AppState:
    """
    AppState wired with a fake notifier.

    NOTE: We keep the real SQLite TaskStore here because its behaviour is
    part of what we want to test.
    """
    return AppState(
        settings=settings,
        task_store=task_store,
        view_model=TaskViewModel(task_store),
        notifier=FakeNotifier(),
    )
