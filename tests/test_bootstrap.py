# tests/test_bootstrap.py

from __future__ import annotations

import io
import logging

import pytest

from taskpad.cli.bootstrap import create_initial_state
from taskpad.connectors.console_notifier import ConsoleNotifier
from taskpad.logging_setup import _ConsoleNoiseFilter, setup_logging
from taskpad.tasks.task_models import TaskFilter


def test_create_initial_state_wires_real_components(settings) -> None:
    settings.data_dir = settings.data_dir / "data"
    settings.tasks_db_path = settings.data_dir / "db" / "tasks.sqlite3"

    state = create_initial_state(settings=settings)

    assert settings.tasks_db_path.parent.is_dir()
    assert isinstance(state.notifier, ConsoleNotifier)
    assert state.task_filter is TaskFilter.PENDING

    task = state.view_model.add_task("wired")
    assert state.task_store.list_tasks() == [task]
    assert state.view_model.tasks == [task]


@pytest.mark.asyncio
async def test_console_notifier_prints_reminder() -> None:
    out = io.StringIO()
    notifier = ConsoleNotifier(stream=out)
    notifier.create_channel(channel_id="c1", name="Reminders", description="d")
    notifier.create_channel(channel_id="c1", name="Renamed", description="d")

    await notifier.notify(notification_id=1, channel_id="c1", title="Task reminder", body="Do it.")

    assert notifier.channels == {"c1": "Reminders"}
    assert "[Task reminder] Do it." in out.getvalue()


def test_console_noise_filter() -> None:
    f = _ConsoleNoiseFilter()

    def rec(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    assert f.filter(rec("taskpad.tasks.task_store", logging.DEBUG))
    assert not f.filter(rec("py.warnings", logging.WARNING))
    assert not f.filter(rec("asyncio", logging.WARNING))
    assert f.filter(rec("asyncio", logging.ERROR))


def test_setup_logging_writes_file_and_replaces_handlers(tmp_path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging(log_dir=tmp_path)
        log_file = setup_logging(log_dir=tmp_path)

        assert len(root.handlers) == 2
        logging.getLogger("taskpad.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
