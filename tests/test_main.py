# tests/test_main.py

from __future__ import annotations

import time

from taskpad.cli.main import _shutdown
from taskpad.reminders.reminder_loop import start_reminders_in_background
from taskpad.tasks.task_models import Task


def test_shutdown_stops_reminders_and_detaches_view(state) -> None:
    seen: list[list[Task]] = []
    state.view_model.subscribe(seen.append)

    runner = start_reminders_in_background(state)
    assert runner is not None

    deadline = time.monotonic() + 2.0
    while not state.notifier.sent and time.monotonic() < deadline:
        time.sleep(0.01)

    _shutdown(state, runner)

    assert not runner.thread.is_alive()

    calls_before = len(seen)
    state.task_store.add_task("after shutdown")
    assert len(seen) == calls_before
    assert state.view_model.tasks == []


class _BrokenRunner:
    def __init__(self) -> None:
        self.joined = False

    def stop(self) -> None:
        raise RuntimeError("loop already gone")

    def join(self, timeout: float | None = None) -> None:
        self.joined = True


def test_shutdown_keeps_going_when_runner_stop_fails(state) -> None:
    seen: list[list[Task]] = []
    state.view_model.subscribe(seen.append)

    _shutdown(state, _BrokenRunner())

    calls_before = len(seen)
    state.task_store.add_task("after shutdown")
    assert len(seen) == calls_before
    assert state.view_model.tasks == []


def test_shutdown_without_reminders(state) -> None:
    _shutdown(state, None)
    state.task_store.add_task("still writable")
    assert state.task_store.count_tasks() == 1
    assert state.view_model.tasks == []
