# src/taskpad/core/view_model.py

"""
View-state holder between the store and the presentation layer.

It mirrors the store's live collection and forwards user intents
(add / toggle / delete / clear) straight into the store.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Callable

from ..tasks.task_filter import filter_tasks
from ..tasks.task_models import Task, TaskFilter
from .ports import TaskRepo

logger = logging.getLogger(__name__)

TasksListener = Callable[[list[Task]], None]


class TaskViewModel:
    def __init__(self, task_store: TaskRepo) -> None:
        self._store = task_store
        self._lock = threading.RLock()
        self._tasks: list[Task] = []
        self._listeners: list[TasksListener] = []
        self._unsubscribe = task_store.subscribe(self._on_tasks_changed)

    @property
    def tasks(self) -> list[Task]:
        with self._lock:
            return list(self._tasks)

    def _on_tasks_changed(self, tasks: list[Task]) -> None:
        with self._lock:
            self._tasks = list(tasks)
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(list(tasks))
            except Exception:
                logger.exception("View listener failed: %r", listener)

    def subscribe(self, listener: TasksListener) -> Callable[[], None]:
        """Observe the task list: called now with the current snapshot, then on every change."""
        with self._lock:
            self._listeners.append(listener)
            current = list(self._tasks)
        try:
            listener(current)
        except Exception:
            logger.exception("View listener failed on subscribe: %r", listener)

        def unsubscribe() -> None:
            with self._lock:
                with contextlib.suppress(ValueError):
                    self._listeners.remove(listener)

        return unsubscribe

    def visible_tasks(self, task_filter: TaskFilter) -> list[Task]:
        return filter_tasks(self.tasks, task_filter)

    # ---- user intents ----

    def add_task(self, description: str) -> Task | None:
        """Add a task; empty or blank input is ignored."""
        if not description or not description.strip():
            logger.debug("Ignoring empty task description.")
            return None
        return self._store.add_task(description)

    def toggle_task(self, task: Task) -> Task | None:
        return self._store.toggle_task(task.id)

    def delete_task(self, task: Task) -> bool:
        return self._store.delete_task(task.id)

    def delete_all_tasks(self) -> int:
        return self._store.clear_tasks()

    def close(self) -> None:
        with self._lock:
            self._listeners.clear()
        with contextlib.suppress(Exception):
            self._unsubscribe()
