# tasks/task_filter.py

from __future__ import annotations

from collections.abc import Iterable

from .task_models import Task, TaskFilter


def partition_tasks(tasks: Iterable[Task]) -> tuple[list[Task], list[Task]]:
    """Split tasks into (pending, completed), keeping relative order."""
    pending: list[Task] = []
    completed: list[Task] = []
    for task in tasks:
        (completed if task.completed else pending).append(task)
    return pending, completed


def filter_tasks(tasks: Iterable[Task], task_filter: TaskFilter) -> list[Task]:
    pending, completed = partition_tasks(tasks)
    return completed if task_filter == TaskFilter.COMPLETED else pending
