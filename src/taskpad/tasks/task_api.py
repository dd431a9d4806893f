# src/taskpad/tasks/task_api.py

from __future__ import annotations

from ..core.state import AppState
from .task_models import Task, TaskFilter

FILTER_TITLES = {
    TaskFilter.PENDING: "Pending tasks",
    TaskFilter.COMPLETED: "Completed tasks",
}


def visible_tasks(state: AppState) -> list[Task]:
    """Tasks shown under the current filter, in display order."""
    return state.view_model.visible_tasks(state.task_filter)


def resolve_visible_task(state: AppState, position: str) -> Task | None:
    """
    Map a 1-based position in the visible list to a task.

    Returns None for anything that is not a valid position.
    """
    try:
        idx = int(position.strip().lstrip("#"))
    except (AttributeError, ValueError):
        return None

    tasks = visible_tasks(state)
    if idx < 1 or idx > len(tasks):
        return None
    return tasks[idx - 1]


def render_task_row(position: int, task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"{position}. [{mark}] {task.description}"


def render_task_list(tasks: list[Task], task_filter: TaskFilter) -> str:
    title = FILTER_TITLES.get(task_filter, "Tasks")
    if not tasks:
        return f"{title}: none."
    lines = [f"{title} ({len(tasks)}):"]
    lines.extend(render_task_row(i, t) for i, t in enumerate(tasks, start=1))
    return "\n".join(lines)
