# src/taskpad/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..reminders.reminder_loop import notifications_permitted
from ..tasks.task_api import render_task_list, resolve_visible_task, visible_tasks
from ..tasks.task_filter import partition_tasks
from ..tasks.task_models import TaskFilter

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /toggle, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("Any other text is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    pending, completed = partition_tasks(state.view_model.tasks)
    settings = state.settings
    if notifications_permitted(settings):
        interval = float(getattr(settings, "reminder_interval_seconds", 300.0))
        reminders = f"ON (every {interval:.0f}s)"
    else:
        reminders = "OFF"
    return (
        "Status:\n"
        f"  Pending: {len(pending)}\n"
        f"  Completed: {len(completed)}\n"
        f"  Showing: {state.task_filter.value}\n"
        f"  Reminders: {reminders}"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list            -> show the current view
    /list completed  -> switch view first (unknown names fall back to pending)
    """
    if args:
        state.task_filter = TaskFilter.parse(args[0])
    return render_task_list(visible_tasks(state), state.task_filter)


def cmd_pending(state: AppState, args: list[str]) -> str:
    state.task_filter = TaskFilter.PENDING
    return cmd_list(state, [])


def cmd_completed(state: AppState, args: list[str]) -> str:
    state.task_filter = TaskFilter.COMPLETED
    return cmd_list(state, [])


def cmd_add(state: AppState, args: list[str]) -> str:
    text = " ".join(args).strip()
    if not text:
        return "Usage: /add <description>"
    task = state.view_model.add_task(text)
    if task is None:
        return "Nothing to add."
    return f"Added: {task.description}"


def cmd_toggle(state: AppState, args: list[str]) -> str:
    """
    /toggle N  -> flip completion of task N in the visible list
    """
    if not args:
        return "Usage: /toggle <number>"
    task = resolve_visible_task(state, args[0])
    if task is None:
        return f"No task #{args[0]} in the {state.task_filter.value} list."
    updated = state.view_model.toggle_task(task)
    if updated is None:
        return "That task no longer exists."
    status = "completed" if updated.completed else "pending"
    return f"Marked as {status}: {updated.description}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /delete <number>"
    task = resolve_visible_task(state, args[0])
    if task is None:
        return f"No task #{args[0]} in the {state.task_filter.value} list."
    if not state.view_model.delete_task(task):
        return "That task no longer exists."
    return f"Deleted: {task.description}"


def cmd_clear(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    total = len(state.view_model.tasks)
    if emit and total:
        with contextlib.suppress(Exception):
            emit(f"Removing {total} task(s)...")
    removed = state.view_model.delete_all_tasks()
    logger.debug("Clear requested, removed=%s", removed)
    return f"Removed {removed} task(s)."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task counts, current filter and reminders.")
registry.register(
    "list", cmd_list, help_text="Show the visible list: /list [pending|completed].", aliases=["ls"]
)
registry.register("pending", cmd_pending, help_text="Show pending tasks.")
registry.register("completed", cmd_completed, help_text="Show completed tasks.")
registry.register("add", cmd_add, help_text="Add a task: /add <description>.")
registry.register(
    "toggle", cmd_toggle, help_text="Toggle completion of task N: /toggle N.", aliases=["done"]
)
registry.register("delete", cmd_delete, help_text="Delete task N: /delete N.", aliases=["rm"])
registry.register("clear", cmd_clear, help_text="Delete all tasks.")
