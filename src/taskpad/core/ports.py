# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage and notification delivery swappable and makes testing easier.
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol


class TaskRepo(Protocol):
    def add_task(self, description: str) -> Any: ...
    def toggle_task(self, task_id: int) -> Any | None: ...
    def delete_task(self, task_id: int) -> bool: ...
    def clear_tasks(self) -> int: ...
    def list_tasks(self) -> list[Any]: ...
    def subscribe(self, listener: Callable[[list[Any]], None]) -> Callable[[], None]: ...


class Notifier(Protocol):
    """
    Delivery side of the reminder loop.

    The loop decides when to fire; the notifier decides how the notification
    reaches the user (console line, desktop popup, ...).
    """

    def create_channel(self, *, channel_id: str, name: str, description: str) -> None: ...

    def notify(
            self,
            *,
            notification_id: int,
            channel_id: str,
            title: str,
            body: str,
    ) -> Awaitable[None]: ...
