# src/taskpad/reminders/reminder_loop.py

from __future__ import annotations

"""
Reminder loop.

One timer, one action, fixed period:
- register the notification channel once,
- fire the reminder right away,
- sleep interval_seconds, fire again, forever.

It never looks at the task list. Delivery belongs to the notifier.
"""

import asyncio
import contextlib
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..core.ports import Notifier
from ..core.state import AppState

logger = logging.getLogger(__name__)

PermissionCheck = Callable[[], bool]

READY_TIMEOUT_SECONDS = 5.0


@dataclass(slots=True, frozen=True)
class NotificationChannel:
    id: str
    name: str
    description: str


@dataclass(slots=True, frozen=True)
class Reminder:
    channel: NotificationChannel
    title: str
    body: str
    notification_id: int = 1


def build_reminder(settings: Any) -> Reminder:
    """Build the static reminder from settings."""
    channel = NotificationChannel(
        id=str(getattr(settings, "reminder_channel_id", "task_reminder_channel")),
        name=str(getattr(settings, "reminder_channel_name", "Task reminders")),
        description=str(getattr(settings, "reminder_channel_description", "Channel for task reminders")),
    )
    return Reminder(
        channel=channel,
        title=str(getattr(settings, "reminder_title", "Task reminder")),
        body=str(getattr(settings, "reminder_body", "Remember to complete your pending tasks.")),
    )


def notifications_permitted(settings: Any) -> bool:
    """Permission check for posting notifications."""
    return bool(getattr(settings, "notifications_enabled", False))


async def fire_reminder(
        notifier: Notifier,
        reminder: Reminder,
        *,
        is_permitted: PermissionCheck | None = None,
) -> bool:
    """Send one reminder. Returns True if it was handed to the notifier."""
    if is_permitted is not None:
        try:
            permitted = bool(is_permitted())
        except Exception:
            logger.exception("Permission check failed; skipping reminder")
            return False
        if not permitted:
            logger.debug("Notification permission not granted; reminder skipped")
            return False

    try:
        await notifier.notify(
            notification_id=reminder.notification_id,
            channel_id=reminder.channel.id,
            title=reminder.title,
            body=reminder.body,
        )
    except Exception:
        logger.exception("Reminder notify failed channel=%s", reminder.channel.id)
        return False

    logger.debug("Reminder fired channel=%s", reminder.channel.id)
    return True


async def run_reminder_loop(
        notifier: Notifier,
        reminder: Reminder,
        *,
        interval_seconds: float = 300.0,
        is_permitted: PermissionCheck | None = None,
) -> None:
    """
    Fire `reminder` now and then every interval_seconds.

    No backlog and no coalescing: a late wake-up simply fires once.
    To stop the loop, cancel the coroutine/task.
    """
    sleep_s = max(0.01, float(interval_seconds))

    try:
        notifier.create_channel(
            channel_id=reminder.channel.id,
            name=reminder.channel.name,
            description=reminder.channel.description,
        )
    except Exception:
        logger.exception("create_channel failed channel=%s", reminder.channel.id)

    logger.info("Reminder loop started (every %.0fs).", sleep_s)

    while True:
        await fire_reminder(notifier, reminder, is_permitted=is_permitted)
        await asyncio.sleep(sleep_s)


async def _run_until_stopped(state: AppState, stop_event: asyncio.Event) -> None:
    settings = state.settings
    reminder = build_reminder(settings)

    loop_task = asyncio.create_task(
        run_reminder_loop(
            state.notifier,
            reminder,
            interval_seconds=float(getattr(settings, "reminder_interval_seconds", 300.0)),
            is_permitted=lambda: notifications_permitted(settings),
        )
    )

    try:
        await stop_event.wait()
    finally:
        loop_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await loop_task
        logger.info("Reminder loop stopped.")


@dataclass
class ReminderBackgroundRunner:
    thread: threading.Thread
    loop: asyncio.AbstractEventLoop
    stop_event: asyncio.Event

    def stop(self) -> None:
        try:
            self.loop.call_soon_threadsafe(self.stop_event.set)
        except Exception:
            logger.debug("Failed to signal reminder stop.", exc_info=True)

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


def start_reminders_in_background(state: AppState) -> ReminderBackgroundRunner | None:
    """
    Start the reminder loop on its own event loop in a daemon thread.

    Runs once at process entry. If notifications are not permitted the loop
    is silently disabled and None is returned.
    """
    if not notifications_permitted(state.settings):
        logger.info("Notifications not permitted; reminders disabled.")
        return None

    ready = threading.Event()
    abandoned = threading.Event()
    init_lock = threading.Lock()
    holder: dict[str, object] = {}

    def runner() -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        stop_event = asyncio.Event()

        with init_lock:
            if abandoned.is_set():
                # Caller already gave up on us and holds no handle.
                loop.close()
                return
            holder["loop"] = loop
            holder["stop_event"] = stop_event
        ready.set()

        try:
            loop.run_until_complete(_run_until_stopped(state, stop_event))
        except Exception:
            logger.exception("Reminder thread crashed.")
        finally:
            with contextlib.suppress(Exception):
                loop.close()

    t = threading.Thread(target=runner, name="taskpad-reminders", daemon=True)
    t.start()

    if not ready.wait(timeout=READY_TIMEOUT_SECONDS):
        with init_lock:
            if "loop" not in holder:
                abandoned.set()

    loop = holder.get("loop")
    stop_event = holder.get("stop_event")

    if not isinstance(loop, asyncio.AbstractEventLoop) or not isinstance(stop_event, asyncio.Event):
        logger.error("Reminder thread did not initialize properly.")
        return None

    logger.info("Reminder background thread started.")
    return ReminderBackgroundRunner(thread=t, loop=loop, stop_event=stop_event)
