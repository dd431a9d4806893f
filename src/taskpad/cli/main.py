# src/taskpad/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then starts:
- the reminder loop in a background thread (if notifications are permitted),
- the console REPL in the main thread (optional).
"""

from __future__ import annotations

import logging
import signal
import threading

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..reminders.reminder_loop import ReminderBackgroundRunner, start_reminders_in_background

logger = logging.getLogger(__name__)


def _shutdown(state, reminder_runner: ReminderBackgroundRunner | None) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    if reminder_runner is not None:
        try:
            reminder_runner.stop()
            reminder_runner.join(timeout=10.0)
        except Exception:
            logger.debug("Reminder runner shutdown failed.", exc_info=True)

    try:
        state.view_model.close()
    except Exception:
        logger.debug("View model close failed.", exc_info=True)

    try:
        state.task_store.close()
    except Exception:
        logger.debug("TaskStore close failed.", exc_info=True)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/taskpad")
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "taskpad"))

    state = create_initial_state(settings=settings)

    # Permission is checked inside; denial leaves reminders off without telling the user.
    reminder_runner = start_reminders_in_background(state)

    stop_main = threading.Event()

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_main.set()

    try:
        signal.signal(signal.SIGTERM, _handle_signal)
        if not settings.console_enabled:
            # The REPL handles Ctrl+C itself.
            signal.signal(signal.SIGINT, _handle_signal)
    except Exception:
        # Some platforms may not support SIGTERM, etc.
        pass

    try:
        if settings.console_enabled:
            run_console_loop(state)
            stop_main.set()
        else:
            logger.info("Console disabled. Running reminders only. Press Ctrl+C to stop.")
            stop_main.wait()
    finally:
        _shutdown(state, reminder_runner)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
