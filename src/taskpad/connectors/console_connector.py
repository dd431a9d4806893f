# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
import threading
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_api import render_task_list, visible_tasks

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    Best-effort: if not a TTY, just print a new line.
    """
    try:
        if sys.stdout.isatty():
            sys.stdout.write("\033[1A\033[2K\r")
            sys.stdout.write(line + "\n")
            sys.stdout.flush()
        else:
            print(line)
    except Exception:
        print(line)


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


def _render(state: AppState) -> None:
    _print_ts(render_task_list(visible_tasks(state), state.task_filter))


def handle_input(state: AppState, user_input: str) -> str | None:
    """
    Process one line of console input.

    Slash commands go to the registry; anything else is a new task.
    Returns the reply to show, or None when there is nothing to say.
    """
    text = user_input.strip()
    if not text:
        return None

    def emit(msg: str) -> None:
        _print_ts(msg)

    lock = getattr(state, "lock", None)

    try:
        if lock:
            with lock:
                cmd_response = command_registry.handle(state, text, emit=emit)
        else:
            cmd_response = command_registry.handle(state, text, emit=emit)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    if cmd_response is not None:
        return cmd_response

    try:
        if lock:
            with lock:
                task = state.view_model.add_task(text)
        else:
            task = state.view_model.add_task(text)
    except Exception:
        logger.exception("Adding a task failed.")
        return "Internal error while adding the task."

    if task is None:
        return None
    return f"Added: {task.description}"


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Type a task to add it. Use /help for commands. Use /exit to quit.\n")

    changed = threading.Event()
    unsubscribe = state.view_model.subscribe(lambda _tasks: changed.set())

    try:
        while True:
            if changed.is_set():
                changed.clear()
                _render(state)

            try:
                user_input = input(">>> ").strip()
                _rewrite_prev_line(f"[{_ts_local()}] >>> {user_input}")
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if not user_input:
                continue

            if user_input.lower() in EXIT_COMMANDS:
                logger.info("Console exit command received.")
                break

            reply = handle_input(state, user_input)
            if reply is not None:
                _print_ts(reply)
    finally:
        unsubscribe()

    logger.info("Console connector finished.")
