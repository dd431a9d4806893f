# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations into AppState (store/view model/notifier).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_notifier import ConsoleNotifier
from ..core.state import AppState
from ..core.view_model import TaskViewModel
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    task_store = TaskStore(settings.tasks_db_path)
    state = AppState(
        settings=settings,
        task_store=task_store,
        view_model=TaskViewModel(task_store),
        notifier=ConsoleNotifier(),
    )
    logger.debug("AppState created (db=%s)", settings.tasks_db_path)
    return state
