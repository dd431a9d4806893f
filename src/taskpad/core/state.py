# src/taskpad/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_models import TaskFilter
from .ports import Notifier, TaskRepo
from .view_model import TaskViewModel


@dataclass
class AppState:
    # Settings object (real Settings or a test SimpleNamespace).
    settings: Any

    task_store: TaskRepo
    view_model: TaskViewModel
    notifier: Notifier

    # Current filter of the visible list; reset on every start.
    task_filter: TaskFilter = TaskFilter.PENDING

    lock: threading.RLock = field(default_factory=threading.RLock)
