# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskFilter(StrEnum):
    """Which slice of the list is visible. Session-only, never persisted."""

    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | None) -> TaskFilter:
        if not raw:
            return cls.PENDING
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.PENDING


@dataclass(slots=True, frozen=True)
class Task:
    id: int
    description: str
    completed: bool = False
