# tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import threading
from collections.abc import Callable
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)

TaskListener = Callable[[list[Task]], None]


class TaskStore:
    """
    SQLite task store with a live view of its contents.

    Schema: a single `tasks` table {id, description, completed}.
    Identifier uniqueness comes from the primary key alone.

    Thread-safety:
    - each method opens its own SQLite connection
    - mutations and listener notification run under one lock, so listeners
      receive snapshots in mutation order
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.RLock()
        self._listeners: list[TaskListener] = []
        self._ensure_schema()
        try:
            total = self.count_tasks()
        except Exception:
            total = -1
        logger.info("TaskStore ready db=%s total=%s", self._db_path, total)

    def close(self) -> None:
        """Drop listeners. There are no persistent connections to close."""
        with self._lock:
            self._listeners.clear()

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(Exception):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    description TEXT NOT NULL,
                    completed INTEGER NOT NULL DEFAULT 0
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            description=str(row["description"] or ""),
            completed=bool(row["completed"]),
        )

    def _notify(self) -> None:
        """Push a fresh snapshot to every listener. Caller holds the lock."""
        if not self._listeners:
            return
        snapshot = self.list_tasks()
        for listener in list(self._listeners):
            try:
                listener(list(snapshot))
            except Exception:
                logger.exception("Task listener failed: %r", listener)

    # ---- public API ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)
        finally:
            conn.close()

    def list_tasks(self) -> list[Task]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT id, description, completed FROM tasks ORDER BY id ASC").fetchall()
            return [self._row_to_task(r) for r in rows]
        finally:
            conn.close()

    def get_task(self, task_id: int) -> Task | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT id, description, completed FROM tasks WHERE id = ?",
                (int(task_id),),
            ).fetchone()
            return self._row_to_task(row) if row else None
        finally:
            conn.close()

    def add_task(self, description: str) -> Task:
        text = (description or "").strip()
        if not text:
            raise ValueError("description is required")

        with self._lock:
            conn = self._get_conn()
            try:
                cur = conn.execute(
                    "INSERT INTO tasks(description, completed) VALUES (?, 0)",
                    (text,),
                )
                conn.commit()
                rowid = cur.lastrowid
                if rowid is None:
                    raise RuntimeError("SQLite did not return lastrowid for tasks insert")
            finally:
                conn.close()

            task = Task(id=int(rowid), description=text, completed=False)
            logger.debug("Task added id=%s", task.id)
            self._notify()
            return task

    def toggle_task(self, task_id: int) -> Task | None:
        """Flip `completed` on one row. Returns the updated task, or None if it is gone."""
        with self._lock:
            conn = self._get_conn()
            try:
                cur = conn.execute(
                    "UPDATE tasks SET completed = 1 - completed WHERE id = ?",
                    (int(task_id),),
                )
                conn.commit()
                changed = cur.rowcount == 1
            finally:
                conn.close()

            if not changed:
                logger.debug("Toggle skipped: task %s not found", task_id)
                return None

            task = self.get_task(task_id)
            logger.debug("Task toggled id=%s completed=%s", task_id, task.completed if task else None)
            self._notify()
            return task

    def delete_task(self, task_id: int) -> bool:
        with self._lock:
            conn = self._get_conn()
            try:
                cur = conn.execute("DELETE FROM tasks WHERE id = ?", (int(task_id),))
                conn.commit()
                deleted = cur.rowcount == 1
            finally:
                conn.close()

            if deleted:
                logger.debug("Task deleted id=%s", task_id)
                self._notify()
            return deleted

    def clear_tasks(self) -> int:
        with self._lock:
            conn = self._get_conn()
            try:
                cur = conn.execute("DELETE FROM tasks")
                conn.commit()
                removed = max(0, cur.rowcount)
            finally:
                conn.close()

            logger.info("Cleared %d task(s)", removed)
            self._notify()
            return removed

    def subscribe(self, listener: TaskListener) -> Callable[[], None]:
        """
        Register a listener for the live task list.

        The listener is called right away with the current contents and then
        after every mutation. Returns a callable that unregisters it.
        """
        with self._lock:
            self._listeners.append(listener)
            try:
                listener(self.list_tasks())
            except Exception:
                logger.exception("Task listener failed on subscribe: %r", listener)

        def unsubscribe() -> None:
            with self._lock:
                with contextlib.suppress(ValueError):
                    self._listeners.remove(listener)

        return unsubscribe
