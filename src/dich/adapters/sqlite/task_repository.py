"""SQLite implementation of TaskRepository."""

from __future__ import annotations

import sqlite3
from collections.abc import Callable, Iterable
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from dich.adapters.sqlite.connection import get_connection
from dich.adapters.sqlite.utils import (
    generate_uuid,
    parse_datetime,
    row_to_dict,
    to_iso,
    utc_now,
)
from dich.exceptions import TaskNotFoundError, ValidationError
from dich.models import Priority, Task, TaskCreate, normalize_comment
from dich.repositories import ChangeKind, TaskRepository
from dich.utils.logger import get_logger

_SELECT_TASK = "SELECT id, title, is_completed, created_at, priority, comment FROM tasks"


class SqliteTaskRepository(TaskRepository):
    """SQLite implementation of the task store."""

    def __init__(
        self,
        db_path: str | Path | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize SQLite task repository.

        Args:
            db_path: Optional database file path. If None, uses default location.
            clock: Source of creation timestamps.
        """
        super().__init__()
        self.db_path = db_path
        self.clock = clock
        self.logger = get_logger()

    @property
    def connection(self) -> sqlite3.Connection:
        """Connection to this repository's database file.

        Looked up on every access: the process keeps one open file at a time
        and reopens this one if another store was used in between.
        """
        return get_connection(self.db_path)

    def open(self) -> None:
        """Open the database eagerly.

        Raises:
            PersistenceInitError: If the database cannot be opened or migrated
        """
        _ = self.connection

    def create(self, title: str, priority: Priority | int = Priority.MEDIUM) -> Task:
        """Create a new task."""
        try:
            data = TaskCreate(title=title, priority=priority)
        except PydanticValidationError as e:
            raise ValidationError(_first_error(e)) from e

        # Round-trip through the stored form so the returned task matches list_all()
        task = Task(
            id=generate_uuid(),
            title=data.title,
            created_at=parse_datetime(to_iso(self.clock())),
            priority=data.priority,
        )

        self.connection.execute(
            """INSERT INTO tasks (id, title, is_completed, created_at, priority, comment)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (
                task.id,
                task.title,
                task.is_completed,
                to_iso(task.created_at),
                int(task.priority),
                task.comment,
            ),
        )
        self.connection.commit()

        self.logger.debug("created task %s (priority %d)", task.id, task.priority)
        self._notify(ChangeKind.CREATED, [task.id])
        return task

    def list_all(self) -> list[Task]:
        """List all tasks, newest first; equal timestamps keep insertion order."""
        cursor = self.connection.execute(
            f"{_SELECT_TASK} ORDER BY created_at DESC, seq ASC"
        )
        return [self._row_to_task(row) for row in cursor.fetchall()]

    def get(self, task_id: str) -> Task:
        """Get a specific task by ID."""
        cursor = self.connection.execute(f"{_SELECT_TASK} WHERE id = ?", (task_id,))
        row = cursor.fetchone()

        if not row:
            raise TaskNotFoundError(task_id)

        return self._row_to_task(row)

    def update(self, task: Task) -> bool:
        """Persist completion, priority and comment of a stored task."""
        cursor = self.connection.execute(
            """UPDATE tasks
               SET is_completed = ?, priority = ?, comment = ?
               WHERE id = ?""",
            (
                task.is_completed,
                int(task.priority),
                normalize_comment(task.comment),
                task.id,
            ),
        )
        self.connection.commit()

        if cursor.rowcount == 0:
            self.logger.debug("update skipped, task %s not in store", task.id)
            return False

        self.logger.debug("updated task %s", task.id)
        self._notify(ChangeKind.UPDATED, [task.id])
        return True

    def delete(self, task_ids: Iterable[str]) -> int:
        """Delete tasks by id; ids not in the store are ignored."""
        ids = list(dict.fromkeys(task_ids))
        if not ids:
            return 0

        placeholders = ", ".join("?" for _ in ids)
        cursor = self.connection.execute(
            f"SELECT id FROM tasks WHERE id IN ({placeholders})", ids
        )
        existing = [row[0] for row in cursor.fetchall()]
        if not existing:
            return 0

        placeholders = ", ".join("?" for _ in existing)
        self.connection.execute(
            f"DELETE FROM tasks WHERE id IN ({placeholders})", existing
        )
        self.connection.commit()

        self.logger.info("deleted %d task(s)", len(existing))
        self._notify(ChangeKind.DELETED, existing)
        return len(existing)

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        task_dict = row_to_dict(row)
        task_dict["is_completed"] = bool(task_dict["is_completed"])
        task_dict["created_at"] = parse_datetime(task_dict["created_at"])
        return Task(**task_dict)


def _first_error(error: PydanticValidationError) -> str:
    """Short human-readable message from a pydantic error."""
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    field = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    return f"{field}: {message}" if field else message
