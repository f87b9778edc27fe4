"""Repository abstraction layer for dich.

This module defines the abstract base class (interface) for task persistence,
following the Ports & Adapters pattern: controllers depend on
``TaskRepository`` and never on a concrete storage backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from dich.models import Priority, Task
from dich.utils.observable import Observable


class ChangeKind(str, Enum):
    """Kind of committed write reported to store subscribers."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass(frozen=True)
class StoreChange:
    """A committed write: what happened and to which task ids."""

    kind: ChangeKind
    task_ids: tuple[str, ...]


class TaskRepository(ABC):
    """Abstract base class for task persistence operations.

    Every mutating operation must be durably committed before it returns, so
    that the next ``list_all()`` issued by the same process reflects it.
    Subscribers registered with ``subscribe()`` are told about each commit.
    """

    def __init__(self) -> None:
        self._changes: Observable[StoreChange] = Observable()

    def subscribe(self, listener: Callable[[StoreChange], None]) -> Callable[[], None]:
        """Register a listener for committed writes.

        Returns:
            A callable that removes the listener again
        """
        return self._changes.subscribe(listener)

    def _notify(self, kind: ChangeKind, task_ids: Iterable[str]) -> None:
        self._changes.notify(StoreChange(kind=kind, task_ids=tuple(task_ids)))

    @abstractmethod
    def create(self, title: str, priority: Priority = Priority.MEDIUM) -> Task:
        """Create and insert a new task.

        Args:
            title: Task title; trimmed before it is stored
            priority: Priority level

        Returns:
            The created Task with generated ID and timestamp

        Raises:
            ValidationError: If the title is blank or the priority is unknown
        """
        raise NotImplementedError("TaskRepository.create() must be implemented by adapter")

    @abstractmethod
    def list_all(self) -> list[Task]:
        """Return every task, newest first.

        Ties on ``created_at`` keep insertion order.
        """
        raise NotImplementedError(
            "TaskRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    def get(self, task_id: str) -> Task:
        """Get a specific task by ID.

        Raises:
            TaskNotFoundError: If the task does not exist
        """
        raise NotImplementedError("TaskRepository.get() must be implemented by adapter")

    @abstractmethod
    def update(self, task: Task) -> bool:
        """Persist the mutable fields of an already stored task.

        Returns:
            False when the task is no longer in the store (nothing written)
        """
        raise NotImplementedError(
            "TaskRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    def delete(self, task_ids: Iterable[str]) -> int:
        """Remove the matching tasks; unknown ids are ignored.

        Returns:
            Number of tasks removed
        """
        raise NotImplementedError(
            "TaskRepository.delete() must be implemented by adapter"
        )
