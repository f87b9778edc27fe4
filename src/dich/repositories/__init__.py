"""Repository interfaces for dich."""

from dich.repositories.repository import ChangeKind, StoreChange, TaskRepository

__all__ = [
    "ChangeKind",
    "StoreChange",
    "TaskRepository",
]
