"""dich domain models.

Pydantic models for the task entity, used by the store, the controllers and
the UI for validation and type safety.
"""

from .task import Priority, Task, TaskCreate, normalize_comment

__all__ = [
    "Priority",
    "Task",
    "TaskCreate",
    "normalize_comment",
]
