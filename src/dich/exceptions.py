"""Custom exceptions for dich."""


class DichError(Exception):
    """Base exception for all dich errors."""


class ValidationError(DichError):
    """Raised when task data is rejected (empty title, unknown priority)."""


class PersistenceInitError(DichError):
    """Raised when the task database cannot be opened or migrated."""


class TaskNotFoundError(DichError):
    """Raised when a task id is not present in the store."""

    def __init__(self, task_id: str):
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id
