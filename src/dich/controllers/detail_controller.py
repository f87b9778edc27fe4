"""Task detail controller - edits the mutable fields of one task."""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError

from dich.exceptions import ValidationError
from dich.models import Priority, Task, normalize_comment
from dich.repositories import TaskRepository
from dich.utils.logger import get_logger


class TaskDetailController:
    """Edits completion, priority and comment of a single task.

    Completion and priority are written through to the store on every change.
    The comment is edited in ``comment_draft`` and committed when the detail
    view is left, whether by navigating away or by pressing Done.
    """

    def __init__(self, repository: TaskRepository, task: Task):
        self.repository = repository
        self.task = task
        self.comment_draft: str = ""
        self.logger = get_logger()

    def on_enter(self) -> None:
        """Load the comment draft from the task."""
        self.comment_draft = self.task.comment or ""

    def set_completed(self, value: bool) -> None:
        self.task.is_completed = value
        self.repository.update(self.task)

    def set_priority(self, value: Priority | int) -> None:
        """Change priority and persist it.

        Raises:
            ValidationError: If *value* is not one of the priority levels
        """
        try:
            self.task.priority = value
        except PydanticValidationError as e:
            raise ValidationError(f"Unknown priority: {value!r}") from e
        self.repository.update(self.task)

    def commit_comment(self) -> None:
        """Write the normalized comment draft to the task and persist it."""
        self.task.comment = normalize_comment(self.comment_draft)
        self.repository.update(self.task)
        self.logger.debug("committed comment for task %s", self.task.id)

    # Navigating away and pressing Done are two triggers for the same commit
    on_exit = commit_comment
    confirm_done = commit_comment
