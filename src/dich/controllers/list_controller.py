"""Task list controller - state and transitions behind the list screen.

The controller owns the add form's draft state and the snapshot of tasks the
view last rendered. It is UI-agnostic: the Textual screen subscribes to it and
re-renders whenever ``refresh()`` produces a new snapshot.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum

from dich.exceptions import TaskNotFoundError, ValidationError
from dich.models import Priority, Task
from dich.repositories import StoreChange, TaskRepository
from dich.utils.logger import get_logger
from dich.utils.observable import Observable


class ListState(str, Enum):
    """Presentation state of the task list. There is no loading state."""

    EMPTY = "empty"
    POPULATED = "populated"


class TaskListController:
    """Presents the task collection and mediates add, delete and toggle."""

    def __init__(self, repository: TaskRepository):
        self.repository = repository
        self.logger = get_logger()

        self.draft_title: str = ""
        self.draft_priority: Priority = Priority.MEDIUM
        self.is_add_form_visible: bool = False
        self.tasks: list[Task] = []

        self._changes: Observable[list[Task]] = Observable()
        self._unsubscribe_store = repository.subscribe(self._on_store_change)
        self.refresh()

    def subscribe(self, listener: Callable[[list[Task]], None]) -> Callable[[], None]:
        """Register a view listener called with each new snapshot."""
        return self._changes.subscribe(listener)

    def close(self) -> None:
        """Stop following store changes."""
        self._unsubscribe_store()

    @property
    def state(self) -> ListState:
        return ListState.POPULATED if self.tasks else ListState.EMPTY

    def refresh(self) -> list[Task]:
        """Re-read the store into the snapshot and notify view listeners."""
        self.tasks = self.repository.list_all()
        self._changes.notify(self.tasks)
        return self.tasks

    def _on_store_change(self, change: StoreChange) -> None:
        self.refresh()

    # Add form

    def show_add_form(self) -> None:
        self.is_add_form_visible = True

    def cancel_add(self) -> None:
        """Close the add form; drafts are kept for the next time it opens."""
        self.is_add_form_visible = False

    @property
    def can_submit(self) -> bool:
        return bool(self.draft_title.strip())

    def submit_add(self) -> Task | None:
        """Create a task from the drafts.

        A blank title is refused silently: nothing is created and the form
        stays open.

        Returns:
            The created task, or None when the add was refused
        """
        if not self.can_submit:
            return None

        try:
            task = self.repository.create(self.draft_title, self.draft_priority)
        except ValidationError as e:
            self.logger.info("add refused: %s", e)
            return None

        self.logger.info("added task %s", task.id)
        self.draft_title = ""
        self.draft_priority = Priority.MEDIUM
        self.is_add_form_visible = False
        return task

    # Row actions

    def toggle_complete(self, task_id: str) -> Task | None:
        """Invert the stored completion state of a task.

        Returns:
            The updated task, or None if it is no longer in the store
        """
        try:
            task = self.repository.get(task_id)
        except TaskNotFoundError:
            self.logger.debug("toggle ignored, task %s not in store", task_id)
            return None

        task.is_completed = not task.is_completed
        if not self.repository.update(task):
            return None
        return task

    def delete_at(
        self, indices: Iterable[int], snapshot: list[Task] | None = None
    ) -> int:
        """Delete the tasks at the given positions of the rendered snapshot.

        Positions are resolved without re-reading or re-sorting: against
        *snapshot* when the view passes the list it actually shows, otherwise
        against ``self.tasks``. Positions outside it are ignored.

        Returns:
            Number of tasks removed
        """
        if snapshot is None:
            snapshot = self.tasks
        task_ids = {
            snapshot[index].id for index in indices if 0 <= index < len(snapshot)
        }
        if not task_ids:
            return 0
        return self.repository.delete(task_ids)
