"""Controllers holding the list and detail state transitions."""

from dich.controllers.detail_controller import TaskDetailController
from dich.controllers.list_controller import ListState, TaskListController

__all__ = [
    "ListState",
    "TaskDetailController",
    "TaskListController",
]
