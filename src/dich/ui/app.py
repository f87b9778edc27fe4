"""Textual application shell: mounts the task list as the initial view."""

from __future__ import annotations

from textual.app import App

from dich.config import Config
from dich.controllers import TaskListController
from dich.repositories import TaskRepository
from dich.ui.task_list import TaskListScreen


class DichApp(App):
    """Single-screen to-do list."""

    TITLE = "My tasks"

    def __init__(self, repository: TaskRepository, config: Config | None = None):
        super().__init__()
        self.repository = repository
        self.app_config = config or Config()
        self.list_controller: TaskListController | None = None

    def on_mount(self) -> None:
        self.list_controller = TaskListController(self.repository)
        self.push_screen(TaskListScreen(self.list_controller, self.app_config.ui))

    def on_unmount(self) -> None:
        if self.list_controller is not None:
            self.list_controller.close()
