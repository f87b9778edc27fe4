"""Textual screens for the task list and the add-task dialog."""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.screen import ModalScreen, Screen
from textual.widgets import (
    Button,
    Footer,
    Header,
    Input,
    ListItem,
    ListView,
    RadioButton,
    RadioSet,
    Static,
)

from dich.config import UIConfig
from dich.controllers import ListState, TaskDetailController, TaskListController
from dich.exceptions import TaskNotFoundError
from dich.models import Priority, Task
from dich.ui.formatters import (
    EMPTY_HINT,
    EMPTY_TITLE,
    completion_marker,
    format_timestamp,
    priority_indicator,
    priority_style,
    task_title,
)
from dich.ui.task_detail import TaskDetailScreen


class CompletionToggle(Static):
    """Clickable completion marker at the start of a row."""

    class Pressed(Message):
        """Posted when the marker is clicked."""

        def __init__(self, task_id: str) -> None:
            super().__init__()
            self.task_id = task_id

    def __init__(self, model: Task) -> None:
        super().__init__(completion_marker(model), classes="toggle")
        self.model = model

    def on_click(self, event) -> None:
        # Keep the click from also opening the detail screen
        event.stop()
        self.post_message(self.Pressed(self.model.id))


class TaskRow(ListItem):
    """One task in the list: marker, title, creation time, priority."""

    def __init__(self, model: Task, date_format: str) -> None:
        super().__init__(classes="task-row")
        self.model = model
        self.date_format = date_format

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield CompletionToggle(self.model)
            with Vertical(classes="task-text"):
                yield Static(task_title(self.model), classes="title")
                yield Static(
                    format_timestamp(self.model.created_at, self.date_format),
                    classes="created",
                )
            yield Static(priority_indicator(self.model), classes="priority")


class TaskListScreen(Screen):
    """The initial view: every task, newest first."""

    DEFAULT_CSS = """
    TaskListScreen #empty-state {
        align: center middle;
        height: 1fr;
    }

    TaskListScreen #empty-state Static {
        width: 100%;
        content-align: center middle;
    }

    TaskListScreen #empty-title {
        text-style: bold;
    }

    TaskListScreen #empty-hint {
        color: $text-muted;
    }

    TaskRow Horizontal {
        height: auto;
        padding: 0 1;
    }

    TaskRow .toggle {
        width: 3;
    }

    TaskRow .task-text {
        width: 1fr;
        height: auto;
    }

    TaskRow .created {
        color: $text-muted;
    }

    TaskRow .priority {
        width: 2;
    }
    """

    BINDINGS = [
        Binding("a", "add_task", "Add"),
        Binding("space", "toggle_task", "Done/Undo"),
        Binding("d", "delete_task", "Delete"),
        Binding("delete", "delete_task", "Delete", show=False),
        Binding("q", "app.quit", "Quit"),
    ]

    def __init__(self, controller: TaskListController, ui_config: UIConfig) -> None:
        super().__init__()
        self.controller = controller
        self.ui_config = ui_config
        # Tasks exactly as currently shown; row positions index into this
        self.rendered: list[Task] = []
        self._unsubscribe = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="empty-state"):
            yield Static(EMPTY_TITLE, id="empty-title")
            yield Static(EMPTY_HINT, id="empty-hint")
        yield ListView(id="task-list")
        yield Footer()

    async def on_mount(self) -> None:
        self._unsubscribe = self.controller.subscribe(self._on_tasks_changed)
        await self.render_tasks()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()

    def _on_tasks_changed(self, tasks: list[Task]) -> None:
        self.call_later(self.render_tasks)

    async def render_tasks(self) -> None:
        """Rebuild the rows from the controller's current snapshot."""
        list_view = self.query_one("#task-list", ListView)
        previous_index = list_view.index

        tasks = list(self.controller.tasks)
        await list_view.clear()
        await list_view.extend(
            TaskRow(task, self.ui_config.row_date_format) for task in tasks
        )
        self.rendered = tasks

        empty = self.controller.state is ListState.EMPTY
        self.query_one("#empty-state").display = empty
        list_view.display = not empty

        if tasks:
            index = previous_index if previous_index is not None else 0
            list_view.index = min(index, len(tasks) - 1)

    def _highlighted_row(self) -> TaskRow | None:
        row = self.query_one("#task-list", ListView).highlighted_child
        return row if isinstance(row, TaskRow) else None

    def action_add_task(self) -> None:
        self.controller.show_add_form()
        self.app.push_screen(AddTaskScreen(self.controller))

    def action_toggle_task(self) -> None:
        row = self._highlighted_row()
        if row is not None:
            self.controller.toggle_complete(row.model.id)

    def action_delete_task(self) -> None:
        index = self.query_one("#task-list", ListView).index
        if index is not None:
            self.controller.delete_at([index], snapshot=self.rendered)

    def on_completion_toggle_pressed(self, message: CompletionToggle.Pressed) -> None:
        self.controller.toggle_complete(message.task_id)

    @on(ListView.Selected, "#task-list")
    def open_detail(self, event: ListView.Selected) -> None:
        if not isinstance(event.item, TaskRow):
            return
        try:
            task = self.controller.repository.get(event.item.model.id)
        except TaskNotFoundError:
            return
        detail = TaskDetailController(self.controller.repository, task)
        self.app.push_screen(TaskDetailScreen(detail, self.ui_config))


class AddTaskScreen(ModalScreen[None]):
    """Dialog for a new task: title and priority."""

    DEFAULT_CSS = """
    AddTaskScreen {
        align: center middle;
    }

    AddTaskScreen #add-dialog {
        width: 60;
        height: auto;
        padding: 1 2;
        border: thick $primary;
        background: $surface;
    }

    AddTaskScreen .dialog-title {
        text-style: bold;
        margin-bottom: 1;
    }

    AddTaskScreen RadioSet {
        layout: horizontal;
        margin: 1 0;
    }

    AddTaskScreen .dialog-buttons {
        height: auto;
        align-horizontal: right;
    }
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, controller: TaskListController) -> None:
        super().__init__()
        self.controller = controller

    def compose(self) -> ComposeResult:
        with Vertical(id="add-dialog"):
            yield Static("New task", classes="dialog-title")
            yield Input(
                value=self.controller.draft_title,
                placeholder="What needs to be done?",
                id="title-input",
            )
            with RadioSet(id="priority-set"):
                for priority in Priority:
                    yield RadioButton(
                        priority_style(priority).label,
                        value=priority == self.controller.draft_priority,
                    )
            with Horizontal(classes="dialog-buttons"):
                yield Button("Cancel", id="cancel")
                yield Button(
                    "Add",
                    variant="primary",
                    id="add",
                    disabled=not self.controller.can_submit,
                )

    def on_mount(self) -> None:
        self.query_one("#title-input", Input).focus()

    @on(Input.Changed, "#title-input")
    def title_changed(self, event: Input.Changed) -> None:
        self.controller.draft_title = event.value
        self.query_one("#add", Button).disabled = not self.controller.can_submit

    @on(RadioSet.Changed, "#priority-set")
    def priority_changed(self, event: RadioSet.Changed) -> None:
        self.controller.draft_priority = Priority(event.index)

    @on(Input.Submitted, "#title-input")
    @on(Button.Pressed, "#add")
    def submit(self) -> None:
        if self.controller.submit_add() is not None:
            self.dismiss()

    @on(Button.Pressed, "#cancel")
    def action_cancel(self) -> None:
        self.controller.cancel_add()
        self.dismiss()
