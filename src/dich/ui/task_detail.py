"""Textual screen for viewing and editing a single task."""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.screen import Screen
from textual.widgets import (
    Button,
    Footer,
    Header,
    Label,
    RadioButton,
    RadioSet,
    Static,
    Switch,
    TextArea,
)

from dich.config import UIConfig
from dich.controllers import TaskDetailController
from dich.models import Priority
from dich.ui.formatters import format_timestamp, priority_style, priority_summary

COMMENT_HINT = "Add a note to this task..."


class TaskDetailScreen(Screen):
    """Completion, priority and comment of one task.

    The comment is committed when the screen goes away, so leaving with
    escape and pressing Done both keep it.
    """

    TITLE = "Task details"

    DEFAULT_CSS = """
    TaskDetailScreen #detail {
        padding: 1 2;
    }

    TaskDetailScreen .section-title {
        text-style: bold;
        margin-top: 1;
    }

    TaskDetailScreen .field {
        height: auto;
    }

    TaskDetailScreen .field-label {
        width: 16;
        color: $text-muted;
    }

    TaskDetailScreen RadioSet {
        layout: horizontal;
    }

    TaskDetailScreen #comment {
        height: 8;
    }

    TaskDetailScreen #comment-hint {
        color: $text-muted;
    }

    TaskDetailScreen #done {
        margin-top: 1;
    }
    """

    BINDINGS = [Binding("escape", "back", "Back")]

    def __init__(self, controller: TaskDetailController, ui_config: UIConfig) -> None:
        super().__init__()
        self.controller = controller
        self.ui_config = ui_config
        self.controller.on_enter()

    def compose(self) -> ComposeResult:
        task = self.controller.task
        yield Header()
        with VerticalScroll(id="detail"):
            yield Static("Task", classes="section-title")
            with Horizontal(classes="field"):
                yield Label("Title", classes="field-label")
                yield Static(task.title, id="detail-title", markup=False)
            with Horizontal(classes="field"):
                yield Label("Completed", classes="field-label")
                yield Switch(value=task.is_completed, id="completed-switch")
            with Horizontal(classes="field"):
                yield Label("Created", classes="field-label")
                yield Static(
                    format_timestamp(task.created_at, self.ui_config.detail_date_format),
                    id="created-at",
                )

            yield Static("Priority", classes="section-title")
            with RadioSet(id="priority-set"):
                for priority in Priority:
                    yield RadioButton(
                        priority_style(priority).label,
                        value=priority == task.priority,
                    )
            yield Static(priority_summary(task.priority), id="priority-summary")

            yield Static("Comment", classes="section-title")
            yield TextArea(self.controller.comment_draft, id="comment")
            hint = Static(COMMENT_HINT, id="comment-hint")
            hint.display = not self.controller.comment_draft
            yield hint

            yield Button("Done", variant="primary", id="done")
        yield Footer()

    @on(Switch.Changed, "#completed-switch")
    def completed_changed(self, event: Switch.Changed) -> None:
        self.controller.set_completed(event.value)

    @on(RadioSet.Changed, "#priority-set")
    def priority_changed(self, event: RadioSet.Changed) -> None:
        self.controller.set_priority(event.index)
        self.query_one("#priority-summary", Static).update(
            priority_summary(self.controller.task.priority)
        )

    @on(TextArea.Changed, "#comment")
    def comment_changed(self, event: TextArea.Changed) -> None:
        self.controller.comment_draft = event.text_area.text
        self.query_one("#comment-hint").display = not self.controller.comment_draft

    @on(Button.Pressed, "#done")
    def done(self) -> None:
        self.controller.confirm_done()
        self.app.pop_screen()

    def action_back(self) -> None:
        self.app.pop_screen()

    def on_unmount(self) -> None:
        self.controller.on_exit()
