"""Rich renderables and fixed presentation tables for tasks."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from rich.text import Text

from dich.models import Priority, Task


@dataclass(frozen=True)
class PriorityStyle:
    """How a priority level is shown: label, glyph, colour and description."""

    label: str
    icon: str
    color: str
    description: str


PRIORITY_STYLES: dict[Priority, PriorityStyle] = {
    Priority.LOW: PriorityStyle(
        label="Low",
        icon="↓",
        color="blue",
        description="Low priority: can be deferred",
    ),
    Priority.MEDIUM: PriorityStyle(
        label="Medium",
        icon="−",
        color="dark_orange",
        description="Medium priority: routine task",
    ),
    Priority.HIGH: PriorityStyle(
        label="High",
        icon="!",
        color="red",
        description="High priority: needs attention!",
    ),
}

CHECKED_ICON = "●"
UNCHECKED_ICON = "○"

EMPTY_TITLE = "No tasks"
EMPTY_HINT = "Press a to add your first task"


def priority_style(priority: Priority | int) -> PriorityStyle:
    """Style for a priority level; unknown values fall back to medium."""
    try:
        return PRIORITY_STYLES[Priority(priority)]
    except ValueError:
        return PRIORITY_STYLES[Priority.MEDIUM]


def format_timestamp(value: datetime, fmt: str) -> str:
    """Format a stored (UTC) timestamp in local time."""
    return value.astimezone().strftime(fmt)


def completion_marker(task: Task) -> Text:
    if task.is_completed:
        return Text(CHECKED_ICON, style="bold green")
    return Text(UNCHECKED_ICON, style="grey50")


def task_title(task: Task) -> Text:
    """Title text; completed tasks are struck through and dimmed."""
    if task.is_completed:
        return Text(task.title, style="strike dim")
    return Text(task.title)


def priority_indicator(task: Task) -> Text:
    """Row indicator: shown for low and high priority, blank for medium."""
    if task.priority == Priority.MEDIUM:
        return Text("")
    style = priority_style(task.priority)
    return Text(style.icon, style=f"bold {style.color}")


def priority_summary(priority: Priority | int) -> Text:
    """Glyph followed by the description, as shown on the detail screen."""
    style = priority_style(priority)
    text = Text(style.icon, style=f"bold {style.color}")
    text.append(f" {style.description}", style="italic")
    return text
