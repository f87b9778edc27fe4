"""Task data models."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Priority(IntEnum):
    """Task priority level, integer-encoded as stored."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2


def normalize_comment(comment: str | None) -> str | None:
    """Map an empty comment to ``None``; any other value is kept as typed."""
    if comment is None or comment == "":
        return None
    return comment


class Task(BaseModel):
    """Task model representing one to-do item.

    Attributes:
        id: Unique identifier, assigned at creation and never reused
        title: Human-readable title
        is_completed: Completion status
        created_at: Creation timestamp (UTC), never changes
        priority: Priority level (0=low, 1=medium, 2=high)
        comment: Optional free-form note
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(frozen=True)
    title: str
    is_completed: bool = False
    created_at: datetime = Field(frozen=True)
    priority: Priority = Priority.MEDIUM
    comment: str | None = None


class TaskCreate(BaseModel):
    """Model for creating a new task.

    The title is trimmed; a title that is empty after trimming is rejected.
    """

    title: str
    priority: Priority = Priority.MEDIUM

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be empty")
        return value
