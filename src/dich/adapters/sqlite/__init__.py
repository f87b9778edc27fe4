"""SQLite adapter module - Local database storage implementation."""

from dich.adapters.sqlite.connection import (
    DatabaseConnection,
    default_db_path,
    get_connection,
)
from dich.adapters.sqlite.task_repository import SqliteTaskRepository

__all__ = [
    "DatabaseConnection",
    "SqliteTaskRepository",
    "default_db_path",
    "get_connection",
]
