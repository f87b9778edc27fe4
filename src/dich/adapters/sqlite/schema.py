"""Database schema definitions for the local SQLite task store."""

from __future__ import annotations

# Tasks table - the only entity.
# seq gives a stable insertion order used to break created_at ties.
CREATE_TASKS_TABLE = """
CREATE TABLE IF NOT EXISTS tasks (
    seq INTEGER PRIMARY KEY AUTOINCREMENT,
    id TEXT NOT NULL UNIQUE,
    title TEXT NOT NULL,
    is_completed BOOLEAN NOT NULL DEFAULT 0,
    created_at TEXT NOT NULL,
    priority INTEGER NOT NULL DEFAULT 1 CHECK (priority IN (0, 1, 2)),
    comment TEXT
)
"""

CREATE_TASKS_ORDER_INDEX = """
CREATE INDEX IF NOT EXISTS idx_tasks_created_at
ON tasks (created_at DESC, seq ASC)
"""

ALL_TABLES = [
    CREATE_TASKS_TABLE,
]

ALL_INDEXES = [
    CREATE_TASKS_ORDER_INDEX,
]
