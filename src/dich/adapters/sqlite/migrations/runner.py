"""Forward-only schema upgrades for the task database.

The schema version lives in SQLite's ``user_version`` header field, so a
fresh file reads as version 0 and no bookkeeping table is needed.
"""

from __future__ import annotations

import sqlite3
from abc import ABC, abstractmethod
from collections.abc import Sequence

from dich.utils.logger import get_logger


class Migration(ABC):
    """One schema step, identified by its target version."""

    @property
    @abstractmethod
    def version(self) -> int:
        """Schema version after this migration has run."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the migration."""

    @abstractmethod
    def up(self, connection: sqlite3.Connection) -> None:
        """Apply the change. Runs inside the caller's transaction."""


def schema_version(connection: sqlite3.Connection) -> int:
    """Version of the schema stored in *connection* (0 for a new file)."""
    return connection.execute("PRAGMA user_version").fetchone()[0]


def migrate(connection: sqlite3.Connection, migrations: Sequence[Migration]) -> int:
    """Apply every migration newer than the database, oldest first.

    Each migration commits together with its version bump, so a failure
    leaves the database at the last good version.

    Returns:
        Number of migrations applied

    Raises:
        RuntimeError: If the file was written by a newer schema or a
            migration fails
    """
    current = schema_version(connection)
    latest = max((m.version for m in migrations), default=0)
    if current > latest:
        raise RuntimeError(
            f"Database schema version {current} is newer than supported version {latest}"
        )

    pending = sorted(
        (m for m in migrations if m.version > current), key=lambda m: m.version
    )
    for migration in pending:
        _apply(connection, migration)

    return len(pending)


def _apply(connection: sqlite3.Connection, migration: Migration) -> None:
    try:
        connection.execute("BEGIN")
        migration.up(connection)
        # PRAGMA takes no bound parameters
        connection.execute(f"PRAGMA user_version = {int(migration.version)}")
        connection.commit()
    except Exception as e:
        connection.rollback()
        raise RuntimeError(f"Migration {migration.version} failed: {e}") from e

    get_logger().info(
        "applied migration %03d: %s", migration.version, migration.description
    )
