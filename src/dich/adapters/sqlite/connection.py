"""Database connection management for the local SQLite task store.

This module provides a singleton connection manager for the local SQLite
database, ensuring proper connection lifecycle, WAL mode and schema migrations.
Any failure to open or migrate the database surfaces as PersistenceInitError.
"""

from __future__ import annotations

import atexit
import os
import sqlite3
from pathlib import Path

from platformdirs import user_data_dir

from dich.adapters.sqlite.migrations import MIGRATIONS, migrate
from dich.exceptions import PersistenceInitError
from dich.utils.logger import get_logger

DB_FILE_NAME = "tasks.db"


def default_db_path() -> Path:
    """Default database location inside the user data directory."""
    return Path(user_data_dir("dich")) / DB_FILE_NAME


class DatabaseConnection:
    """Singleton connection manager for the local task database.

    Provides:
    - Single connection per process (connection reuse)
    - WAL mode journaling
    - Automatic directory creation
    - Owner-only file permissions on a new database
    - Graceful cleanup on exit
    """

    _instance: DatabaseConnection | None = None
    _connection: sqlite3.Connection | None = None
    _db_path: Path | None = None
    _atexit_registered: bool = False

    def __new__(cls) -> DatabaseConnection:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_connection(cls, db_path: str | Path | None = None) -> sqlite3.Connection:
        """Get or create database connection.

        Args:
            db_path: Path to database file. If None, uses default location.

        Returns:
            sqlite3.Connection object with the schema up to date

        Raises:
            PersistenceInitError: If the database cannot be opened or migrated
        """
        instance = cls()
        db_path = default_db_path() if db_path is None else Path(db_path)

        if instance._connection is not None and instance._db_path == db_path:
            return instance._connection

        if instance._connection is not None:
            cls.close_connection()

        try:
            connection = cls._open(db_path)
        except PersistenceInitError:
            raise
        except (sqlite3.Error, OSError, RuntimeError) as e:
            get_logger().error("cannot open task database %s: %s", db_path, e)
            raise PersistenceInitError(
                f"Could not open task database at {db_path}: {e}"
            ) from e

        instance._connection = connection
        instance._db_path = db_path

        if not cls._atexit_registered:
            atexit.register(cls.close_connection)
            cls._atexit_registered = True

        get_logger().info("opened task database %s", db_path)
        return connection

    @classmethod
    def _open(cls, db_path: Path) -> sqlite3.Connection:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        if db_path.is_dir():
            raise PersistenceInitError(f"Database path is a directory: {db_path}")

        is_new_database = not db_path.exists()

        connection = sqlite3.connect(str(db_path), timeout=30.0)
        try:
            connection.row_factory = sqlite3.Row
            connection.execute("PRAGMA journal_mode = WAL")

            if is_new_database:
                os.chmod(db_path, 0o600)

            migrate(connection, MIGRATIONS)
        except BaseException:
            connection.close()
            raise

        return connection

    @classmethod
    def close_connection(cls) -> None:
        """Close database connection gracefully."""
        instance = cls()
        if instance._connection is not None:
            try:
                instance._connection.commit()
                instance._connection.close()
            except sqlite3.Error as e:
                get_logger().warning("error while closing task database: %s", e)
            finally:
                instance._connection = None
                instance._db_path = None


def get_connection(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Helper function to get database connection.

    Args:
        db_path: Optional path to database file

    Returns:
        Configured sqlite3.Connection
    """
    return DatabaseConnection.get_connection(db_path)
