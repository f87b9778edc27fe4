"""Unit tests for DatabaseConnection (connection.py)."""

from __future__ import annotations

import sqlite3
import stat
from unittest.mock import patch

import pytest

from dich.adapters.sqlite.connection import (
    DatabaseConnection,
    default_db_path,
    get_connection,
)
from dich.adapters.sqlite.migrations import schema_version
from dich.adapters.sqlite.task_repository import SqliteTaskRepository
from dich.exceptions import PersistenceInitError


# ---------------------------------------------------------------------------
# Singleton pattern
# ---------------------------------------------------------------------------


class TestSingleton:
    def test_same_instance_returned_twice(self):
        assert DatabaseConnection() is DatabaseConnection()


# ---------------------------------------------------------------------------
# get_connection
# ---------------------------------------------------------------------------


class TestGetConnection:
    def test_returns_sqlite_connection(self, db_path):
        conn = DatabaseConnection.get_connection(db_path)
        assert isinstance(conn, sqlite3.Connection)

    def test_creates_db_file_and_parents(self, tmp_path):
        nested = tmp_path / "a" / "b" / "tasks.db"
        get_connection(nested)
        assert nested.exists()

    def test_same_connection_for_same_path(self, db_path):
        assert get_connection(db_path) is get_connection(str(db_path))

    def test_new_connection_when_path_changes(self, tmp_path):
        conn1 = get_connection(tmp_path / "one.db")
        conn2 = get_connection(tmp_path / "two.db")
        assert conn1 is not conn2
        assert (tmp_path / "two.db").exists()

    def test_row_factory(self, db_path):
        assert get_connection(db_path).row_factory is sqlite3.Row

    def test_wal_mode(self, db_path):
        mode = get_connection(db_path).execute("PRAGMA journal_mode").fetchone()[0]
        assert mode.lower() == "wal"

    def test_new_file_owner_only(self, db_path):
        get_connection(db_path)
        mode = stat.S_IMODE(db_path.stat().st_mode)
        assert mode == 0o600

    def test_schema_migrated(self, db_path):
        conn = get_connection(db_path)
        tables = {
            row[0]
            for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
        }
        assert "tasks" in tables
        assert schema_version(conn) == 1

    def test_default_path_uses_user_data_dir(self, tmp_path):
        with patch(
            "dich.adapters.sqlite.connection.user_data_dir", return_value=str(tmp_path)
        ):
            assert default_db_path() == tmp_path / "tasks.db"
            get_connection()
        assert (tmp_path / "tasks.db").exists()


# ---------------------------------------------------------------------------
# Failures are fatal PersistenceInitError
# ---------------------------------------------------------------------------


class TestInitFailures:
    def test_directory_path(self, tmp_path):
        with pytest.raises(PersistenceInitError):
            get_connection(tmp_path)

    def test_not_a_database(self, tmp_path):
        bogus = tmp_path / "bogus.db"
        bogus.write_bytes(b"this is not sqlite" * 100)
        with pytest.raises(PersistenceInitError):
            get_connection(bogus)

    def test_parent_is_a_file(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        with pytest.raises(PersistenceInitError):
            get_connection(blocker / "tasks.db")

    def test_failed_open_leaves_no_connection(self, tmp_path):
        with pytest.raises(PersistenceInitError):
            get_connection(tmp_path)
        assert DatabaseConnection._connection is None

    def test_newer_schema_refused(self, db_path):
        conn = get_connection(db_path)
        conn.execute("PRAGMA user_version = 99")
        DatabaseConnection.close_connection()

        with pytest.raises(PersistenceInitError, match="newer than supported"):
            get_connection(db_path)

    def test_repository_open_raises(self, tmp_path):
        repo = SqliteTaskRepository(tmp_path)
        with pytest.raises(PersistenceInitError):
            repo.open()


# ---------------------------------------------------------------------------
# close_connection
# ---------------------------------------------------------------------------


class TestCloseConnection:
    def test_close_closes_connection(self, db_path):
        conn = get_connection(db_path)
        DatabaseConnection.close_connection()
        with pytest.raises(sqlite3.ProgrammingError):
            conn.execute("SELECT 1")

    def test_close_twice_is_safe(self, db_path):
        get_connection(db_path)
        DatabaseConnection.close_connection()
        DatabaseConnection.close_connection()

    def test_reopen_after_close(self, db_path):
        conn1 = get_connection(db_path)
        DatabaseConnection.close_connection()
        conn2 = get_connection(db_path)
        assert conn1 is not conn2
