"""Shared test fixtures and configuration.

Isolates tests from the real user directories: logs go to a temporary
directory and every test gets a fresh database file.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import pytest

from dich.adapters.sqlite.connection import DatabaseConnection
from dich.adapters.sqlite.task_repository import SqliteTaskRepository


class FakeClock:
    """Deterministic clock; each call moves time forward by *step*."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.now = start or datetime(2024, 5, 1, 9, 0, tzinfo=UTC)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------


def _drop_file_handlers() -> None:
    import dich.utils.logger as logger_mod

    logger = logging.getLogger("dich")
    for handler in logger_mod._file_handlers(logger):
        logger.removeHandler(handler)
        handler.close()
    logger_mod._logger = None


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Send the application log into tmp_path and reset the logger singleton."""
    log_dir = tmp_path / "logs"
    _drop_file_handlers()
    with patch("dich.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir
    _drop_file_handlers()


@pytest.fixture(autouse=True)
def reset_connection():
    """Reset DatabaseConnection singleton state around each test."""
    DatabaseConnection.close_connection()
    DatabaseConnection._instance = None
    yield
    DatabaseConnection.close_connection()
    DatabaseConnection._instance = None


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "data" / "tasks.db"


@pytest.fixture
def repo(db_path, clock):
    """A SqliteTaskRepository backed by a temporary database file."""
    return SqliteTaskRepository(db_path, clock=clock)
