"""Tests for the application logger utility."""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

import pytest

import dich.utils.logger as logger_mod
from dich.utils.logger import get_logger, set_level


def _flush(logger: logging.Logger) -> None:
    for handler in logger_mod._file_handlers(logger):
        handler.flush()


def test_get_logger_creates_log_file(tmp_path):
    """Logger creates the log file inside user_log_dir."""
    with patch("dich.utils.logger.user_log_dir", return_value=str(tmp_path)):
        logger = get_logger()

    assert (tmp_path / "dich.log").exists(), "Log file should be created on first use"
    assert isinstance(logger, logging.Logger)


def test_get_logger_returns_singleton():
    assert get_logger() is get_logger()


def test_get_logger_writes_message(tmp_path):
    """Messages written to the logger appear in the log file."""
    with patch("dich.utils.logger.user_log_dir", return_value=str(tmp_path)):
        logger = get_logger()
        logger.info("hello from test")

    _flush(logger)

    assert "hello from test" in (tmp_path / "dich.log").read_text()


def test_get_logger_creates_parent_dirs(tmp_path):
    nested = tmp_path / "a" / "b" / "c"
    with patch("dich.utils.logger.user_log_dir", return_value=str(nested)):
        get_logger()

    assert nested.is_dir()


def test_rotating_handler_configured():
    logger = get_logger()
    [handler] = logger_mod._file_handlers(logger)
    assert isinstance(handler, logging.handlers.RotatingFileHandler)
    assert handler.maxBytes == logger_mod._MAX_BYTES
    assert handler.backupCount == logger_mod._BACKUP_COUNT


def test_does_not_propagate_to_root():
    """Nothing may leak to the terminal the TUI is drawing on."""
    assert get_logger().propagate is False


def test_default_level_is_info():
    assert get_logger().level == logging.INFO


def test_debug_not_written_by_default(tmp_path):
    with patch("dich.utils.logger.user_log_dir", return_value=str(tmp_path)):
        logger = get_logger()
        logger.debug("quiet please")
    _flush(logger)
    assert "quiet please" not in (tmp_path / "dich.log").read_text()


@pytest.mark.parametrize("name", ["debug", "WARNING", "Error"])
def test_set_level(name):
    set_level(name)
    assert get_logger().level == logging.getLevelName(name.upper())


def test_set_level_unknown():
    with pytest.raises(ValueError, match="Unknown log level"):
        set_level("chatty")


def test_file_log_kept_when_other_handlers_attached(tmp_path):
    foreign = logging.NullHandler()
    logging.getLogger("dich").addHandler(foreign)
    try:
        with patch("dich.utils.logger.user_log_dir", return_value=str(tmp_path)):
            logger = get_logger()
            logger.warning("still on disk")
        _flush(logger)

        assert foreign in logger.handlers
        assert len(logger_mod._file_handlers(logger)) == 1
        assert "still on disk" in (tmp_path / "dich.log").read_text()
    finally:
        logging.getLogger("dich").removeHandler(foreign)


def test_file_handler_not_added_twice():
    logger = get_logger()
    logger_mod._logger = None
    assert get_logger() is logger
    assert len(logger_mod._file_handlers(logger)) == 1
