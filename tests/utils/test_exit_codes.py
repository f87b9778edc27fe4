"""Tests for exit codes."""

from dich.utils import exit_codes


def test_codes_are_distinct_and_nonzero():
    codes = [exit_codes.ERROR_INVALID_ARGS, exit_codes.ERROR_PERSISTENCE]
    assert len(set(codes)) == len(codes)
    assert 0 not in codes


def test_persistence_code():
    assert exit_codes.ERROR_PERSISTENCE == 3
