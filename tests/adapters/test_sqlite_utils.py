"""Unit tests for SQLite adapter utility functions."""

from __future__ import annotations

import sqlite3
from datetime import UTC, datetime, timedelta, timezone

from dich.adapters.sqlite.utils import (
    generate_uuid,
    parse_datetime,
    row_to_dict,
    to_iso,
    utc_now,
)


class TestGenerateUuid:
    def test_returns_uuid_format(self):
        result = generate_uuid()
        assert len(result) == 36
        assert len(result.split("-")) == 5

    def test_returns_unique_values(self):
        assert len({generate_uuid() for _ in range(100)}) == 100


class TestUtcNow:
    def test_is_aware_utc(self):
        assert utc_now().utcoffset() == timedelta(0)


class TestToIso:
    def test_always_writes_microseconds(self):
        assert to_iso(datetime(2024, 5, 1, 9, 0, tzinfo=UTC)) == (
            "2024-05-01T09:00:00.000000+00:00"
        )

    def test_converts_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        value = datetime(2024, 5, 1, 11, 0, tzinfo=plus_two)
        assert to_iso(value) == "2024-05-01T09:00:00.000000+00:00"

    def test_naive_is_utc(self):
        assert to_iso(datetime(2024, 5, 1, 9, 0)).endswith("+00:00")

    def test_text_order_matches_time_order(self):
        base = datetime(2024, 5, 1, 9, 0, tzinfo=UTC)
        values = [base, base + timedelta(microseconds=1), base + timedelta(seconds=1)]
        assert sorted(to_iso(v) for v in values) == [to_iso(v) for v in values]


class TestParseDatetime:
    def test_none(self):
        assert parse_datetime(None) is None

    def test_passthrough(self):
        value = datetime(2024, 5, 1, tzinfo=UTC)
        assert parse_datetime(value) is value

    def test_z_suffix(self):
        assert parse_datetime("2024-05-01T09:00:00Z") == datetime(2024, 5, 1, 9, 0, tzinfo=UTC)

    def test_round_trips_stored_form(self):
        value = datetime(2024, 5, 1, 9, 0, 0, 123456, tzinfo=UTC)
        assert parse_datetime(to_iso(value)) == value


class TestRowToDict:
    def test_none(self):
        assert row_to_dict(None) == {}

    def test_row(self):
        conn = sqlite3.connect(":memory:")
        conn.row_factory = sqlite3.Row
        row = conn.execute("SELECT 1 AS a, 'x' AS b").fetchone()
        assert row_to_dict(row) == {"a": 1, "b": "x"}
        conn.close()
