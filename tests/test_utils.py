"""Tests for shared helpers."""

from datetime import datetime, timezone

import pytest

from travel_console.utils import (
    format_currency,
    matches_filters,
    matches_query,
    parse_date,
    sort_records,
    time_ago,
)

NOW = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)


class TestParseDate:
    @pytest.mark.parametrize(
        "value", ["2026-10-18T08:15:00Z", "2026-10-18", "10/18/2026", "10/18/26"]
    )
    def test_formats(self, value):
        parsed = parse_date(value)
        assert (parsed.year, parsed.month, parsed.day) == (2026, 10, 18)

    @pytest.mark.parametrize("value", [None, "", "not a date"])
    def test_invalid(self, value):
        assert parse_date(value) is None


class TestTimeAgo:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2026-10-18T11:59:30Z", "30s ago"),
            ("2026-10-18T11:15:00Z", "45m ago"),
            ("2026-10-18T09:00:00Z", "3h ago"),
            ("2026-10-06T12:00:00Z", "12d ago"),
            ("2026-03-05T12:00:00Z", "05 Mar"),
            ("2026-10-18T13:00:00Z", "0s ago"),
        ],
    )
    def test_labels(self, value, expected):
        assert time_ago(value, NOW) == expected

    def test_empty(self):
        assert time_ago(None, NOW) == ""


def test_format_currency():
    assert format_currency(1234.5, "USD") == "USD 1,234.50"


class TestMatching:
    RECORD = {"name": "Babylon Oil", "status": "Active", "value": 10, "note": None}

    def test_query_is_case_insensitive(self):
        assert matches_query(self.RECORD, "  OIL ", ["name"]) is True
        assert matches_query(self.RECORD, "oil", ["status"]) is False
        assert matches_query(self.RECORD, "", ["name"]) is True

    def test_filters_ignore_empty_values(self):
        assert matches_filters(self.RECORD, {"status": "Active", "other": ""}) is True
        assert matches_filters(self.RECORD, {"status": "Draft"}) is False
        assert matches_filters(self.RECORD, None) is True


class TestSortRecords:
    ROWS = [{"n": "b"}, {"n": None}, {"n": "A"}, {"n": "c"}]

    def test_ascending_case_insensitive_nones_last(self):
        assert [r["n"] for r in sort_records(self.ROWS, "n")] == ["A", "b", "c", None]

    def test_descending_keeps_nones_last(self):
        assert [r["n"] for r in sort_records(self.ROWS, "n", "desc")] == ["c", "b", "A", None]

    def test_no_key_keeps_order(self):
        assert sort_records(self.ROWS, None) == self.ROWS
