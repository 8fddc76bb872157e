"""Tests for period input normalization helpers."""

import pytest
from datetime import date, datetime, timezone

from calendarperiods.period.periodnormalize import (
    get_timezone,
    is_range_expression,
    parse_date,
    parse_date_range,
    parse_relative_window,
    resolve_date_keyword,
)
from calendarperiods.period.periodtypes import InvalidDate, InvalidTimezone


class TestParseDate:
    """Test single date parsing"""

    def test_parse_iso_date(self):
        assert parse_date("2024-03-05") == date(2024, 3, 5)

    def test_parse_year_month(self):
        """Missing day falls back to the first of the month"""
        assert parse_date("2024-03") == date(2024, 3, 1)

    def test_parse_written_date(self):
        assert parse_date("5 March 2024") == date(2024, 3, 5)

    def test_parse_iso_datetime(self):
        assert parse_date("2024-03-05T10:00:00") == date(2024, 3, 5)

    def test_parse_date_passthrough(self):
        value = date(2024, 3, 5)
        assert parse_date(value) is value

    def test_parse_naive_datetime(self):
        assert parse_date(datetime(2024, 3, 5, 23, 59)) == date(2024, 3, 5)

    def test_parse_aware_datetime_converted(self):
        moment = datetime(2024, 3, 5, 23, 30, tzinfo=timezone.utc)
        assert parse_date(moment, "Asia/Tokyo") == date(2024, 3, 6)
        assert parse_date(moment, "America/New_York") == date(2024, 3, 5)

    def test_parse_aware_string_converted(self):
        assert parse_date("2024-03-05T23:30:00+00:00", "Asia/Tokyo") == date(2024, 3, 6)

    @pytest.mark.parametrize("value", ["", "   ", "not a date", None, 42, "15", "March 5", "7"])
    def test_parse_invalid(self, value):
        with pytest.raises(InvalidDate):
            parse_date(value)


class TestDateKeywords:
    """Test today / yesterday resolution"""

    def test_keywords(self, frozen_today):
        assert resolve_date_keyword("today") == frozen_today
        assert resolve_date_keyword("now") == frozen_today
        assert resolve_date_keyword("yesterday") == date(2024, 3, 14)
        assert resolve_date_keyword("yesterdaySameTime") == date(2024, 3, 14)
        assert resolve_date_keyword(" Today ") == frozen_today

    def test_non_keywords(self):
        assert resolve_date_keyword("2024-03-05") is None
        assert resolve_date_keyword("tomorrow") is None
        assert resolve_date_keyword(None) is None

    def test_parse_date_uses_keywords(self, frozen_today):
        assert parse_date("today") == frozen_today


class TestRelativeWindow:
    """Test lastN / previousN token parsing"""

    @pytest.mark.parametrize("text,expected", [
        ("last7", ("last", 7)),
        ("previous30", ("previous", 30)),
        ("last", ("last", 1)),
        ("previous", ("previous", 1)),
        ("Last10", ("last", 10)),
        ("last0", ("last", 0)),
    ])
    def test_valid_tokens(self, text, expected):
        assert parse_relative_window(text) == expected

    @pytest.mark.parametrize("text", [
        "last 7", "lastweek", "next7", "7last", "", None,
        "last7\n",  # trailing newline
        "previous\n",
    ])
    def test_invalid_tokens(self, text):
        assert parse_relative_window(text) is None


class TestDateRange:
    """Test explicit range parsing"""

    def test_full_dates(self):
        assert parse_date_range("2015-03-10,2015-03-12") == (date(2015, 3, 10), date(2015, 3, 12))

    def test_order_preserved(self):
        assert parse_date_range("2015-03-12,2015-03-10") == (date(2015, 3, 12), date(2015, 3, 10))

    def test_year_month(self):
        assert parse_date_range("2012-01,2012-03") == (date(2012, 1, 1), date(2012, 3, 1))

    def test_single_digit_parts(self):
        assert parse_date_range("2015-3-1,2015-3-9") == (date(2015, 3, 1), date(2015, 3, 9))

    def test_keyword_bound(self, frozen_today):
        assert parse_date_range("2024-01-01,today") == (date(2024, 1, 1), frozen_today)

    @pytest.mark.parametrize("text", [
        "2015-03-10",
        "2015-03-10,",
        "2015-03-10,2015-03-12,2015-03-14",
        "2015-13-01,2015-12-01",
        "last7",
        None,
    ])
    def test_not_a_range(self, text):
        assert parse_date_range(text) is None

    def test_is_range_expression(self):
        assert is_range_expression("last7")
        assert is_range_expression("2015-03-10,2015-03-12")
        assert not is_range_expression("2015-03-10")


class TestTimezones:
    """Test timezone lookup"""

    def test_known_timezones(self):
        assert get_timezone("UTC") is not None
        assert get_timezone("Europe/Paris") is not None

    def test_empty_uses_default(self):
        assert get_timezone("") == get_timezone("UTC")
        assert get_timezone(None) == get_timezone("UTC")

    def test_unknown_timezone(self):
        with pytest.raises(InvalidTimezone) as excinfo:
            get_timezone("Mars/Olympus")
        assert excinfo.value.name == "Mars/Olympus"
