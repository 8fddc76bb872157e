"""Period Input Normalization
---------------------------

Parsing helpers that turn raw date, keyword, timezone and range strings into
datetime.date values.

Examples:
  >>> parse_date("2024-03-05")
  datetime.date(2024, 3, 5)

  >>> parse_relative_window("last7")
  ('last', 7)

  >>> parse_date_range("2012-01,2012-03")
  (datetime.date(2012, 1, 1), datetime.date(2012, 3, 1))
"""

from __future__ import annotations
from datetime import date, datetime, timedelta, tzinfo
from typing import Optional
import os
import re

try:
    from dateutil import parser as dateutil_parser
    from dateutil import tz
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from calendarperiods.period.periodtypes import InvalidDate, InvalidTimezone


DEFAULT_TIMEZONE = os.environ.get("CALENDARPERIODS_DEFAULT_TIMEZONE", "UTC")

RELATIVE_WINDOW_PATTERN = re.compile(r"(last|previous)([0-9]*)", re.IGNORECASE)

_BOUND = r"\d{4}-\d{1,2}(?:-\d{1,2})?|today|now|yesterday|yesterdaysametime"
DATE_RANGE_PATTERN = re.compile(
    rf"\s*({_BOUND})\s*,\s*({_BOUND})\s*", re.IGNORECASE
)

TODAY_KEYWORDS = ("now", "today")
YESTERDAY_KEYWORDS = ("yesterday", "yesterdaysametime")

# Missing month or day fall back to 1. The two defaults differ only in year
# so that a string without a year can be detected and rejected.
_PARSE_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 1, 1))


# ---- Timezones ----

def get_timezone(name: Optional[str] = None) -> tzinfo:
    """
    Look up a timezone by name.

    Args:
        name: IANA name such as "Europe/Paris", or "UTC". Empty or None
            means DEFAULT_TIMEZONE.

    Returns:
        tzinfo instance

    Raises:
        InvalidTimezone: if dateutil does not know the name
    """
    if not name:
        name = DEFAULT_TIMEZONE
    zone = tz.gettz(name)
    if zone is None:
        raise InvalidTimezone(name)
    return zone


def today_in(timezone: Optional[str] = None) -> date:
    """Current calendar date in the given timezone."""
    return datetime.now(get_timezone(timezone)).date()


# ---- Single dates ----

def resolve_date_keyword(text: str, timezone: Optional[str] = None) -> Optional[date]:
    """
    Resolve an informal date keyword to a date.

    "now" and "today" give today's date in timezone, "yesterday" and
    "yesterdaySameTime" give the day before. Anything else returns None.
    """
    if not isinstance(text, str):
        return None
    keyword = text.strip().lower()
    if keyword in TODAY_KEYWORDS:
        return today_in(timezone)
    if keyword in YESTERDAY_KEYWORDS:
        return today_in(timezone) - timedelta(days=1)
    return None


def parse_date(value, timezone: Optional[str] = None) -> date:
    """
    Convert a date-ish value to a datetime.date.

    Accepts:
      - datetime.date (returned unchanged)
      - datetime.datetime (aware values are first converted to timezone
        when one is given)
      - date keywords: now, today, yesterday, yesterdaySameTime
      - date strings understood by dateutil ("2024-03-05", "2024-03",
        "5 March 2024", "2024-03-05T10:00:00+02:00"). The year must be
        present; "March 5" or "15" are rejected.

    Raises:
        InvalidDate: if the value cannot be read as a date

    Examples:
        >>> parse_date("2024-03")
        datetime.date(2024, 3, 1)

        >>> parse_date(datetime(2024, 3, 5, 22, 30))
        datetime.date(2024, 3, 5)
    """
    if isinstance(value, datetime):
        if timezone and value.tzinfo is not None:
            value = value.astimezone(get_timezone(timezone))
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidDate(value)

    keyword_date = resolve_date_keyword(value, timezone)
    if keyword_date is not None:
        return keyword_date

    try:
        parsed, check = (
            dateutil_parser.parse(value.strip(), default=default) for default in _PARSE_DEFAULTS
        )
    except (ValueError, OverflowError) as e:
        raise InvalidDate(value) from e
    if parsed.year != check.year:
        raise InvalidDate(value)
    return parse_date(parsed, timezone)


# ---- Ranges ----

def parse_relative_window(text) -> Optional[tuple[str, int]]:
    """
    Match a lastN / previousN token.

    Returns:
        (keyword, n) with keyword lowercased and n defaulting to 1, or None
        when text is not a relative window

    Examples:
        >>> parse_relative_window("previous")
        ('previous', 1)

        >>> parse_relative_window("Last30")
        ('last', 30)

        >>> parse_relative_window("last 7") is None
        True
    """
    if not isinstance(text, str):
        return None
    match = RELATIVE_WINDOW_PATTERN.fullmatch(text)
    if not match:
        return None
    keyword, digits = match.groups()
    return keyword.lower(), int(digits) if digits else 1


def _parse_bound(text: str, timezone: Optional[str]) -> Optional[date]:
    keyword_date = resolve_date_keyword(text, timezone)
    if keyword_date is not None:
        return keyword_date
    parts = [int(part) for part in text.split("-")]
    if len(parts) == 2:
        parts.append(1)
    try:
        return date(*parts)
    except ValueError:
        return None


def parse_date_range(text, timezone: Optional[str] = None) -> Optional[tuple[date, date]]:
    """
    Parse an explicit "start,end" range.

    Each bound is YYYY-MM-DD, YYYY-MM (first day of that month), or one of
    the date keywords. Bounds are returned in the order given; callers decide
    what to do with reversed ranges.

    Returns:
        (start, end) dates, or None if text is not an explicit range or a
        bound is not a real calendar date

    Examples:
        >>> parse_date_range("2015-03-10,2015-03-12")
        (datetime.date(2015, 3, 10), datetime.date(2015, 3, 12))

        >>> parse_date_range("2015-02-30,2015-03-12") is None
        True
    """
    if not isinstance(text, str):
        return None
    match = DATE_RANGE_PATTERN.fullmatch(text)
    if not match:
        return None
    start = _parse_bound(match.group(1), timezone)
    end = _parse_bound(match.group(2), timezone)
    if start is None or end is None:
        return None
    return start, end


def is_range_expression(text) -> bool:
    """True if text is a relative window or an explicit two-date range."""
    return parse_relative_window(text) is not None or parse_date_range(text) is not None


__all__ = [
    "DEFAULT_TIMEZONE",
    "RELATIVE_WINDOW_PATTERN",
    "DATE_RANGE_PATTERN",
    "get_timezone",
    "today_in",
    "resolve_date_keyword",
    "parse_date",
    "parse_relative_window",
    "parse_date_range",
    "is_range_expression",
]
