"""Period construction API.

Public entry points for building Period objects from a period type and a
date or date-range expression.
"""

from datetime import date as Date
from typing import Optional
import logging

from calendarperiods.period.periodidentity import Day, Month, Period, Week, Year
from calendarperiods.period.periodnormalize import (
    is_range_expression,
    parse_date,
    resolve_date_keyword,
    today_in,
)
from calendarperiods.period.periodrange import Range
from calendarperiods.period.periodtypes import (
    InvalidDateRangeExpression,
    InvalidPeriodType,
    PeriodType,
)

logger = logging.getLogger(__name__)


_PERIOD_CLASSES = {
    PeriodType.DAY: Day,
    PeriodType.WEEK: Week,
    PeriodType.MONTH: Month,
    PeriodType.YEAR: Year,
}


def factory(
    period_type,
    date,
    *,
    timezone: Optional[str] = None,
) -> Period:
    """
    Create a Period from a period type and a date.

    Range-shaped date strings ("last7", "previous2", "2024-01-01,2024-01-31")
    always produce a Range, whatever period type is given; the period type
    then sets the unit of lastN / previousN windows.

    Args:
        period_type: "day", "week", "month", "year", "range" or a PeriodType
        date: datetime.date, datetime.datetime, a date string, a date keyword
            ("today", "yesterday", ...) or a range expression
        timezone: Timezone used for "today" in keywords and relative windows
            (default: DEFAULT_TIMEZONE)

    Returns:
        Day, Week, Month, Year or Range

    Raises:
        InvalidPeriodType: if period_type is not a known label
        InvalidDateRangeExpression: if a range cannot be parsed
        InvalidDate: if a single date cannot be parsed

    Examples:
        >>> factory("month", "2024-02-10").get_range_string()
        '2024-02-01,2024-02-29'

        >>> factory("day", "2015-03-10,2015-03-12").get_label()
        'range'
    """
    kind = PeriodType.parse(period_type)

    if isinstance(date, str) and (kind == PeriodType.RANGE or is_multiple_period(date, kind)):
        logger.debug(f"Building range for period={kind.value} date={date!r}")
        return Range(kind, date, timezone)

    if kind == PeriodType.RANGE:
        raise InvalidDateRangeExpression(date)

    return _PERIOD_CLASSES[kind](parse_date(date, timezone))


def is_multiple_period(date_string, period_type) -> bool:
    """
    True if a non-range period type was given a range-shaped date string.

    Examples:
        >>> is_multiple_period("last7", "day")
        True

        >>> is_multiple_period("last7", "range")
        False

        >>> is_multiple_period("2024-01-05", "week")
        False
    """
    try:
        is_range_type = PeriodType.parse(period_type) == PeriodType.RANGE
    except InvalidPeriodType:
        is_range_type = False
    return (
        isinstance(date_string, str)
        and not is_range_type
        and is_range_expression(date_string)
    )


def make_period_from_query_params(
    timezone: Optional[str],
    period,
    date,
) -> Period:
    """
    Create a Period from raw request values.

    Date keywords ("now", "today", "yesterday", "yesterdaySameTime") are
    resolved to a date in timezone before any Period is built. For
    period "range" the date is a range expression anchored at today in
    timezone.

    Args:
        timezone: Timezone name; empty means UTC
        period: "day", "week", "month", "year" or "range"
        date: Date, date string, keyword or range expression

    Returns:
        Period instance

    Examples:
        >>> make_period_from_query_params("", "week", "2024-03-20").get_range_string()
        '2024-03-18,2024-03-24'

        >>> p = make_period_from_query_params("Europe/Paris", "range", "last7")
        >>> p.get_number_of_subperiods()
        7
    """
    if not timezone:
        timezone = "UTC"

    kind = PeriodType.parse(period)

    if kind == PeriodType.RANGE:
        return Range(kind, date, timezone, today_in(timezone))

    if not isinstance(date, Date):
        keyword_date = resolve_date_keyword(date, timezone)
        if keyword_date is not None:
            logger.debug(f"Resolved date keyword {date!r} to {keyword_date} in {timezone}")
            date = keyword_date

    return factory(kind, date, timezone=timezone)


__all__ = [
    "factory",
    "is_multiple_period",
    "make_period_from_query_params",
]
