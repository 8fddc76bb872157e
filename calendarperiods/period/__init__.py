"""Period module for calendar period arithmetic.

This module builds Period objects (day, week, month, year, range) from a
period type and a date or date-range expression. Each period knows its first
and last day and decomposes lazily into smaller periods.

Public API:
    factory(period_type, date, timezone=None) -> Period
        Build a period; range-shaped dates always give a Range

    is_multiple_period(date_string, period_type) -> bool
        Detect range-shaped dates given with a non-range period type

    make_period_from_query_params(timezone, period, date) -> Period
        Build a period from raw request values, resolving "today" etc.

Examples:
    >>> from calendarperiods.period import factory
    >>>
    >>> # Calendar month, decomposed into days
    >>> month = factory("month", "2024-02-10")
    >>> month.get_number_of_subperiods()
    29
    >>> month.get_range_string()
    '2024-02-01,2024-02-29'
    >>>
    >>> # ISO week
    >>> factory("week", "2024-03-20").get_localized_short_string()
    'Week 12, 2024'
    >>>
    >>> # Explicit range
    >>> factory("range", "2015-03-10,2015-03-12").to_string()
    ['2015-03-10', '2015-03-11', '2015-03-12']
"""

from calendarperiods.period.periodapi import (
    factory,
    is_multiple_period,
    make_period_from_query_params,
)
from calendarperiods.period.periodidentity import Period, Day, Week, Month, Year
from calendarperiods.period.periodrange import Range
from calendarperiods.period.periodtranslate import set_translator
from calendarperiods.period.periodtypes import (
    PERIOD_IDS,
    PeriodType,
    PeriodError,
    InvalidPeriodType,
    InvalidDateRangeExpression,
    InvalidDate,
    InvalidTimezone,
    InvalidPeriodLabel,
)

__all__ = [
    "factory",
    "is_multiple_period",
    "make_period_from_query_params",
    "Period",
    "Day",
    "Week",
    "Month",
    "Year",
    "Range",
    "set_translator",
    "PERIOD_IDS",
    "PeriodType",
    "PeriodError",
    "InvalidPeriodType",
    "InvalidDateRangeExpression",
    "InvalidDate",
    "InvalidTimezone",
    "InvalidPeriodLabel",
]
