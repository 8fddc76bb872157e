"""Calendar Periods - Calendar period arithmetic

Public API for building day, week, month, year and range periods from a
period type and a date or date-range expression.

Usage:
    from calendarperiods import factory, make_period_from_query_params

    # Build a period from a type and a date
    month = factory("month", "2024-02-10")
    month.get_range_string()           # Returns: '2024-02-01,2024-02-29'

    # Range-shaped dates always give a Range
    last_week = factory("day", "last7")
    last_week.get_number_of_subperiods()  # Returns: 7

    # Resolve request values, including "today" / "yesterday"
    period = make_period_from_query_params("Europe/Paris", "week", "today")

See calendarperiods/period/__init__.py for the full period API.
"""

__version__ = "0.0.1"

# ============================================================================
# Period API
# ============================================================================

from .period.periodapi import (
    factory,                        # Build a Period from type + date
    is_multiple_period,             # Detect range-shaped dates
    make_period_from_query_params,  # Build a Period from request values
)

from .period.periodidentity import (
    Period,
    Day,
    Week,
    Month,
    Year,
)

from .period.periodrange import Range

from .period.periodtranslate import set_translator

from .period.periodtypes import (
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
    # Construction
    "factory",
    "is_multiple_period",
    "make_period_from_query_params",
    # Period classes
    "Period",
    "Day",
    "Week",
    "Month",
    "Year",
    "Range",
    # Localization
    "set_translator",
    # Types and errors
    "PERIOD_IDS",
    "PeriodType",
    "PeriodError",
    "InvalidPeriodType",
    "InvalidDateRangeExpression",
    "InvalidDate",
    "InvalidTimezone",
    "InvalidPeriodLabel",
]
