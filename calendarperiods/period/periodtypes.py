"""Period Types and Errors
-----------------------

The closed set of period kinds, their fixed integer ids, and the exceptions
raised while building periods.

Examples:
  >>> PeriodType.parse("Week")
  <PeriodType.WEEK: 'week'>

  >>> PERIOD_IDS[PeriodType.MONTH]
  3
"""

from __future__ import annotations
from enum import Enum
from types import MappingProxyType
from typing import Optional

try:
    from rapidfuzz import fuzz, process
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e

from calendarperiods.period.periodtranslate import translate


class PeriodType(str, Enum):
    """Kinds of period. String values are the public labels."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    RANGE = "range"

    @classmethod
    def labels(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value) -> "PeriodType":
        """
        Convert a label to a PeriodType.

        Accepts an existing PeriodType unchanged. Matching is case-insensitive
        and ignores surrounding whitespace.

        Raises:
            InvalidPeriodType: if the label is not one of day, week, month,
                year, range
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidPeriodType(value)


# Fixed label -> id table. Values are part of the storage format elsewhere.
PERIOD_IDS = MappingProxyType({
    PeriodType.DAY: 1,
    PeriodType.WEEK: 2,
    PeriodType.MONTH: 3,
    PeriodType.YEAR: 4,
    PeriodType.RANGE: 5,
})


# ---- Errors ----

class PeriodError(ValueError):
    """Base class for all period construction errors."""


class InvalidPeriodType(PeriodError):
    """Raised when a period type string is not a known period label."""

    def __init__(self, period_type):
        self.period_type = period_type
        self.valid_types = PeriodType.labels()
        self.suggestion = _closest_label(period_type, self.valid_types)
        message = translate(
            "General_ExceptionInvalidPeriod", period_type, ", ".join(self.valid_types)
        )
        if self.suggestion:
            message = f"{message} (did you mean '{self.suggestion}'?)"
        super().__init__(message)


class InvalidDateRangeExpression(PeriodError):
    """Raised when a range expression is neither lastN/previousN nor 'start,end'."""

    def __init__(self, expression):
        self.expression = expression
        super().__init__(translate("General_ExceptionInvalidDateRange", expression))


class InvalidDate(PeriodError):
    """Raised when a single date string cannot be parsed."""

    def __init__(self, value):
        self.value = value
        super().__init__(translate("General_ExceptionInvalidDate", value))


class InvalidTimezone(PeriodError):
    """Raised when a timezone name is unknown."""

    def __init__(self, name):
        self.name = name
        super().__init__(translate("General_ExceptionInvalidTimezone", name))


class InvalidPeriodLabel(PeriodError, LookupError):
    """Raised by get_id() when a Period class carries no known label.

    This is a programming error in a Period subclass, not bad user input.
    """

    def __init__(self, label):
        self.label = label
        super().__init__(f"Period label {label!r} has no registered id")


def _closest_label(value, labels: list[str], score_cutoff: float = 60) -> Optional[str]:
    """Best fuzzy match for a mistyped label, or None."""
    if not isinstance(value, str) or not value.strip():
        return None
    match = process.extractOne(
        value.strip().lower(), labels, scorer=fuzz.ratio, score_cutoff=score_cutoff
    )
    return match[0] if match else None


__all__ = [
    "PeriodType",
    "PERIOD_IDS",
    "PeriodError",
    "InvalidPeriodType",
    "InvalidDateRangeExpression",
    "InvalidDate",
    "InvalidTimezone",
    "InvalidPeriodLabel",
]
