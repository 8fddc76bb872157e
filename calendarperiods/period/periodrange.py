"""Date Range Periods
------------------

A Range covers an arbitrary span of days that need not line up with a week,
month or year. It is built from either:

  - a relative window: "lastN" / "previousN" (N defaults to 1), counted in
    units of the period type hint (days when the hint is "range")
  - an explicit range: "2015-03-10,2015-03-12", "2012-01,2012-03",
    "2024-01-01,today"

and always decomposes into Day subperiods.

Window semantics, for an anchor of 2024-03-15:
  - range/last7      -> 2024-03-09 .. 2024-03-15 (anchor included)
  - range/previous7  -> 2024-03-08 .. 2024-03-14 (anchor excluded)
  - month/last2      -> 2024-02-01 .. 2024-03-31 (whole months)
  - week/previous1   -> the ISO week before the one holding the anchor
"""

from __future__ import annotations
from datetime import date, timedelta
from typing import Optional
import logging

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from calendarperiods.period.periodidentity import (
    DEFAULT_DATE_FORMAT,
    Day,
    Month,
    Period,
    Week,
    Year,
    day_range,
)
from calendarperiods.period.periodnormalize import (
    DEFAULT_TIMEZONE,
    get_timezone,
    parse_date,
    parse_date_range,
    parse_relative_window,
    today_in,
)
from calendarperiods.period.periodtranslate import translate
from calendarperiods.period.periodtypes import InvalidDateRangeExpression, PeriodType

logger = logging.getLogger(__name__)


# Largest N accepted in lastN / previousN, per unit
MAX_WINDOW = {
    PeriodType.DAY: 5 * 365,
    PeriodType.WEEK: 10 * 52,
    PeriodType.MONTH: 10 * 12,
    PeriodType.YEAR: 10,
}

_UNIT_PERIODS = {
    PeriodType.DAY: Day,
    PeriodType.WEEK: Week,
    PeriodType.MONTH: Month,
    PeriodType.YEAR: Year,
}


def shift_date(value: date, unit: PeriodType, n: int) -> date:
    """Move value by n units (negative n moves backwards)."""
    if unit == PeriodType.DAY:
        return value + timedelta(days=n)
    if unit == PeriodType.WEEK:
        return value + timedelta(weeks=n)
    if unit == PeriodType.MONTH:
        return value + relativedelta(months=n)
    if unit == PeriodType.YEAR:
        return value + relativedelta(years=n)
    raise ValueError(f"Cannot shift by unit {unit!r}")


def resolve_relative_window(
    keyword: str,
    n: int,
    unit: PeriodType,
    anchor: date,
) -> tuple[date, date]:
    """
    Compute the dates covered by a lastN / previousN window.

    The window is n whole units. For "last" the final unit is the one
    holding the anchor; for "previous" it is the unit before that.

    Args:
        keyword: "last" or "previous"
        n: Number of units, clamped to [1, MAX_WINDOW[unit]]
        unit: DAY, WEEK, MONTH or YEAR
        anchor: Reference date, usually today

    Returns:
        (start, end) dates, start <= end

    Raises:
        InvalidDateRangeExpression: if the window reaches outside the
            supported calendar (before year 1 or after year 9999)

    Example:
        >>> resolve_relative_window("last", 7, PeriodType.DAY, date(2024, 3, 15))
        (datetime.date(2024, 3, 9), datetime.date(2024, 3, 15))
    """
    period_class = _UNIT_PERIODS[unit]
    max_n = MAX_WINDOW[unit]
    if n > max_n:
        logger.debug(f"Capping {keyword}{n} to {max_n} {unit.value}s")
        n = max_n
    n = max(1, n)

    try:
        final = anchor if keyword == "last" else shift_date(anchor, unit, -1)
        first = shift_date(final, unit, -(n - 1))
        return period_class(first).get_date_start(), period_class(final).get_date_end()
    except (ValueError, OverflowError) as e:
        raise InvalidDateRangeExpression(f"{keyword}{n}") from e


class Range(Period):
    """
    A span of whole days given by a relative window or two explicit dates.

    Args:
        period_type_hint: Period label the caller asked for. Sets the unit of
            lastN / previousN windows ("range" means days).
        date_expression: "lastN", "previousN" or "start,end"
        timezone: Timezone for "today" resolution (default: DEFAULT_TIMEZONE)
        anchor: Date that relative windows are computed from (default: today
            in timezone)

    Raises:
        InvalidPeriodType: if period_type_hint is not a known label
        InvalidDateRangeExpression: if date_expression does not parse
        InvalidTimezone: if timezone is unknown

    Example:
        >>> r = Range("range", "2015-03-10,2015-03-12")
        >>> r.to_string()
        ['2015-03-10', '2015-03-11', '2015-03-12']
    """

    period_type = PeriodType.RANGE

    def __init__(
        self,
        period_type_hint,
        date_expression: str,
        timezone: Optional[str] = None,
        anchor=None,
    ):
        self._hint = PeriodType.parse(period_type_hint)
        self._timezone = timezone or DEFAULT_TIMEZONE
        get_timezone(self._timezone)
        self._anchor = (
            parse_date(anchor, self._timezone) if anchor is not None else today_in(self._timezone)
        )
        self._expression = date_expression

        start, end = self._resolve(date_expression)
        if start > end:
            logger.debug(f"Swapping reversed range bounds in {date_expression!r}")
            start, end = end, start
        self._date_start = start
        self._date_end = end
        super().__init__(start)

    def _resolve(self, expression) -> tuple[date, date]:
        window = parse_relative_window(expression)
        if window is not None:
            keyword, n = window
            unit = PeriodType.DAY if self._hint == PeriodType.RANGE else self._hint
            logger.debug(f"Resolving {expression!r} as {n} {unit.value}(s) around {self._anchor}")
            return resolve_relative_window(keyword, n, unit, self._anchor)

        bounds = parse_date_range(expression, self._timezone)
        if bounds is not None:
            return bounds

        raise InvalidDateRangeExpression(expression)

    # ---- Accessors ----

    @property
    def date_start(self) -> date:
        return self._date_start

    @property
    def date_end(self) -> date:
        return self._date_end

    @property
    def expression(self) -> str:
        return self._expression

    @property
    def period_type_hint(self) -> PeriodType:
        return self._hint

    @property
    def timezone(self) -> str:
        return self._timezone

    @property
    def anchor(self) -> date:
        return self._anchor

    def _generate(self) -> list[Period]:
        return day_range(self._date_start, self._date_end)

    # ---- Rendering ----

    def get_pretty_string(self) -> str:
        return translate(
            "General_DateRangeFromTo",
            self.get_date_start().strftime(DEFAULT_DATE_FORMAT),
            self.get_date_end().strftime(DEFAULT_DATE_FORMAT),
        )

    def get_localized_short_string(self) -> str:
        # "Mar 9 - Mar 15, 2024", or with both years when they differ
        start, end = self.get_date_start(), self.get_date_end()
        start_text = f"{start.strftime('%b')} {start.day}"
        if start.year != end.year:
            start_text = f"{start_text}, {start.year}"
        end_text = f"{end.strftime('%b')} {end.day}, {end.year}"
        return translate("General_DateRangeInPeriodList", start_text, end_text)

    def get_localized_long_string(self) -> str:
        start, end = self.get_date_start(), self.get_date_end()
        return translate(
            "General_DateRangeFromTo",
            f"{start.strftime('%B')} {start.day}, {start.year}",
            f"{end.strftime('%B')} {end.day}, {end.year}",
        )


__all__ = [
    "MAX_WINDOW",
    "Range",
    "resolve_relative_window",
    "shift_date",
]
