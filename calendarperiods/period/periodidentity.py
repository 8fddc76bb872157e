"""Calendar Periods
----------------

Period objects for calendar-aligned spans: Day, Week, Month and Year.

Every period is anchored on a reference date and decomposes lazily into
smaller periods:

  - Year  -> 12 Months
  - Month -> 28-31 Days
  - Week  -> 7 Days (ISO week, Monday start, isoweek library)
  - Day   -> nothing (leaf)

Subperiods are generated on first access and frozen afterwards. Boundary
queries (get_date_start / get_date_end) always descend to the Day level.

Example:
  >>> year = Year(date(2024, 6, 15))
  >>> year.get_number_of_subperiods()
  12
  >>> year.get_range_string()
  '2024-01-01,2024-12-31'
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import ClassVar, Optional
import calendar

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

try:
    from isoweek import Week as IsoWeek
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from calendarperiods.period.periodnormalize import parse_date
from calendarperiods.period.periodtranslate import translate
from calendarperiods.period.periodtypes import PERIOD_IDS, PeriodType, InvalidPeriodLabel


DEFAULT_DATE_FORMAT = "%Y-%m-%d"


class Period(ABC):
    """
    A span of calendar time that knows its boundaries and its subperiods.

    Subclasses set ``period_type`` and implement ``_generate()`` to return
    their direct children in chronological order. Every public accessor goes
    through ``_ensure_generated()``, so generation runs at most once per
    instance whatever order the accessors are called in.
    """

    period_type: ClassVar[Optional[PeriodType]] = None

    def __init__(self, reference_date):
        self._date: date = parse_date(reference_date)
        self._subperiods: tuple[Period, ...] = ()
        self._generated = False
        self._pending: list[Period] = []

    # ---- Generation ----

    @abstractmethod
    def _generate(self) -> list["Period"]:
        """Return the direct subperiods, earliest first."""

    def _add_subperiod(self, period: "Period") -> None:
        if self._generated:
            raise RuntimeError(f"{self!r} is frozen; subperiods cannot be added after generation")
        self._pending.append(period)

    def _ensure_generated(self) -> None:
        if self._generated:
            return
        for period in self._generate():
            self._add_subperiod(period)
        self._subperiods = tuple(self._pending)
        self._pending = []
        self._generated = True

    # ---- Structure ----

    def get_subperiods(self) -> tuple["Period", ...]:
        """
        Periods that together make up this one.

        For a year this is 12 months, for a month 28-31 days, for a day
        an empty tuple.
        """
        self._ensure_generated()
        return self._subperiods

    def get_number_of_subperiods(self) -> int:
        self._ensure_generated()
        return len(self._subperiods)

    def get_date(self) -> date:
        """The reference date this period was built from."""
        return self._date

    def get_date_start(self) -> date:
        """First day covered, found by descending into the first subperiod down to a Day."""
        current = self
        while current.get_number_of_subperiods() > 0:
            current = current.get_subperiods()[0]
        return current.get_date()

    def get_date_end(self) -> date:
        """Last day covered, found by descending into the last subperiod down to a Day."""
        current = self
        while current.get_number_of_subperiods() > 0:
            current = current.get_subperiods()[-1]
        return current.get_date()

    # ---- Identity ----

    def get_label(self) -> str:
        """Public label: "day", "week", "month", "year" or "range"."""
        if self.period_type is None:
            raise InvalidPeriodLabel(None)
        return self.period_type.value

    def get_id(self) -> int:
        """
        Integer code for this kind of period.

        Raises:
            InvalidPeriodLabel: if the class has no period type registered
                in PERIOD_IDS
        """
        try:
            return PERIOD_IDS[self.period_type]
        except KeyError:
            raise InvalidPeriodLabel(self.period_type) from None

    # ---- Rendering ----

    def to_string(self, fmt: str = DEFAULT_DATE_FORMAT) -> list[str]:
        """
        Every day of the period, formatted with fmt.

        Nested subperiods are flattened, so a Year yields 365 or 366 strings.
        A Day yields a single-element list holding its own date.
        """
        self._ensure_generated()
        if not self._subperiods:
            return [self._date.strftime(fmt)]
        strings = []
        for period in self._subperiods:
            strings.extend(period.to_string(fmt))
        return strings

    def get_range_string(self) -> str:
        """Succinct "YYYY-MM-DD,YYYY-MM-DD" form, e.g. '2012-01-01,2012-01-31'."""
        return (
            f"{self.get_date_start().strftime(DEFAULT_DATE_FORMAT)},"
            f"{self.get_date_end().strftime(DEFAULT_DATE_FORMAT)}"
        )

    @abstractmethod
    def get_pretty_string(self) -> str:
        """Plain description, e.g. 'From 2024-03-18 to 2024-03-24'."""

    @abstractmethod
    def get_localized_short_string(self) -> str:
        """Short description in the current translation."""

    @abstractmethod
    def get_localized_long_string(self) -> str:
        """Long description in the current translation."""

    def __str__(self) -> str:
        return ",".join(self.to_string())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_range_string()!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return (
            self.period_type == other.period_type
            and self.get_date_start() == other.get_date_start()
            and self.get_date_end() == other.get_date_end()
        )

    def __hash__(self) -> int:
        return hash((self.period_type, self.get_date_start(), self.get_date_end()))


# ---- Helpers ----

def day_range(start: date, end: date) -> list["Day"]:
    """One Day per date from start to end inclusive."""
    days = []
    current = start
    while current <= end:
        days.append(Day(current))
        current += timedelta(days=1)
    return days


def _short_day(value: date) -> str:
    return f"{value.strftime('%b')} {value.day}"


# ---- Variants ----

class Day(Period):
    """A single calendar day. The leaf of every period tree."""

    period_type = PeriodType.DAY

    def _generate(self) -> list[Period]:
        return []

    def get_pretty_string(self) -> str:
        return self._date.strftime(DEFAULT_DATE_FORMAT)

    def get_localized_short_string(self) -> str:
        # "Tue 5 Mar"
        return f"{self._date.strftime('%a')} {self._date.day} {self._date.strftime('%b')}"

    def get_localized_long_string(self) -> str:
        # "Tuesday 5 March 2024"
        return f"{self._date.strftime('%A')} {self._date.day} {self._date.strftime('%B %Y')}"


class Week(Period):
    """The ISO week (Monday to Sunday) containing the reference date."""

    period_type = PeriodType.WEEK

    @property
    def iso_week(self) -> IsoWeek:
        return IsoWeek.withdate(self._date)

    def _generate(self) -> list[Period]:
        return [Day(day) for day in self.iso_week.days()]

    def get_pretty_string(self) -> str:
        return translate(
            "General_DateRangeFromTo",
            self.get_date_start().strftime(DEFAULT_DATE_FORMAT),
            self.get_date_end().strftime(DEFAULT_DATE_FORMAT),
        )

    def get_localized_short_string(self) -> str:
        iso_week = self.iso_week
        return translate("General_Week", iso_week.week, iso_week.year)

    def get_localized_long_string(self) -> str:
        days = translate(
            "General_DateRangeInPeriodList",
            _short_day(self.get_date_start()),
            _short_day(self.get_date_end()),
        )
        return f"{self.get_localized_short_string()} ({days})"


class Month(Period):
    """The calendar month containing the reference date."""

    period_type = PeriodType.MONTH

    def _generate(self) -> list[Period]:
        year, month = self._date.year, self._date.month
        last_day = calendar.monthrange(year, month)[1]
        return day_range(date(year, month, 1), date(year, month, last_day))

    def get_pretty_string(self) -> str:
        return self._date.strftime("%Y-%m")

    def get_localized_short_string(self) -> str:
        return self._date.strftime("%b")

    def get_localized_long_string(self) -> str:
        return self._date.strftime("%B %Y")


class Year(Period):
    """The calendar year containing the reference date."""

    period_type = PeriodType.YEAR

    def _generate(self) -> list[Period]:
        january = date(self._date.year, 1, 1)
        return [Month(january + relativedelta(months=offset)) for offset in range(12)]

    def get_pretty_string(self) -> str:
        return str(self._date.year)

    def get_localized_short_string(self) -> str:
        return str(self._date.year)

    def get_localized_long_string(self) -> str:
        return str(self._date.year)


__all__ = [
    "DEFAULT_DATE_FORMAT",
    "Period",
    "Day",
    "Week",
    "Month",
    "Year",
    "day_range",
]
