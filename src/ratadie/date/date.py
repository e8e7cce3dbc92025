from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple

from ratadie import calendar as cal
from ._exceptions import InvalidCalendarDate, InvalidOrdinalDate, InvalidWeekDate


class Month(IntEnum):
    JAN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAY = 5
    JUN = 6
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12


class Weekday(IntEnum):
    MON = 1
    TUE = 2
    WED = 3
    THU = 4
    FRI = 5
    SAT = 6
    SUN = 7


class CalendarDate(NamedTuple):
    year: int
    month: Month
    day: int


class OrdinalDate(NamedTuple):
    year: int
    ordinal_day: int


class WeekDate(NamedTuple):
    week_year: int
    week_number: int
    weekday: Weekday


def _clamp(lo: int, hi: int, n: int) -> int:
    return max(lo, min(hi, n))


# ── enum conversions ────────────────────────────────────────────────────────

def month_to_number(month: Month) -> int:
    return int(month)


def number_to_month(n: int) -> Month:
    """Month for ``n``; values outside 1-12 clamp to JAN or DEC."""
    return Month(_clamp(1, 12, n))


def weekday_to_number(weekday: Weekday) -> int:
    return int(weekday)


def number_to_weekday(n: int) -> Weekday:
    """Weekday for ``n``; values outside 1-7 clamp to MON or SUN."""
    return Weekday(_clamp(1, 7, n))


def month_to_quarter(month: Month) -> int:
    return (int(month) + 2) // 3


def quarter_to_month(quarter: int) -> Month:
    """First month of ``quarter`` (clamped into 1-4)."""
    return Month(_clamp(1, 4, quarter) * 3 - 2)


# ── Date ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True, order=True)
class Date:
    """
    A day in the proleptic Gregorian calendar, stored as its Rata Die.

    Rata Die 1 is 0001-01-01.  Every other shape (calendar date, ordinal date,
    ISO week date) is derived from the single integer, so two dates compare
    and hash by day count alone.

    Construct from parts with the clamping classmethods (``from_calendar_date``,
    ``from_ordinal_date``, ``from_week_date``), which never fail, or with the
    strict ones (``from_calendar_parts``, ``from_ordinal_parts``,
    ``from_week_parts``), which raise a :class:`ValidationError` subclass
    naming the offending parts.
    """

    rata_die: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "rata_die", int(self.rata_die))

    # ── Rata Die ─────────────────────────────────────────────────────────

    @classmethod
    def from_rata_die(cls, rata_die: int) -> Date:
        return cls(rata_die)

    def to_rata_die(self) -> int:
        return self.rata_die

    # ── clamping constructors ────────────────────────────────────────────

    @classmethod
    def from_ordinal_date(cls, year: int, ordinal_day: int) -> Date:
        od = _clamp(1, cal.days_in_year(year), ordinal_day)
        return cls(cal.days_before_year(year) + od)

    @classmethod
    def from_calendar_date(cls, year: int, month: Month, day: int) -> Date:
        m = int(month)
        d = _clamp(1, cal.days_in_month(year, m), day)
        return cls(cal.days_before_year(year) + cal.days_before_month(year, m) + d)

    @classmethod
    def from_week_date(cls, week_year: int, week_number: int, weekday: Weekday) -> Date:
        wn = _clamp(1, cal.weeks_in_year(week_year), week_number)
        return cls(cal.days_before_week_year(week_year) + (wn - 1) * 7 + int(weekday))

    # ── strict constructors ──────────────────────────────────────────────

    @classmethod
    def from_ordinal_parts(cls, year: int, ordinal_day: int) -> Date:
        if not 1 <= ordinal_day <= cal.days_in_year(year):
            raise InvalidOrdinalDate(year, ordinal_day)
        return cls(cal.days_before_year(year) + ordinal_day)

    @classmethod
    def from_calendar_parts(cls, year: int, month_number: int, day: int) -> Date:
        if not (1 <= month_number <= 12 and 1 <= day <= cal.days_in_month(year, month_number)):
            raise InvalidCalendarDate(year, month_number, day)
        return cls.from_calendar_date(year, Month(month_number), day)

    @classmethod
    def from_week_parts(cls, week_year: int, week_number: int, weekday_number: int) -> Date:
        if not (
            1 <= week_number <= cal.weeks_in_year(week_year)
            and 1 <= weekday_number <= 7
        ):
            raise InvalidWeekDate(week_year, week_number, weekday_number)
        return cls.from_week_date(week_year, week_number, Weekday(weekday_number))

    # ── converters ───────────────────────────────────────────────────────

    def to_ordinal_date(self) -> OrdinalDate:
        y = cal.year_of(self.rata_die)
        return OrdinalDate(y, self.rata_die - cal.days_before_year(y))

    def to_calendar_date(self) -> CalendarDate:
        y, od = self.to_ordinal_date()
        m = 1
        while m < 12 and od > cal.days_in_month(y, m):
            od -= cal.days_in_month(y, m)
            m += 1
        return CalendarDate(y, Month(m), od)

    def to_week_date(self) -> WeekDate:
        wdn = cal.weekday_number(self.rata_die)
        wy = cal.year_of(self.rata_die + (4 - wdn))
        week1_day1 = cal.days_before_week_year(wy) + 1
        return WeekDate(wy, 1 + (self.rata_die - week1_day1) // 7, Weekday(wdn))

    # ── accessors ────────────────────────────────────────────────────────

    @property
    def year(self) -> int:
        return cal.year_of(self.rata_die)

    @property
    def month(self) -> Month:
        return self.to_calendar_date().month

    @property
    def month_number(self) -> int:
        return int(self.month)

    @property
    def quarter(self) -> int:
        return month_to_quarter(self.month)

    @property
    def day(self) -> int:
        return self.to_calendar_date().day

    @property
    def ordinal_day(self) -> int:
        return self.to_ordinal_date().ordinal_day

    @property
    def week_year(self) -> int:
        return self.to_week_date().week_year

    @property
    def week_number(self) -> int:
        return self.to_week_date().week_number

    @property
    def weekday(self) -> Weekday:
        return Weekday(self.weekday_number)

    @property
    def weekday_number(self) -> int:
        return cal.weekday_number(self.rata_die)

    # ── ISO 8601 output ──────────────────────────────────────────────────

    def to_iso_string(self) -> str:
        y, m, d = self.to_calendar_date()
        sign = "-" if y < 0 else ""
        return f"{sign}{abs(y):04d}-{int(m):02d}-{d:02d}"

    def __str__(self) -> str:
        return self.to_iso_string()

    def __repr__(self) -> str:
        return f"Date(rata_die={self.rata_die}, iso={self.to_iso_string()!r})"


# ── ordering helpers ────────────────────────────────────────────────────────

def compare(a: Date, b: Date) -> int:
    return (a.rata_die > b.rata_die) - (a.rata_die < b.rata_die)


def is_between(a: Date, b: Date, x: Date) -> bool:
    """True if ``x`` lies in the closed range spanned by ``a`` and ``b``."""
    lo, hi = (a, b) if a <= b else (b, a)
    return lo <= x <= hi


def min_date(a: Date, b: Date) -> Date:
    return a if a <= b else b


def max_date(a: Date, b: Date) -> Date:
    return a if a >= b else b


def clamp(a: Date, b: Date, x: Date) -> Date:
    """``x`` limited to the closed range spanned by ``a`` and ``b``."""
    lo, hi = (a, b) if a <= b else (b, a)
    return min_date(max_date(x, lo), hi)
