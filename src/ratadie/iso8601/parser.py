from __future__ import annotations

import logging
from typing import Callable, NamedTuple, Optional, Union

from ratadie.date import Date, ParseError

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")


class CalendarParts(NamedTuple):
    year: int
    month: int
    day: int

    def to_date(self) -> Date:
        return Date.from_calendar_parts(self.year, self.month, self.day)


class OrdinalParts(NamedTuple):
    year: int
    ordinal_day: int

    def to_date(self) -> Date:
        return Date.from_ordinal_parts(self.year, self.ordinal_day)


class WeekParts(NamedTuple):
    week_year: int
    week_number: int
    weekday: int

    def to_date(self) -> Date:
        return Date.from_week_parts(self.week_year, self.week_number, self.weekday)


DateParts = Union[CalendarParts, OrdinalParts, WeekParts]


class _Parser:
    """
    Backtracking recursive-descent parser over a string cursor.

    Each alternative either returns parts with the cursor at end of input or
    returns None; ``_attempt`` restores the cursor on failure so the next
    alternative starts from the same place.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    # ── primitives ───────────────────────────────────────────────────────

    def _at_end(self) -> bool:
        return self._pos == len(self._text)

    def _token(self, s: str) -> bool:
        if self._text.startswith(s, self._pos):
            self._pos += len(s)
            return True
        return False

    def _int(self, width: int) -> Optional[int]:
        chunk = self._text[self._pos:self._pos + width]
        if len(chunk) != width or not _DIGITS.issuperset(chunk):
            return None
        self._pos += width
        return int(chunk)

    def _attempt(self, alternative: Callable[[int], Optional[DateParts]], year: int) -> Optional[DateParts]:
        saved = self._pos
        parts = alternative(year)
        if parts is not None and self._at_end():
            return parts
        self._pos = saved
        return None

    # ── year ─────────────────────────────────────────────────────────────

    def _year(self) -> Optional[int]:
        sign = 1
        if self._token("-"):
            sign = -1
        else:
            self._token("+")
        year = self._int(4)
        return None if year is None else sign * year

    # ── extended format ──────────────────────────────────────────────────

    def _extended_calendar(self, year: int) -> Optional[DateParts]:
        if not self._token("-"):
            return None
        month = self._int(2)
        if month is None:
            return None
        if self._token("-"):
            day = self._int(2)
            return None if day is None else CalendarParts(year, month, day)
        return CalendarParts(year, month, 1)

    def _extended_ordinal(self, year: int) -> Optional[DateParts]:
        if not self._token("-"):
            return None
        od = self._int(3)
        return None if od is None else OrdinalParts(year, od)

    def _extended_week(self, year: int) -> Optional[DateParts]:
        if not self._token("-W"):
            return None
        wn = self._int(2)
        if wn is None:
            return None
        if self._token("-"):
            wdn = self._int(1)
            return None if wdn is None else WeekParts(year, wn, wdn)
        return WeekParts(year, wn, 1)

    # ── basic format ─────────────────────────────────────────────────────

    def _basic_calendar(self, year: int) -> Optional[DateParts]:
        month = self._int(2)
        if month is None:
            return None
        day = self._int(2)
        return CalendarParts(year, month, 1 if day is None else day)

    def _basic_ordinal(self, year: int) -> Optional[DateParts]:
        od = self._int(3)
        return None if od is None else OrdinalParts(year, od)

    def _basic_week(self, year: int) -> Optional[DateParts]:
        if not self._token("W"):
            return None
        wn = self._int(2)
        if wn is None:
            return None
        wdn = self._int(1)
        return WeekParts(year, wn, 1 if wdn is None else wdn)

    def _year_only(self, year: int) -> Optional[DateParts]:
        return OrdinalParts(year, 1)

    # ── entry point ──────────────────────────────────────────────────────

    def parse(self) -> Optional[DateParts]:
        year = self._year()
        if year is None:
            return None
        for alternative in (
            self._extended_calendar,
            self._extended_ordinal,
            self._extended_week,
            self._basic_calendar,
            self._basic_ordinal,
            self._basic_week,
            self._year_only,
        ):
            parts = self._attempt(alternative, year)
            if parts is not None:
                return parts
        return None


def parse_date_parts(text: str) -> DateParts:
    """
    Run the ISO 8601 date grammar over ``text`` without range checks.

    Raises :class:`ParseError` unless the whole string matches.
    """
    parts = _Parser(text).parse()
    if parts is None:
        logger.debug("Rejected ISO 8601 date string %r", text)
        raise ParseError()
    return parts


def from_iso_string(text: str) -> Date:
    """
    Parse an ISO 8601 date in calendar, ordinal or week form.

    Both extended (``2018-09-26``, ``2018-269``, ``2018-W39-3``) and basic
    (``20180926``, ``2018269``, ``2018W393``) formats are accepted; omitted
    trailing parts default to 1.  Syntax errors raise :class:`ParseError`;
    out-of-range parts raise the matching :class:`ValidationError`.
    """
    return parse_date_parts(text).to_date()
