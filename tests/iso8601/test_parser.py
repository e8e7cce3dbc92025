"""
tests/iso8601/test_parser.py

Covers:
  - Extended calendar, ordinal and week forms
  - Basic calendar, ordinal and week forms
  - Defaults for omitted trailing parts
  - Disambiguation of basic MMDD / MM / DDD digit runs
  - Whole-input consumption and syntax errors
  - Validation errors passed through from the strict constructors
  - to_iso_string / from_iso_string round trips
"""

import numpy as np
import pytest

from ratadie.date import (
    Date,
    InvalidCalendarDate,
    InvalidOrdinalDate,
    InvalidWeekDate,
    Month,
    ParseError,
)
from ratadie.iso8601 import (
    CalendarParts,
    OrdinalParts,
    WeekParts,
    from_iso_string,
    parse_date_parts,
)


@pytest.fixture
def sep26():
    """2018-09-26: ordinal day 269, ISO week 2018-W39-3."""
    return Date.from_calendar_date(2018, Month.SEP, 26)


# ── Accepted forms ────────────────────────────────────────────────────────────

class TestAcceptedForms:

    @pytest.mark.parametrize(
        "text",
        [
            "2018-09-26",
            "2018-269",
            "2018-W39-3",
            "20180926",
            "2018269",
            "2018W393",
            "+2018-09-26",
        ],
    )
    def test_same_day_in_every_form(self, text, sep26):
        assert from_iso_string(text) == sep26

    def test_year_only_is_january_first(self):
        assert from_iso_string("2018") == Date.from_calendar_date(2018, Month.JAN, 1)

    def test_extended_month_only(self):
        assert from_iso_string("2018-09") == Date.from_calendar_date(2018, Month.SEP, 1)

    def test_basic_month_only(self):
        assert from_iso_string("201809") == Date.from_calendar_date(2018, Month.SEP, 1)

    def test_extended_week_without_weekday(self):
        assert parse_date_parts("2018-W39") == WeekParts(2018, 39, 1)

    def test_basic_week_without_weekday(self):
        assert parse_date_parts("2018W39") == WeekParts(2018, 39, 1)

    def test_negative_year(self):
        assert from_iso_string("-0001-06-05") == Date.from_calendar_date(-1, Month.JUN, 5)

    def test_week_date_in_previous_calendar_year(self):
        assert from_iso_string("2019-W01-1") == Date.from_calendar_date(2018, Month.DEC, 31)


# ── Disambiguation ────────────────────────────────────────────────────────────

class TestDisambiguation:

    def test_basic_four_digits_is_month_and_day(self):
        assert parse_date_parts("20181231") == CalendarParts(2018, 12, 31)

    def test_basic_three_digits_is_ordinal(self):
        assert parse_date_parts("2018123") == OrdinalParts(2018, 123)

    def test_basic_two_digits_is_month(self):
        assert parse_date_parts("201812") == CalendarParts(2018, 12, 1)

    def test_extended_three_digits_is_ordinal(self):
        assert parse_date_parts("2018-123") == OrdinalParts(2018, 123)

    def test_extended_two_digits_is_month(self):
        assert parse_date_parts("2018-12") == CalendarParts(2018, 12, 1)


# ── Syntax errors ─────────────────────────────────────────────────────────────

class TestSyntaxErrors:

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "18",
            "201",
            "2018-",
            "2018-9-26",
            "2018-09-2",
            "2018-09-26T00:00",
            "2018-09-26 ",
            " 2018-09-26",
            "2018-0926",
            "201809-26",
            "2018-W3",
            "2018-W39-",
            "2018W3",
            "2018-12345",
            "2018/09/26",
            "２０１８-09-26",
            "abcd",
        ],
    )
    def test_rejected(self, text):
        with pytest.raises(ParseError):
            from_iso_string(text)

    def test_fixed_message(self):
        with pytest.raises(ParseError, match="not a valid ISO 8601 date string"):
            from_iso_string("2018-9-26")


# ── Validation errors ─────────────────────────────────────────────────────────

class TestValidationErrors:

    def test_invalid_calendar_date(self):
        with pytest.raises(InvalidCalendarDate) as exc:
            from_iso_string("2018-02-29")
        assert exc.value.parts == (2018, 2, 29)

    def test_invalid_month(self):
        with pytest.raises(InvalidCalendarDate) as exc:
            from_iso_string("2018-13")
        assert exc.value.parts == (2018, 13, 1)

    def test_invalid_ordinal_date(self):
        with pytest.raises(InvalidOrdinalDate) as exc:
            from_iso_string("2018-366")
        assert exc.value.parts == (2018, 366)

    def test_invalid_week_date(self):
        with pytest.raises(InvalidWeekDate) as exc:
            from_iso_string("2018-W53-1")
        assert exc.value.parts == (2018, 53, 1)

    def test_invalid_weekday(self):
        with pytest.raises(InvalidWeekDate) as exc:
            from_iso_string("2018W398")
        assert exc.value.parts == (2018, 39, 8)

    def test_leap_forms_are_valid(self):
        assert from_iso_string("2020-02-29").to_iso_string() == "2020-02-29"
        assert from_iso_string("2020-366").to_iso_string() == "2020-12-31"
        assert from_iso_string("2020-W53-7").to_iso_string() == "2021-01-03"


# ── Round trips ───────────────────────────────────────────────────────────────

class TestRoundTrip:

    def test_iso_string_round_trip(self):
        rng = np.random.default_rng(11)
        # four-digit years only: the grammar has no expanded-year form
        for n in rng.integers(1, 3_652_059, size=300):
            d = Date(int(n))
            assert from_iso_string(d.to_iso_string()) == d

    def test_negative_four_digit_years_round_trip(self):
        for n in (-1, -366, -100_000, -700_000):
            d = Date(n)
            assert from_iso_string(d.to_iso_string()) == d
