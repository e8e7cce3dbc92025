"""
tests/pattern/test_format.py

Covers:
  - Tokenizer: field runs, literal runs, quote escaping
  - Every field character at every supported length
  - Unsupported characters / lengths render as ""
  - Ordinal suffixes and signed zero-padding
"""

import pytest

from ratadie.date import Date, Month
from ratadie.pattern import (
    Field,
    Literal,
    format_date,
    pad_signed_int,
    tokenize,
    with_ordinal_suffix,
)


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def ides():
    """2007-03-15: Thursday, Q1, ISO week 11, ordinal day 74."""
    return Date.from_calendar_date(2007, Month.MAR, 15)


@pytest.fixture
def new_years_eve():
    """2018-12-31: Monday, ISO week-year 2019, week 1."""
    return Date.from_calendar_date(2018, Month.DEC, 31)


# ── Tokenizer ─────────────────────────────────────────────────────────────────

class TestTokenize:

    def test_fields_and_literals(self):
        assert tokenize("yyyy-MM-dd") == [
            Field("y", 4), Literal("-"), Field("M", 2), Literal("-"), Field("d", 2),
        ]

    def test_adjacent_different_letters_split(self):
        assert tokenize("yyMM") == [Field("y", 2), Field("M", 2)]

    def test_quoted_letters_are_literal(self):
        assert tokenize("'Week' w") == [Literal("Week "), Field("w", 1)]

    def test_doubled_quote_outside_quotes(self):
        assert tokenize("d''") == [Field("d", 1), Literal("'")]

    def test_doubled_quote_inside_quotes(self):
        assert tokenize("'o''clock'") == [Literal("o'clock")]

    def test_unterminated_quote_runs_to_end(self):
        assert tokenize("d 'abc") == [Field("d", 1), Literal(" abc")]

    def test_empty_pattern(self):
        assert tokenize("") == []

    def test_non_ascii_letters_are_literal(self):
        assert tokenize("dé") == [Field("d", 1), Literal("é")]


# ── Spec examples ─────────────────────────────────────────────────────────────

class TestExamples:

    def test_long_date(self, ides):
        assert format_date("EEEE, MMMM d, y", ides) == "Thursday, March 15, 2007"

    def test_day_with_suffix(self, ides):
        assert format_date("MMMM ddd, y", ides) == "March 15th, 2007"

    def test_iso_like(self, ides):
        assert format_date("yyyy-MM-dd", ides) == "2007-03-15"

    def test_iso_week(self, ides):
        assert format_date("YYYY-'W'ww-e", ides) == "2007-W11-4"

    def test_quoted_text(self, ides):
        assert format_date("'Today is' EEEE", ides) == "Today is Thursday"


# ── Fields ────────────────────────────────────────────────────────────────────

class TestFields:

    @pytest.mark.parametrize(
        "pattern, expected",
        [
            ("y", "2007"),
            ("yy", "07"),
            ("yyy", "2007"),
            ("yyyy", "2007"),
            ("yyyyy", "02007"),
        ],
    )
    def test_year(self, ides, pattern, expected):
        assert format_date(pattern, ides) == expected

    def test_small_year_padding(self):
        d = Date.from_calendar_date(5, Month.JAN, 1)
        assert format_date("y", d) == "5"
        assert format_date("yy", d) == "05"
        assert format_date("yyy", d) == "005"
        assert format_date("yyyy", d) == "0005"

    def test_negative_year_padding(self):
        d = Date.from_calendar_date(-5, Month.JAN, 1)
        assert format_date("yyyy", d) == "-0005"

    @pytest.mark.parametrize(
        "pattern, expected",
        [("Y", "2019"), ("YY", "19"), ("YYY", "2019"), ("YYYY", "2019"), ("YYYYY", "")],
    )
    def test_week_year(self, new_years_eve, pattern, expected):
        assert format_date(pattern, new_years_eve) == expected

    @pytest.mark.parametrize(
        "pattern, expected",
        [("Q", "1"), ("QQ", "1"), ("QQQ", "Q1"), ("QQQQ", "1st"), ("QQQQQ", "1"), ("QQQQQQ", "")],
    )
    def test_quarter(self, ides, pattern, expected):
        assert format_date(pattern, ides) == expected

    @pytest.mark.parametrize(
        "pattern, expected",
        [("M", "3"), ("MM", "03"), ("MMM", "Mar"), ("MMMM", "March"), ("MMMMM", "M"), ("MMMMMM", "")],
    )
    def test_month(self, ides, pattern, expected):
        assert format_date(pattern, ides) == expected

    @pytest.mark.parametrize("pattern, expected", [("w", "1"), ("ww", "01"), ("www", "")])
    def test_week_number(self, new_years_eve, pattern, expected):
        assert format_date(pattern, new_years_eve) == expected

    @pytest.mark.parametrize("pattern, expected", [("d", "15"), ("dd", "15"), ("ddd", "15th"), ("dddd", "")])
    def test_day(self, ides, pattern, expected):
        assert format_date(pattern, ides) == expected

    def test_single_digit_day(self):
        d = Date.from_calendar_date(2007, Month.MAR, 2)
        assert format_date("d dd ddd", d) == "2 02 2nd"

    @pytest.mark.parametrize("pattern, expected", [("D", "74"), ("DD", "74"), ("DDD", "074"), ("DDDD", "")])
    def test_ordinal_day(self, ides, pattern, expected):
        assert format_date(pattern, ides) == expected

    @pytest.mark.parametrize(
        "pattern, expected",
        [
            ("E", "Thu"),
            ("EE", "Thu"),
            ("EEE", "Thu"),
            ("EEEE", "Thursday"),
            ("EEEEE", "T"),
            ("EEEEEE", "Th"),
            ("EEEEEEE", ""),
        ],
    )
    def test_weekday(self, ides, pattern, expected):
        assert format_date(pattern, ides) == expected

    @pytest.mark.parametrize("pattern, expected", [("e", "4"), ("ee", "4"), ("eee", "")])
    def test_weekday_number(self, ides, pattern, expected):
        assert format_date(pattern, ides) == expected

    def test_unknown_field_renders_empty(self, ides):
        assert format_date("[x][Z][a]", ides) == "[][][]"


# ── Helpers ───────────────────────────────────────────────────────────────────

class TestHelpers:

    @pytest.mark.parametrize(
        "n, expected",
        [
            (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
            (11, "11th"), (12, "12th"), (13, "13th"),
            (21, "21st"), (22, "22nd"), (23, "23rd"),
            (101, "101st"), (111, "111th"), (112, "112th"),
        ],
    )
    def test_ordinal_suffix(self, n, expected):
        assert with_ordinal_suffix(n) == expected

    def test_pad_signed_int(self):
        assert pad_signed_int(7, 3) == "007"
        assert pad_signed_int(-7, 3) == "-007"
        assert pad_signed_int(12345, 3) == "12345"
