# src/ratadie/iso8601/__init__.py
"""
ratadie.iso8601
~~~~~~~~~~~~~~~

Parser for ISO 8601 date strings: calendar, ordinal and week forms in both
extended and basic format.

Basic usage::

    from ratadie.iso8601 import from_iso_string

    from_iso_string("2018-09-26")    # calendar date
    from_iso_string("2018-269")      # ordinal date, same day
    from_iso_string("2018-W39-3")    # week date, same day
    from_iso_string("20180926")      # basic format

Errors::

    from_iso_string("2018-9-26")     # ParseError
    from_iso_string("2018-02-29")    # InvalidCalendarDate (2018, 2, 29)

Public API
----------
from_iso_string      Parse to a Date.
parse_date_parts     Grammar stage only; returns the unvalidated parts.
CalendarParts, OrdinalParts, WeekParts
"""

from __future__ import annotations

from ratadie.iso8601.parser import (
    CalendarParts,
    DateParts,
    OrdinalParts,
    WeekParts,
    from_iso_string,
    parse_date_parts,
)

__all__ = [
    "CalendarParts",
    "DateParts",
    "OrdinalParts",
    "WeekParts",
    "from_iso_string",
    "parse_date_parts",
]
