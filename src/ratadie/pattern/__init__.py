# src/ratadie/pattern/__init__.py
"""
ratadie.pattern
~~~~~~~~~~~~~~~

Template-driven date formatting with English month and weekday names.

Basic usage::

    from ratadie.date import Date, Month
    from ratadie.pattern import format_date

    d = Date.from_calendar_date(2007, Month.MAR, 15)
    format_date("EEEE, MMMM d, y", d)    # → "Thursday, March 15, 2007"
    format_date("MMMM ddd, y", d)        # → "March 15th, 2007"
    format_date("yyyy-'W'ww-e", d)       # → "2007-W11-4"

Public API
----------
format_date          Render a Date against a pattern.
tokenize             Split a pattern into Field / Literal tokens.
with_ordinal_suffix  1 → "1st", 11 → "11th", 22 → "22nd".
month_name, month_name_short, weekday_name, weekday_name_short
"""

from __future__ import annotations

from ratadie.pattern.render import (
    format_date,
    format_field,
    month_name,
    month_name_short,
    pad_signed_int,
    weekday_name,
    weekday_name_short,
    with_ordinal_suffix,
)
from ratadie.pattern.tokens import Field, Literal, Token, tokenize

__all__ = [
    "Field",
    "Literal",
    "Token",
    "format_date",
    "format_field",
    "month_name",
    "month_name_short",
    "pad_signed_int",
    "tokenize",
    "weekday_name",
    "weekday_name_short",
    "with_ordinal_suffix",
]
