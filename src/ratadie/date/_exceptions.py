from __future__ import annotations


class DateError(ValueError):
    """Base class for every error raised by ratadie."""


class ParseError(DateError):
    """Input is not a string in the ISO 8601 date grammar."""

    def __init__(self) -> None:
        super().__init__("not a valid ISO 8601 date string")


class ValidationError(DateError):
    """
    Well-formed date parts that are out of range.

    ``kind`` is ``"calendar"``, ``"ordinal"`` or ``"week"``; ``parts`` holds
    the offending values exactly as given.
    """

    kind: str = ""

    def __init__(self, *parts: int) -> None:
        self.parts: tuple[int, ...] = tuple(parts)
        super().__init__(
            f"Invalid {self.kind} date ({', '.join(str(p) for p in parts)})"
        )


class InvalidCalendarDate(ValidationError):
    kind = "calendar"


class InvalidOrdinalDate(ValidationError):
    kind = "ordinal"


class InvalidWeekDate(ValidationError):
    kind = "week"
