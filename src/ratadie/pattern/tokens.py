from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Union

_LETTERS = frozenset(string.ascii_letters)


@dataclass(frozen=True)
class Field:
    char: str
    length: int


@dataclass(frozen=True)
class Literal:
    text: str


Token = Union[Field, Literal]


def tokenize(pattern: str) -> list[Token]:
    """
    Split a format pattern into fields and literal text.

    A field is a maximal run of one repeated ASCII letter.  Everything else is
    literal; letters can be made literal by wrapping them in single quotes, and
    ``''`` stands for one quote both inside and outside a quoted run.  An
    unterminated quote extends to the end of the pattern.
    """
    tokens: list[Token] = []
    pending: list[str] = []

    def flush() -> None:
        if pending:
            tokens.append(Literal("".join(pending)))
            pending.clear()

    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        if c == "'":
            if pattern.startswith("''", i):
                pending.append("'")
                i += 2
                continue
            i += 1
            while i < n:
                if pattern.startswith("''", i):
                    pending.append("'")
                    i += 2
                elif pattern[i] == "'":
                    i += 1
                    break
                else:
                    pending.append(pattern[i])
                    i += 1
        elif c in _LETTERS:
            flush()
            j = i
            while j < n and pattern[j] == c:
                j += 1
            tokens.append(Field(c, j - i))
            i = j
        else:
            pending.append(c)
            i += 1

    flush()
    return tokens
