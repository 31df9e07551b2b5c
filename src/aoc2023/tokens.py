"""Span types and character classification for schematic lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class CharClass(Enum):
    DIGIT = auto()  # 0-9
    DOT = auto()  # .
    GEAR = auto()  # *
    SYMBOL = auto()  # anything else


class SpanKind(Enum):
    NUMBER = auto()  # maximal digit run
    BLANK = auto()  # maximal dot run
    SYMBOL = auto()  # one symbol character
    GEAR = auto()  # one '*' character


@dataclass(frozen=True, slots=True)
class Span:
    """A run of same-class characters from one line, without a position."""

    kind: SpanKind
    text: str

    @property
    def width(self) -> int:
        return len(self.text)

    @property
    def value(self) -> int:
        """Decimal value of a NUMBER span."""
        if self.kind is not SpanKind.NUMBER:
            raise TypeError(f"{self.kind.name} span has no numeric value")
        return int(self.text)


GEAR_CHAR = "*"
BLANK_CHAR = "."


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"


def classify(ch: str) -> CharClass:
    """Map a single character to its class. Total: unknown characters are symbols."""
    if is_digit(ch):
        return CharClass.DIGIT
    if ch == BLANK_CHAR:
        return CharClass.DOT
    if ch == GEAR_CHAR:
        return CharClass.GEAR
    return CharClass.SYMBOL
