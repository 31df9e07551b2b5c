"""Grid coordinates, grid entries, and the span indexer."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from aoc2023.errors import GridInvariantError
from aoc2023.tokens import Span, SpanKind


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Grid cell, 0-based row and column. May go negative next to the edges."""

    row: int
    col: int

    def shifted(self, drow: int, dcol: int) -> Position:
        return Position(self.row + drow, self.col + dcol)


@dataclass(frozen=True, slots=True)
class Number:
    """A part-number candidate spanning first..last on a single row."""

    value: int
    first: Position
    last: Position

    @property
    def width(self) -> int:
        return self.last.col - self.first.col + 1

    def columns(self) -> range:
        return range(self.first.col, self.last.col + 1)


@dataclass(frozen=True, slots=True)
class Symbol:
    """Any non-digit, non-blank, non-gear character."""

    pos: Position
    char: str


@dataclass(frozen=True, slots=True)
class Gear:
    """A '*' cell, eligible for gear ratios."""

    pos: Position


Entry = Number | Symbol | Gear


def index_rows(rows: Iterable[Sequence[Span]]) -> dict[Position, Entry]:
    """Lay out each row's spans left to right and map every occupied cell.

    Every column of a number maps to the same Number object. Blank cells are
    absent from the result.
    """
    cells: dict[Position, Entry] = {}

    def put(pos: Position, entry: Entry) -> None:
        if pos in cells:
            raise GridInvariantError(
                f"internal error: cell ({pos.row}, {pos.col}) written twice "
                f"({cells[pos]!r}, then {entry!r})"
            )
        cells[pos] = entry

    for row, spans in enumerate(rows):
        col = 0
        for span in spans:
            if span.kind is SpanKind.BLANK:
                col += span.width
            elif span.kind is SpanKind.NUMBER:
                number = Number(
                    value=span.value,
                    first=Position(row, col),
                    last=Position(row, col + span.width - 1),
                )
                for c in number.columns():
                    put(Position(row, c), number)
                col += span.width
            elif span.kind is SpanKind.GEAR:
                pos = Position(row, col)
                put(pos, Gear(pos))
                col += 1
            else:
                pos = Position(row, col)
                put(pos, Symbol(pos, span.text))
                col += 1
    return cells
