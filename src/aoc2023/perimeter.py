"""Ring of cells one step outside a grid entry, walked clockwise.

The walk starts at the top-left corner of the expanded box and goes clockwise:
along the top row, down the right column, back along the bottom row and up
the left column, stopping just before it would return to the start. Every
ring cell is produced exactly once.

Coordinates may be negative for entries on row 0 or column 0; callers look
them up like any other cell and simply find nothing there.
"""

from __future__ import annotations

from enum import Enum, auto

from aoc2023.grid import Entry, Gear, Number, Position


class _Phase(Enum):
    TOP = auto()
    RIGHT = auto()
    BOTTOM = auto()
    LEFT = auto()
    FINISHED = auto()


# (row step, column step) taken in each phase
_STEPS = {
    _Phase.TOP: (0, 1),
    _Phase.RIGHT: (1, 0),
    _Phase.BOTTOM: (0, -1),
    _Phase.LEFT: (-1, 0),
}

_NEXT_PHASE = {
    _Phase.TOP: _Phase.RIGHT,
    _Phase.RIGHT: _Phase.BOTTOM,
    _Phase.BOTTOM: _Phase.LEFT,
    _Phase.LEFT: _Phase.FINISHED,
}

MIN_BOX_SIDE = 3


def bounding_box(entry: Entry) -> tuple[Position, Position]:
    """Return (top_left, bottom_right) of the box one cell outside entry."""
    if isinstance(entry, Number):
        return entry.first.shifted(-1, -1), entry.last.shifted(1, 1)
    if isinstance(entry, Gear):
        return entry.pos.shifted(-1, -1), entry.pos.shifted(1, 1)
    raise ValueError(f"only numbers and gears have a perimeter, got {entry!r}")


class PerimeterWalk:
    """Single-use iterator over the ring between two opposite corners."""

    def __init__(self, top_left: Position, bottom_right: Position) -> None:
        height = bottom_right.row - top_left.row + 1
        width = bottom_right.col - top_left.col + 1
        if height < MIN_BOX_SIDE or width < MIN_BOX_SIDE:
            raise ValueError(
                f"perimeter box must be at least {MIN_BOX_SIDE}x{MIN_BOX_SIDE}, "
                f"got {height}x{width}"
            )
        self._top_left = top_left
        self._bottom_right = bottom_right
        self._cursor = top_left
        self._phase = _Phase.TOP
        self.length = 2 * height + 2 * width - 4

    def __iter__(self) -> PerimeterWalk:
        return self

    def __next__(self) -> Position:
        if self._phase is _Phase.FINISHED:
            raise StopIteration
        result = self._cursor
        drow, dcol = _STEPS[self._phase]
        self._cursor = self._cursor.shifted(drow, dcol)
        if self._cursor == self._phase_end():
            self._phase = _NEXT_PHASE[self._phase]
        return result

    def _phase_end(self) -> Position:
        """Corner at which the current phase hands over to the next one."""
        tl, br = self._top_left, self._bottom_right
        if self._phase is _Phase.TOP:
            return Position(tl.row, br.col)
        if self._phase is _Phase.RIGHT:
            return br
        if self._phase is _Phase.BOTTOM:
            return Position(br.row, tl.col)
        return tl


def perimeter(entry: Entry) -> PerimeterWalk:
    """Return a fresh walk around a Number or Gear entry."""
    return PerimeterWalk(*bounding_box(entry))
