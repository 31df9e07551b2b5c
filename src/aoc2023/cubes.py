"""Cube games: coloured cubes drawn from a bag, checked against limits."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from aoc2023.errors import RecordError
from aoc2023.reader import parse_records

COLOURS = ("red", "green", "blue")

CUBE_LIMITS: Mapping[str, int] = MappingProxyType({"red": 12, "green": 13, "blue": 14})

_HEADER_RE = re.compile(r"Game\s+([0-9]+)\s*:")
_DRAW_RE = re.compile(r"\s*([0-9]+)\s+(red|green|blue)\s*")


@dataclass(frozen=True, slots=True)
class Hand:
    """Cubes revealed in one handful."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def count(self, colour: str) -> int:
        return getattr(self, colour)

    def within(self, limits: Mapping[str, int]) -> bool:
        return all(self.count(c) <= limits.get(c, 0) for c in COLOURS)

    @property
    def power(self) -> int:
        return self.red * self.green * self.blue


@dataclass(frozen=True, slots=True)
class Game:
    id: int
    hands: tuple[Hand, ...]

    def is_possible(self, limits: Mapping[str, int] = CUBE_LIMITS) -> bool:
        """True when no hand shows more cubes of a colour than the limit."""
        return all(hand.within(limits) for hand in self.hands)

    def minimum_set(self) -> Hand:
        """Fewest cubes of each colour that make every hand possible."""
        return Hand(**{c: max((h.count(c) for h in self.hands), default=0) for c in COLOURS})


def _parse_hand(text: str, column: int) -> Hand:
    counts: dict[str, int] = {}
    offset = 0
    for draw in text.split(","):
        m = _DRAW_RE.fullmatch(draw)
        if m is None:
            raise RecordError(f"malformed draw {draw.strip()!r}", column + offset)
        colour = m.group(2)
        if colour in counts:
            raise RecordError(f"colour {colour!r} drawn twice in one hand", column + offset)
        counts[colour] = int(m.group(1))
        offset += len(draw) + 1
    return Hand(**counts)


def parse_game(line: str) -> Game:
    """Parse 'Game 1: 3 blue, 4 red; 1 red, 2 green' into a Game."""
    m = _HEADER_RE.match(line)
    if m is None:
        raise RecordError("expected 'Game <id>:' header")

    hands: list[Hand] = []
    column = m.end() + 1
    for text in line[m.end() :].split(";"):
        hands.append(_parse_hand(text, column))
        column += len(text) + 1
    return Game(id=int(m.group(1)), hands=tuple(hands))


def run_part_1(
    source: str,
    filename: str = "input.txt",
    limits: Mapping[str, int] = CUBE_LIMITS,
) -> int:
    games = parse_records(source, parse_game, filename)
    return sum(game.id for game in games if game.is_possible(limits))


def run_part_2(source: str, filename: str = "input.txt") -> int:
    games = parse_records(source, parse_game, filename)
    return sum(game.minimum_set().power for game in games)
