"""Part numbers and gear ratios over the indexed engine schematic."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from aoc2023.grid import Entry, Gear, Number, Position, Symbol, index_rows
from aoc2023.lexer import tokenize
from aoc2023.perimeter import perimeter
from aoc2023.reader import parse_records
from aoc2023.tokens import Span

GEAR_PART_COUNT = 2


@dataclass(frozen=True, slots=True)
class Schematic:
    """Read-only grid map from Position to entry. Blank cells are absent."""

    cells: Mapping[Position, Entry]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Span]]) -> Schematic:
        return cls(MappingProxyType(index_rows(rows)))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Schematic:
        return cls.from_rows(tokenize(line) for line in lines)

    def get(self, pos: Position) -> Entry | None:
        """Entry at pos, or None for blank and off-grid cells."""
        return self.cells.get(pos)

    def numbers(self) -> Iterator[Number]:
        """Yield each distinct number once, in row-major order."""
        seen: set[Position] = set()
        for pos in sorted(self.cells):
            entry = self.cells[pos]
            if isinstance(entry, Number) and entry.first not in seen:
                seen.add(entry.first)
                yield entry

    def gears(self) -> Iterator[Gear]:
        for entry in self.cells.values():
            if isinstance(entry, Gear):
                yield entry

    def is_part_number(self, number: Number) -> bool:
        """True when any cell around number holds a symbol or a gear."""
        for pos in perimeter(number):
            if isinstance(self.get(pos), (Symbol, Gear)):
                return True
        return False

    def adjacent_numbers(self, gear: Gear, limit: int | None = None) -> list[Number]:
        """Distinct numbers around gear, keyed by their first cell.

        Scanning stops as soon as limit numbers have been found.
        """
        found: dict[Position, Number] = {}
        for pos in perimeter(gear):
            entry = self.get(pos)
            if isinstance(entry, Number) and entry.first not in found:
                found[entry.first] = entry
                if limit is not None and len(found) >= limit:
                    break
        return list(found.values())

    def part_numbers(self) -> list[int]:
        return [n.value for n in self.numbers() if self.is_part_number(n)]

    def gear_ratios(self) -> list[int]:
        ratios = []
        for gear in self.gears():
            # One past the pair is enough to rule the gear out
            adjacent = self.adjacent_numbers(gear, limit=GEAR_PART_COUNT + 1)
            if len(adjacent) == GEAR_PART_COUNT:
                first, second = adjacent
                ratios.append(first.value * second.value)
        return ratios

    def part_sum(self) -> int:
        return sum(self.part_numbers())

    def gear_ratio_sum(self) -> int:
        return sum(self.gear_ratios())


def parse_schematic(source: str, filename: str = "input.txt") -> Schematic:
    """Build a Schematic from puzzle text (empty lines skipped)."""
    return Schematic.from_rows(parse_records(source, tokenize, filename))


def run_part_1(source: str, filename: str = "input.txt") -> int:
    return parse_schematic(source, filename).part_sum()


def run_part_2(source: str, filename: str = "input.txt") -> int:
    return parse_schematic(source, filename).gear_ratio_sum()
