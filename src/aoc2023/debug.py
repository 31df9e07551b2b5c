"""--debug dumps of parsed puzzle input to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from aoc2023.calibration import calibration_value, spelled_calibration_value
from aoc2023.cubes import Game
from aoc2023.errors import RecordError
from aoc2023.grid import Gear, Symbol
from aoc2023.reader import SourceLine
from aoc2023.schematic import Schematic


def dump_schematic(schematic: Schematic, *, file: TextIO = sys.stderr) -> None:
    """Print every number and symbol of the grid map, row-major."""
    file.write("Schematic\n")
    for number in schematic.numbers():
        file.write(
            f"  Number {number.value} "
            f"({number.first.row}, {number.first.col})..({number.last.row}, {number.last.col})\n"
        )
    for pos in sorted(schematic.cells):
        entry = schematic.cells[pos]
        if isinstance(entry, Symbol):
            file.write(f"  Symbol {entry.char!r} ({pos.row}, {pos.col})\n")
        elif isinstance(entry, Gear):
            file.write(f"  Gear ({pos.row}, {pos.col})\n")


def dump_games(games: Iterable[Game], *, file: TextIO = sys.stderr) -> None:
    """Print each game with its hands."""
    for game in games:
        file.write(f"Game {game.id}\n")
        for hand in game.hands:
            file.write(f"  Hand red={hand.red} green={hand.green} blue={hand.blue}\n")


def dump_calibration(lines: Iterable[SourceLine], *, file: TextIO = sys.stderr) -> None:
    """Print both calibration readings of each line; '-' where a reading has no digit."""
    file.write("Calibration\n")
    for line in lines:
        readings = []
        for read in (calibration_value, spelled_calibration_value):
            try:
                readings.append(str(read(line.text)))
            except RecordError:
                readings.append("-")
        file.write(f"  {line.number}: {line.text!r} -> {' / '.join(readings)}\n")
