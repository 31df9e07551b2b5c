"""Test the --debug dumps."""

from __future__ import annotations

import io

from aoc2023.cubes import parse_game
from aoc2023.debug import dump_calibration, dump_games, dump_schematic
from aoc2023.reader import split_lines


def test_dump_schematic(schematic) -> None:
    buf = io.StringIO()
    dump_schematic(schematic("12.\n.*#"), file=buf)
    assert buf.getvalue() == (
        "Schematic\n"
        "  Number 12 (0, 0)..(0, 1)\n"
        "  Gear (1, 1)\n"
        "  Symbol '#' (1, 2)\n"
    )


def test_dump_games() -> None:
    buf = io.StringIO()
    dump_games([parse_game("Game 7: 1 red; 2 blue, 3 green")], file=buf)
    assert buf.getvalue() == (
        "Game 7\n"
        "  Hand red=1 green=0 blue=0\n"
        "  Hand red=0 green=3 blue=2\n"
    )


def test_dump_calibration_marks_unreadable_lines() -> None:
    buf = io.StringIO()
    dump_calibration(split_lines("two1\n\nxyz"), file=buf)
    assert buf.getvalue() == (
        "Calibration\n"
        "  1: 'two1' -> 11 / 21\n"
        "  3: 'xyz' -> - / -\n"
    )
