"""Shared test fixtures and helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from aoc2023.lexer import tokenize
from aoc2023.schematic import Schematic
from aoc2023.tokens import Span, SpanKind

SAMPLE_SCHEMATIC = """\
467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598..
"""

SAMPLE_CALIBRATION = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet\n"

SAMPLE_SPELLED_CALIBRATION = """\
two1nine
eightwothree
abcone2threexyz
xtwone3four
4nineeightseven2
zoneight234
7pqrstsixteen
"""

SAMPLE_GAMES = """\
Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
"""


@pytest.fixture
def lex():
    """Return a helper that tokenizes one line."""

    def _lex(line: str) -> list[Span]:
        return tokenize(line)

    return _lex


@pytest.fixture
def schematic():
    """Return a helper that builds a Schematic from grid text."""

    def _build(source: str) -> Schematic:
        return Schematic.from_lines(line for line in source.split("\n") if line)

    return _build


@pytest.fixture
def puzzle_dir(tmp_path: Path) -> Path:
    """A puzzle directory holding the sample input of every day."""
    d = tmp_path / "puzzles"
    d.mkdir()
    (d / "day1-1.txt").write_text(SAMPLE_CALIBRATION, encoding="utf-8")
    (d / "day2.txt").write_text(SAMPLE_GAMES, encoding="utf-8")
    (d / "day3.txt").write_text(SAMPLE_SCHEMATIC, encoding="utf-8")
    return d


def assert_kinds(spans: list[Span], expected: list[SpanKind]) -> None:
    """Assert that the span kinds match the expected list."""
    actual = [s.kind for s in spans]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(spans: list[Span], expected: list[str]) -> None:
    """Assert that the span texts match the expected list."""
    actual = [s.text for s in spans]
    assert actual == expected, f"Expected {expected}, got {actual}"
