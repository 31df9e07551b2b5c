"""Advent of Code 2023 puzzle solutions."""

from __future__ import annotations

from collections.abc import Mapping

__version__ = "0.1.0"

# Default input file of each day, relative to the puzzle directory
PUZZLE_FILES: dict[int, str] = {
    1: "day1-1.txt",
    2: "day2.txt",
    3: "day3.txt",
}

PARTS = (1, 2)


def solve(
    day: int,
    part: int,
    source: str,
    filename: str = "input.txt",
    limits: Mapping[str, int] | None = None,
) -> int:
    """Solve one part of one day's puzzle for the given input text."""
    from aoc2023 import calibration, cubes, schematic

    if part not in PARTS:
        raise ValueError(f"unknown part {part} (expected 1 or 2)")

    if day == 1:
        run = calibration.run_part_1 if part == 1 else calibration.run_part_2
        return run(source, filename)
    if day == 2:
        if part == 1:
            return cubes.run_part_1(source, filename, limits or cubes.CUBE_LIMITS)
        return cubes.run_part_2(source, filename)
    if day == 3:
        run = schematic.run_part_1 if part == 1 else schematic.run_part_2
        return run(source, filename)
    raise ValueError(f"unknown day {day} (expected one of {sorted(PUZZLE_FILES)})")
