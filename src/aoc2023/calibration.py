"""Trebuchet calibration values: first and last digit of every line."""

from __future__ import annotations

from aoc2023.errors import RecordError
from aoc2023.reader import parse_records

DIGITS: dict[str, int] = {str(d): d for d in range(1, 10)}

DIGIT_WORDS: dict[str, int] = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

SPELLED_DIGITS: dict[str, int] = {**DIGITS, **DIGIT_WORDS}


def calibration_value(line: str) -> int:
    """Two-digit number made of the first and last decimal digit in line."""
    digits = [int(ch) for ch in line if "0" <= ch <= "9"]
    if not digits:
        raise RecordError("no digit in calibration line")
    return digits[0] * 10 + digits[-1]


def spelled_calibration_value(line: str, table: dict[str, int] = SPELLED_DIGITS) -> int:
    """Like calibration_value, but spelled-out digit words count as digits.

    Matches may overlap: "eightwo" starts with 8 and ends with 2.
    """
    first: tuple[int, int] | None = None
    last: tuple[int, int] | None = None
    for needle, digit in table.items():
        start = line.find(needle)
        if start == -1:
            continue
        if first is None or start < first[0]:
            first = (start, digit)
        end = line.rfind(needle)
        if last is None or end > last[0]:
            last = (end, digit)
    if first is None or last is None:
        raise RecordError("no digit or digit word in calibration line")
    return first[1] * 10 + last[1]


def run_part_1(source: str, filename: str = "input.txt") -> int:
    return sum(parse_records(source, calibration_value, filename))


def run_part_2(source: str, filename: str = "input.txt") -> int:
    return sum(parse_records(source, spelled_calibration_value, filename))
