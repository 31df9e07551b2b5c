"""Test calibration value extraction (day 1)."""

import pytest

from aoc2023.calibration import (
    DIGIT_WORDS,
    calibration_value,
    run_part_1,
    run_part_2,
    spelled_calibration_value,
)
from aoc2023.errors import PuzzleInputError, RecordError
from tests.conftest import SAMPLE_CALIBRATION, SAMPLE_SPELLED_CALIBRATION


class TestDigits:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [("1abc2", 12), ("pqr3stu8vwx", 38), ("a1b2c3d4e5f", 15), ("treb7uchet", 77)],
    )
    def test_first_and_last_digit(self, line, expected):
        assert calibration_value(line) == expected

    def test_zero_is_a_digit(self):
        assert calibration_value("x0y5") == 5

    def test_words_are_ignored(self):
        assert calibration_value("one2three") == 22

    def test_no_digit_raises(self):
        with pytest.raises(RecordError, match="no digit"):
            calibration_value("abc")

    def test_sample(self):
        assert run_part_1(SAMPLE_CALIBRATION) == 142


class TestSpelledDigits:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("two1nine", 29),
            ("eightwothree", 83),
            ("abcone2threexyz", 13),
            ("xtwone3four", 24),
            ("4nineeightseven2", 42),
            ("zoneight234", 14),
            ("7pqrstsixteen", 76),
        ],
    )
    def test_sample_lines(self, line, expected):
        assert spelled_calibration_value(line) == expected

    def test_overlapping_words(self):
        assert spelled_calibration_value("eightwo") == 82

    def test_repeated_word_uses_last_occurrence(self):
        assert spelled_calibration_value("one2one") == 11
        assert spelled_calibration_value("nine2x9ninez") == 99

    def test_word_table(self):
        assert DIGIT_WORDS["seven"] == 7
        assert len(DIGIT_WORDS) == 9

    def test_nothing_found_raises(self):
        with pytest.raises(RecordError):
            spelled_calibration_value("xyz")

    def test_sample(self):
        assert run_part_2(SAMPLE_SPELLED_CALIBRATION) == 281


class TestInputErrors:
    def test_error_points_at_line(self):
        with pytest.raises(PuzzleInputError) as exc_info:
            run_part_1("12\n\nabc\n", filename="day1.txt")
        err = exc_info.value
        assert err.line == 3
        assert "day1.txt:3:1" in str(err)
