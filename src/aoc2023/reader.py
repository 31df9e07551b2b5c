"""Reading puzzle input as non-empty trimmed lines, one record per line."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from aoc2023.errors import PuzzleInputError, RecordError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class SourceLine:
    """A trimmed input line with its 1-based line number and indentation."""

    number: int
    text: str
    indent: int = 0


def read_source(path: str | Path) -> str:
    """Read a puzzle input file as UTF-8. OSError propagates to the caller."""
    return Path(path).read_text(encoding="utf-8")


def split_lines(source: str) -> list[SourceLine]:
    """Return the non-empty lines of source, trimmed, in file order."""
    result: list[SourceLine] = []
    for number, raw in enumerate(source.split("\n"), start=1):
        text = raw.strip()
        if not text:
            continue
        indent = len(raw) - len(raw.lstrip())
        result.append(SourceLine(number, text, indent))
    return result


def parse_records(
    source: str,
    parse: Callable[[str], T],
    filename: str = "input.txt",
) -> list[T]:
    """Convert every non-empty line of source with parse.

    A RecordError from parse is re-raised as a PuzzleInputError pointing at the
    offending line.
    """
    records: list[T] = []
    for line in split_lines(source):
        try:
            records.append(parse(line.text))
        except RecordError as exc:
            raise PuzzleInputError(
                exc.message,
                line.number,
                exc.column + line.indent,
                source,
                filename,
            ) from exc
    return records
