"""Error types with formatted source context."""

from __future__ import annotations


class RecordError(Exception):
    """Raised by a per-line parser; the reader adds the line context."""

    def __init__(self, message: str, column: int = 1) -> None:
        self.message = message
        self.column = column
        super().__init__(message)


class PuzzleInputError(Exception):
    """Raised on the first malformed input line, with position and source context."""

    def __init__(
        self,
        message: str,
        line: int,
        column: int,
        source: str,
        filename: str = "input.txt",
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.source = source
        self.filename = filename
        super().__init__(self.format())

    def format(self, filename: str | None = None) -> str:
        if filename is None:
            filename = self.filename
        lines = self.source.split("\n")
        line_idx = self.line - 1
        col = self.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\r")
        else:
            source_line = ""

        # Underline from the column to the end of the line, at least one char
        underline_len = max(1, len(source_line.rstrip()) - col + 1)

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class GridInvariantError(Exception):
    """Raised when the grid indexer writes a position twice (an internal defect)."""
