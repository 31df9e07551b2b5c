"""Schematic lexer — converts one grid line into a flat span stream."""

from __future__ import annotations

from aoc2023.tokens import CharClass, Span, SpanKind, classify

# Runs of these classes become one span; the others emit one span per character.
_RUN_KINDS = {
    CharClass.DIGIT: SpanKind.NUMBER,
    CharClass.DOT: SpanKind.BLANK,
}
_SINGLE_KINDS = {
    CharClass.GEAR: SpanKind.GEAR,
    CharClass.SYMBOL: SpanKind.SYMBOL,
}


class Lexer:
    """Tokenize one schematic line into Span objects.

    The lexer is a small state machine: the state is the class of the run
    being accumulated, and a change of class flushes the run.
    """

    def __init__(self, line: str) -> None:
        self._line = line
        self._pos = 0
        self._state: CharClass | None = None
        self._run: list[str] = []
        self._spans: list[Span] = []

    def tokenize(self) -> list[Span]:
        """Tokenize the full line and return the span list."""
        while self._pos < len(self._line):
            ch = self._line[self._pos]
            self._transition(classify(ch))
            self._run.append(ch)
            self._pos += 1
        self._flush()
        return self._spans

    def _transition(self, next_state: CharClass) -> None:
        if next_state is not self._state:
            self._flush()
            self._state = next_state

    def _flush(self) -> None:
        if not self._run:
            return
        text = "".join(self._run)
        self._run.clear()

        kind = _RUN_KINDS.get(self._state)
        if kind is not None:
            self._spans.append(Span(kind, text))
            return

        # Each symbol is adjacency-tested on its own
        kind = _SINGLE_KINDS[self._state]
        self._spans.extend(Span(kind, ch) for ch in text)


def tokenize(line: str) -> list[Span]:
    """Convenience function: tokenize one line and return its spans."""
    return Lexer(line).tokenize()
