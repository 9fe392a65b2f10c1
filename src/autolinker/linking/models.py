"""Core data models for linking: positions, matches and history entries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """A zero-based (line, column) location in a text buffer, in characters."""

    line: int
    ch: int

    def shifted(self, delta: int) -> Position:
        """Return the same position moved *delta* characters along the line."""
        return Position(self.line, self.ch + delta)


@dataclass(frozen=True)
class Match:
    """An indexed term found in a line that is eligible for linking.

    Attributes:
        term: Normalized index key.
        raw_word: The word exactly as written, punctuation included.
        start: Start of the word in the buffer.
        end: End of the word (exclusive).
        target: Id of the document that owns the term.
    """

    term: str
    raw_word: str
    start: Position
    end: Position
    target: str

    def __repr__(self) -> str:
        return f"Match({self.raw_word!r} -> {self.target!r} at {self.start.line}:{self.start.ch})"


@dataclass(frozen=True)
class HistoryEntry:
    """Everything needed to revert one rewrite.

    Attributes:
        text: The raw word that was wrapped.
        position: Start of the word before it was wrapped.
        file: Id of the document that was edited.
    """

    text: str
    position: Position
    file: str
