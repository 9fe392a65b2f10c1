"""In-memory text buffer implementing the :class:`~autolinker.linking.host.Editor` protocol."""

from __future__ import annotations

from .models import Position


class TextBuffer:
    """A list-of-lines text buffer with a cursor.

    Positions are zero-based; ``replace_range`` may span several lines and the
    replacement text may itself contain newlines.
    """

    def __init__(self, text: str = "", cursor: Position | None = None):
        self._lines: list[str] = text.split("\n")
        self.cursor = cursor or Position(0, 0)
        self.version = 0

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_cursor(self) -> Position:
        return self.cursor

    def set_cursor(self, line: int, ch: int = 0) -> None:
        self._check_line(line)
        self.cursor = Position(line, ch)

    def get_line(self, line: int) -> str:
        self._check_line(line)
        return self._lines[line]

    def get_range(self, start: Position, end: Position) -> str:
        """Return the text between two positions."""
        if start.line == end.line:
            return self.get_line(start.line)[start.ch : end.ch]
        parts = [self.get_line(start.line)[start.ch :]]
        parts.extend(self._lines[start.line + 1 : end.line])
        parts.append(self.get_line(end.line)[: end.ch])
        return "\n".join(parts)

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        if end < start:
            raise ValueError(f"Range end {end} precedes start {start}")
        head = self.get_line(start.line)[: start.ch]
        tail = self.get_line(end.line)[end.ch :]
        self._lines[start.line : end.line + 1] = (head + text + tail).split("\n")
        self.version += 1

    def insert(self, text: str, at: Position | None = None) -> Position:
        """Insert text (at the cursor by default) and return where it started.

        The cursor moves to the end of the inserted text, like typing would.
        """
        start = at or self.cursor
        self.replace_range(text, start, start)
        inserted = text.split("\n")
        if len(inserted) == 1:
            self.cursor = Position(start.line, start.ch + len(text))
        else:
            self.cursor = Position(start.line + len(inserted) - 1, len(inserted[-1]))
        return start

    def _check_line(self, line: int) -> None:
        if not 0 <= line < len(self._lines):
            raise IndexError(f"Line {line} out of range (buffer has {len(self._lines)} lines)")
