"""Undo history for automatic links."""

from __future__ import annotations

from .models import HistoryEntry


class LinkHistory:
    """Append/pop-only stack of rewrites, newest last.

    Unbounded and in-memory: it lives as long as the linker that owns it.
    """

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def push(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)

    def pop(self) -> HistoryEntry | None:
        """Remove and return the newest entry, or None when empty."""
        return self._entries.pop() if self._entries else None

    def peek(self) -> HistoryEntry | None:
        return self._entries[-1] if self._entries else None

    def entries(self) -> list[HistoryEntry]:
        """Oldest-first snapshot of the stack."""
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()
