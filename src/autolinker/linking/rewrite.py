"""Rewriting matches into links, and reverting them."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from .history import LinkHistory
from .host import ActiveView, Editor, Notifier, log_notice
from .models import HistoryEntry, Match, Position
from .tokens import LINK_OVERHEAD, render_link


def _span_text(editor: Editor, start: Position, end: Position) -> str | None:
    """Text of a single-line span, or None if the line no longer exists."""
    try:
        return editor.get_line(start.line)[start.ch : end.ch]
    except IndexError:
        return None


class Rewriter:
    """Applies matches to an editor and reverts them from the history.

    Every applied link pushes a :class:`HistoryEntry`; :meth:`undo` pops the
    newest one. Spans are checked against the buffer before editing, so a
    position made stale by a concurrent edit is skipped instead of clobbering
    unrelated text.
    """

    def __init__(self, history: LinkHistory | None = None, notify: Notifier | None = None):
        self.history = history if history is not None else LinkHistory()
        self.notify = notify or log_notice

    def apply_match(self, match: Match, editor: Editor, document_id: str, shift: int = 0) -> bool:
        """Wrap the matched word in link markers.

        Args:
            match: Match found against the line as it was read.
            editor: Buffer to edit.
            document_id: Document the buffer belongs to.
            shift: Characters inserted earlier on the same line since the match was found.

        Returns:
            True if the buffer was rewritten.
        """
        start = match.start.shifted(shift)
        end = match.end.shifted(shift)
        if _span_text(editor, start, end) != match.raw_word:
            logger.debug(f"Stale span for {match!r}; skipping")
            return False

        editor.replace_range(render_link(match.raw_word), start, end)
        self.history.push(HistoryEntry(text=match.raw_word, position=start, file=document_id))
        self.notify(f'Linked "{match.raw_word}" to {match.target}')
        return True

    def apply_matches(self, matches: Iterable[Match], editor: Editor, document_id: str) -> list[Match]:
        """Apply matches in order, accounting for markers added earlier on each line.

        Returns:
            The matches that were applied.
        """
        applied: list[Match] = []
        shifts: dict[int, int] = {}
        for match in matches:
            shift = shifts.get(match.start.line, 0)
            if self.apply_match(match, editor, document_id, shift=shift):
                shifts[match.start.line] = shift + LINK_OVERHEAD
                applied.append(match)
        return applied

    def undo(self, view: ActiveView | None) -> HistoryEntry | None:
        """Revert the newest link in the active view.

        Does nothing when there is no active view or nothing to undo. When the
        newest link belongs to another document it is put back on the stack,
        so it can still be undone from that document.

        Returns:
            The reverted entry, or None.
        """
        if view is None:
            logger.debug("Undo requested with no active view")
            return None

        entry = self.history.pop()
        if entry is None:
            return None

        if entry.file != view.document_id:
            self.history.push(entry)
            logger.info(f"Last auto-link is in {entry.file}, not {view.document_id}")
            return None

        start = entry.position
        end = start.shifted(len(entry.text) + LINK_OVERHEAD)
        if _span_text(view.editor, start, end) != render_link(entry.text):
            logger.warning(f"Link {render_link(entry.text)} moved since it was created; dropping undo entry")
            return None

        view.editor.replace_range(entry.text, start, end)
        self.notify("Undid last auto-link")
        return entry
