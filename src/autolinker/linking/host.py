"""Host protocols: what the linker needs from the application around it.

Any editor host (an Obsidian bridge, a terminal editor, a test harness) can
implement these protocols and plug into :class:`~autolinker.linking.plugin.AutoLinker`.
The in-memory implementations here back the CLI and the test suite.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from loguru import logger

from autolinker.core.exceptions import DocumentReadError

from .models import Position

Notifier = Callable[[str], None]
"""Fire-and-forget user feedback; must not block."""


def log_notice(message: str) -> None:
    """Default notifier: notices go to the log at INFO."""
    logger.info(message)


@runtime_checkable
class DocumentStore(Protocol):
    """Read access to the documents of a vault."""

    def list_documents(self) -> Iterable[str]:
        """Return the ids of every document to index."""
        ...

    async def read_document(self, document_id: str) -> str:
        """Return the full text of a document.

        Raises:
            DocumentReadError: The document cannot be read.
        """
        ...


@runtime_checkable
class Editor(Protocol):
    """The active text buffer."""

    def get_cursor(self) -> Position: ...

    def get_line(self, line: int) -> str: ...

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        """Replace the characters in ``[start, end)`` with *text*."""
        ...


@dataclass
class ActiveView:
    """The document currently open for editing and its editor."""

    document_id: str
    editor: Editor


@runtime_checkable
class Workspace(Protocol):
    def get_active_view(self) -> ActiveView | None:
        """Return the active markdown view, or None when nothing is open."""
        ...


class MemoryStore:
    """A document store over a dict of ``{document_id: text}``."""

    def __init__(self, documents: dict[str, str] | None = None):
        self.documents: dict[str, str] = dict(documents or {})

    def list_documents(self) -> list[str]:
        return list(self.documents)

    async def read_document(self, document_id: str) -> str:
        try:
            return self.documents[document_id]
        except KeyError:
            raise DocumentReadError(document_id, "no such document") from None


class StaticWorkspace:
    """A workspace whose active view is set explicitly."""

    def __init__(self, view: ActiveView | None = None):
        self.view = view

    def open(self, document_id: str, editor: Editor) -> ActiveView:
        self.view = ActiveView(document_id=document_id, editor=editor)
        return self.view

    def close(self) -> None:
        self.view = None

    def get_active_view(self) -> ActiveView | None:
        return self.view
