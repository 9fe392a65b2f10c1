"""The AutoLinker instance and everything it owns.

The instance holds the settings, the term index and the undo history, so
several linkers (one per vault, or one per test) never share state. Editor
hosts feed it through the event bus (:meth:`AutoLinker.register`) or by
calling the handlers directly.
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from autolinker.core.events import (
    EDITOR_CHANGE,
    EDITOR_PASTE,
    LINK_CREATED,
    LINK_UNDONE,
    SETTINGS_CHANGED,
    VAULT_SCANNED,
    Event,
    EventBus,
)
from autolinker.core.exceptions import ConfigurationError, FileIOError

from .history import LinkHistory
from .host import DocumentStore, Editor, Notifier, Workspace, log_notice
from .index import TermIndex
from .matcher import find_matches
from .models import HistoryEntry, Position
from .rewrite import Rewriter
from .settings import LinkSettings, MemorySettingsStore, SettingsStore


def _paste_start(editor: Editor, lines: list[str]) -> Position:
    """Where *lines* begin, assuming they were just inserted before the cursor."""
    cursor = editor.get_cursor()
    first = cursor.line - len(lines) + 1
    try:
        inserted = first >= 0 and editor.get_line(cursor.line)[: cursor.ch].endswith(lines[-1])
        if inserted and len(lines) > 1:
            head = editor.get_line(first)
            inserted = head.endswith(lines[0]) and all(
                editor.get_line(first + i) == lines[i] for i in range(1, len(lines) - 1)
            )
    except IndexError:
        inserted = False

    if not inserted:
        return Position(cursor.line, 0)
    if len(lines) == 1:
        return Position(cursor.line, cursor.ch - len(lines[0]))
    return Position(first, len(head) - len(lines[0]))


class AutoLinker:
    """Indexes a vault and links indexed terms while the user writes.

    Args:
        workspace: Reports the active document and its editor.
        store: Documents to index.
        settings_store: Where settings are loaded from and saved to.
        notify: User-visible notices. Defaults to INFO logging.
    """

    _SOURCE = "autolinker"

    def __init__(
        self,
        workspace: Workspace,
        store: DocumentStore,
        settings_store: SettingsStore | None = None,
        notify: Notifier | None = None,
    ):
        self.workspace = workspace
        self.store = store
        self.settings_store = settings_store or MemorySettingsStore()
        self.notify = notify or log_notice
        self.settings = LinkSettings()
        self.index = TermIndex(self.settings)
        self.history = LinkHistory()
        self.rewriter = Rewriter(self.history, self.notify)
        self.bus: EventBus | None = None

    # -- lifecycle -------------------------------------------------------------

    async def on_load(self) -> None:
        """Load settings, then scan the vault if configured to."""
        self.load_settings()
        if self.settings.scan_on_load:
            await self.scan_vault()

    def register(self, bus: EventBus) -> None:
        """Subscribe to editor events and publish link events on *bus*."""
        self.bus = bus
        bus.on(EDITOR_CHANGE, self._on_editor_change)
        bus.on(EDITOR_PASTE, self._on_editor_paste)

    def unregister(self) -> None:
        if self.bus is None:
            return
        self.bus.off(EDITOR_CHANGE, self._on_editor_change)
        self.bus.off(EDITOR_PASTE, self._on_editor_paste)
        self.bus = None

    # -- settings --------------------------------------------------------------

    def load_settings(self) -> LinkSettings:
        """Load persisted settings; an unreadable store leaves the defaults."""
        try:
            data = self.settings_store.load()
        except (ConfigurationError, FileIOError) as e:
            logger.warning(f"Cannot load settings, using defaults: {e}")
            data = {}
        self._use_settings(LinkSettings.from_mapping(data))
        return self.settings

    def save_settings(self) -> None:
        self.settings_store.save(self.settings)

    async def update_settings(self, **values: Any) -> LinkSettings:
        """Apply values from a settings form and save them.

        Values are parsed like persisted data: ``min_word_length="abc"``
        falls back to 3 and ``ignored_words`` may be a comma-separated string.
        Any other value that cannot be parsed leaves the current setting as is.

        Raises:
            ConfigurationError: An unknown setting name was given.
        """
        known = set(self.settings.to_dict())
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError(f"Unknown settings: {', '.join(unknown)}")

        self._use_settings(LinkSettings.from_mapping(values, base=self.settings))
        self.save_settings()
        await self._publish(SETTINGS_CHANGED, settings=self.settings.to_dict())
        return self.settings

    def _use_settings(self, settings: LinkSettings) -> None:
        self.settings = settings
        self.index.settings = settings

    # -- commands --------------------------------------------------------------

    async def scan_vault(self) -> int:
        """Index every document of the store; returns the number of documents."""
        count = await self.index.scan(self.store)
        self.notify(f"Scanned {count} files for potential links")
        await self._publish(VAULT_SCANNED, documents=count, terms=len(self.index))
        return count

    async def rebuild_index(self) -> int:
        """Drop every indexed term and scan the store again."""
        self.index.clear()
        return await self.scan_vault()

    async def toggle_auto_linking(self) -> bool:
        self.settings.auto_link_enabled = not self.settings.auto_link_enabled
        self.save_settings()
        self.notify(f"Auto Linking {'Enabled' if self.settings.auto_link_enabled else 'Disabled'}")
        await self._publish(SETTINGS_CHANGED, settings=self.settings.to_dict())
        return self.settings.auto_link_enabled

    async def undo_last_link(self) -> HistoryEntry | None:
        entry = self.rewriter.undo(self.workspace.get_active_view())
        if entry is not None:
            await self._publish(LINK_UNDONE, text=entry.text, document_id=entry.file, position=entry.position)
        return entry

    async def link_all_lines(self, editor: Editor, line_count: int) -> int:
        """Link every line of the active document, regardless of auto-linking."""
        linked = 0
        for line_number in range(line_count):
            linked += await self.process_line(editor, editor.get_line(line_number), line_number)
        return linked

    # -- change ingestion ------------------------------------------------------

    async def handle_editor_change(self, editor: Editor) -> int:
        """Re-scan the cursor's line after an edit."""
        if not self.settings.auto_link_enabled:
            return 0
        cursor = editor.get_cursor()
        return await self.process_line(editor, editor.get_line(cursor.line), cursor.line)

    async def handle_paste(self, editor: Editor, text: str, start: Position | None = None) -> int:
        """Link words in freshly pasted text.

        Args:
            editor: Buffer the text was pasted into.
            text: The pasted text.
            start: Where the paste began. Line ``i`` of the text is taken to
                sit on ``start.line + i``; the first line also starts at
                ``start.ch``. When omitted it is read back from the buffer if
                the text ends at the cursor, else the cursor line at column 0
                is used.
        """
        if not self.settings.auto_link_enabled or not text:
            return 0
        lines = text.split("\n")
        if start is None:
            start = _paste_start(editor, lines)
        linked = 0
        for offset, line in enumerate(lines):
            column = start.ch if offset == 0 else 0
            linked += await self.process_line(editor, line, start.line + offset, column=column)
        return linked

    async def process_line(self, editor: Editor, line: str, line_number: int, column: int = 0) -> int:
        """Link the qualifying words of one line; returns how many were linked."""
        view = self.workspace.get_active_view()
        if view is None:
            logger.debug("No active view; skipping line")
            return 0

        matches = find_matches(line, line_number, view.document_id, self.index, self.settings, column=column)
        applied = self.rewriter.apply_matches(matches, editor, view.document_id)
        for match in applied:
            await self._publish(
                LINK_CREATED,
                term=match.term,
                target=match.target,
                document_id=view.document_id,
                position=match.start,
            )
        return len(applied)

    # -- event plumbing --------------------------------------------------------

    async def _on_editor_change(self, event: Event) -> None:
        editor = event.payload.get("editor") or self._active_editor()
        if editor is not None:
            await self.handle_editor_change(editor)

    async def _on_editor_paste(self, event: Event) -> None:
        editor = event.payload.get("editor") or self._active_editor()
        if editor is not None:
            await self.handle_paste(editor, event.payload.get("text", ""), event.payload.get("start"))

    def _active_editor(self) -> Editor | None:
        view = self.workspace.get_active_view()
        return view.editor if view else None

    async def _publish(self, name: str, **payload: Any) -> None:
        if self.bus is not None:
            await self.bus.emit(Event(name=name, payload=payload, source=self._SOURCE))
