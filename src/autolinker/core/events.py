"""Event bus: the host-facing event source.

Editor hosts publish ``editor.change`` and ``editor.paste`` events here;
:class:`autolinker.linking.plugin.AutoLinker` registers handlers for them and
publishes its own ``link.*`` and ``vault.scanned`` events back. Hooks can be
sync or async and run one after another, so a handler finishes (or suspends
cooperatively) before the next hook for the same event starts.

Usage::

    from autolinker.core.events import EDITOR_CHANGE, Event, EventBus

    bus = EventBus()
    linker.register(bus)
    await bus.emit(Event(name=EDITOR_CHANGE, payload={"editor": buffer}, source="host"))
"""

from __future__ import annotations

import inspect
from collections import defaultdict
from dataclasses import dataclass, field
from time import time
from typing import Any

from loguru import logger

# ---------------------------------------------------------------------------
# Well-known event names
# ---------------------------------------------------------------------------

EDITOR_CHANGE = "editor.change"  # payload: editor
EDITOR_PASTE = "editor.paste"  # payload: editor, text, start (optional Position)
LINK_CREATED = "link.created"  # payload: term, target, document_id, position
LINK_UNDONE = "link.undone"  # payload: text, document_id, position
VAULT_SCANNED = "vault.scanned"  # payload: documents, terms
SETTINGS_CHANGED = "settings.changed"  # payload: settings

# Type alias for hook callables (sync or async)
Hook = Any  # Callable[[Event], None] | Callable[[Event], Awaitable[None]]


@dataclass(frozen=True)
class Event:
    """An immutable event that flows through the bus."""

    name: str
    payload: dict[str, Any] = field(default_factory=dict)
    timestamp: float = field(default_factory=time)
    source: str = ""


class EventBus:
    """Simple pub/sub event bus supporting sync and async hooks."""

    def __init__(self) -> None:
        self._hooks: dict[str, list[Hook]] = defaultdict(list)

    def on(self, event_name: str, hook: Hook) -> None:
        """Register *hook* for *event_name*. Registering twice is a no-op."""
        if hook not in self._hooks[event_name]:
            self._hooks[event_name].append(hook)

    def off(self, event_name: str, hook: Hook) -> None:
        """Unregister *hook* from *event_name*."""
        try:
            self._hooks[event_name].remove(hook)
        except ValueError:
            pass

    def listeners(self, event_name: str) -> list[Hook]:
        """Return a snapshot of the hooks registered for *event_name*."""
        return list(self._hooks.get(event_name, []))

    async def emit(self, event: Event) -> None:
        """Run every hook registered for the event, awaiting async ones in order."""
        for hook in self.listeners(event.name):
            try:
                if inspect.iscoroutinefunction(hook):
                    await hook(event)
                else:
                    hook(event)
            except Exception as exc:
                logger.warning(f"Event hook failed for {event.name}: {exc}")

