"""Tests for autolinker.core.events — EventBus and Event."""

from __future__ import annotations

import asyncio
from dataclasses import FrozenInstanceError

import pytest

from autolinker.core.events import EDITOR_CHANGE, EDITOR_PASTE, Event, EventBus

pytestmark = pytest.mark.smoke


# ---------------------------------------------------------------------------
# on / off / emit lifecycle
# ---------------------------------------------------------------------------


async def test_on_off_emit_lifecycle():
    bus = EventBus()
    received: list[Event] = []

    def hook(event: Event) -> None:
        received.append(event)

    bus.on(EDITOR_CHANGE, hook)
    evt = Event(name=EDITOR_CHANGE, payload={"editor": None}, source="test")
    await bus.emit(evt)

    assert received == [evt]

    bus.off(EDITOR_CHANGE, hook)
    await bus.emit(evt)

    assert len(received) == 1  # hook was removed


async def test_hooks_only_receive_their_event():
    bus = EventBus()
    received: list[str] = []

    bus.on(EDITOR_CHANGE, lambda event: received.append("change"))
    bus.on(EDITOR_PASTE, lambda event: received.append("paste"))

    await bus.emit(Event(name=EDITOR_PASTE))
    assert received == ["paste"]


def test_registering_twice_runs_once():
    bus = EventBus()
    received: list[Event] = []

    def hook(event: Event) -> None:
        received.append(event)

    bus.on("x", hook)
    bus.on("x", hook)
    assert bus.listeners("x") == [hook]


def test_off_unknown_hook_is_ignored():
    bus = EventBus()
    bus.off("never.registered", lambda event: None)


# ---------------------------------------------------------------------------
# sync and async hooks
# ---------------------------------------------------------------------------


async def test_async_hooks_awaited_in_order():
    bus = EventBus()
    order: list[str] = []

    async def first(event: Event) -> None:
        await asyncio.sleep(0)
        order.append("first")

    def second(event: Event) -> None:
        order.append("second")

    bus.on("async.event", first)
    bus.on("async.event", second)
    await bus.emit(Event(name="async.event"))

    assert order == ["first", "second"]


async def test_emit_no_listeners():
    bus = EventBus()
    await bus.emit(Event(name="nobody.listening"))


# ---------------------------------------------------------------------------
# failing hooks
# ---------------------------------------------------------------------------


async def test_hook_exception_does_not_block_others():
    bus = EventBus()
    received: list[str] = []

    def bad_hook(event: Event) -> None:
        raise RuntimeError("boom")

    async def good_hook(event: Event) -> None:
        received.append("ok")

    bus.on("err.event", bad_hook)
    bus.on("err.event", good_hook)

    await bus.emit(Event(name="err.event"))
    assert received == ["ok"]


def test_event_is_frozen():
    evt = Event(name="frozen.test", payload={"x": 1}, source="test")
    with pytest.raises(FrozenInstanceError):
        evt.name = "changed"  # type: ignore[misc]
