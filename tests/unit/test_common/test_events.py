"""
Test Event Emitter
"""

import pytest

from crud_backend.common.events import EventEmitter, get_event_emitter


@pytest.mark.asyncio
async def test_emit_sync_and_async_handlers_in_order():
    emitter = EventEmitter()
    calls = []

    def sync_handler(payload):
        calls.append(("sync", payload["n"]))

    async def async_handler(payload):
        calls.append(("async", payload["n"]))

    emitter.on("Product.saved", sync_handler)
    emitter.on("Product.saved", async_handler)

    invoked = await emitter.emit("Product.saved", {"n": 1})

    assert invoked == 2
    assert calls == [("sync", 1), ("async", 1)]


@pytest.mark.asyncio
async def test_failing_handler_does_not_stop_others():
    emitter = EventEmitter()
    calls = []

    def broken(payload):
        raise RuntimeError("boom")

    emitter.on("Product.deleted", broken)
    emitter.on("Product.deleted", lambda payload: calls.append(payload))

    invoked = await emitter.emit("Product.deleted", {"entity": None})

    assert invoked == 1
    assert calls == [{"entity": None}]


@pytest.mark.asyncio
async def test_emit_without_listeners():
    emitter = EventEmitter()
    assert await emitter.emit("Nobody.listens") == 0


@pytest.mark.asyncio
async def test_off_removes_handler():
    emitter = EventEmitter()
    calls = []

    def handler(payload):
        calls.append(payload)

    emitter.on("Employee.saved", handler)
    assert emitter.listener_count("Employee.saved") == 1

    emitter.off("Employee.saved", handler)
    emitter.off("Unknown.event", handler)

    assert emitter.listener_count("Employee.saved") == 0
    await emitter.emit("Employee.saved", {})
    assert calls == []


def test_get_event_emitter_is_singleton():
    assert get_event_emitter() is get_event_emitter()
