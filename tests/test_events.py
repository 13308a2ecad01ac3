"""Tests for the event bus."""

import pytest

from stacker.core.events import Event, EventBus, EventType, place_event, resize_event


def test_emit_reaches_subscribers():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.PLACE, received.append)

    bus.emit(place_event(source="mouse"))

    assert len(received) == 1
    assert received[0].source == "mouse"


def test_unsubscribe():
    bus = EventBus()
    received = []
    unsubscribe = bus.subscribe(EventType.PLACE, received.append)
    unsubscribe()

    bus.emit(place_event())

    assert received == []


def test_handler_errors_are_contained():
    bus = EventBus()
    received = []

    def broken(event):
        raise ValueError("bad handler")

    bus.subscribe(EventType.PLACE, broken)
    bus.subscribe(EventType.PLACE, received.append)

    bus.emit(place_event())

    assert len(received) == 1


def test_history_is_bounded():
    bus = EventBus(history_limit=3)
    for i in range(5):
        bus.emit(Event(EventType.TICK, data={"frame": i}))

    history = bus.get_history(limit=10)
    assert [e.data["frame"] for e in history] == [2, 3, 4]


def test_history_filter():
    bus = EventBus()
    bus.emit(place_event())
    bus.emit(resize_event(10, 20))

    history = bus.get_history(EventType.RESIZE)
    assert len(history) == 1
    assert history[0].data == {"width": 10, "height": 20}

    bus.clear_history()
    assert bus.get_history() == []


@pytest.mark.asyncio
async def test_queue_preserves_order_and_runs_async_handlers():
    bus = EventBus()
    order = []

    async def async_handler(event):
        order.append(("async", event.type))

    bus.subscribe(EventType.PLACE, lambda event: order.append(("sync", event.type)))
    bus.subscribe(EventType.RESIZE, async_handler)

    bus.queue_event(place_event())
    bus.queue_event(resize_event(1, 1))
    assert bus.pending == 2

    assert await bus.process_queue() == 2
    assert bus.pending == 0
    assert order == [("sync", EventType.PLACE), ("async", EventType.RESIZE)]


def test_emit_skips_async_handlers():
    bus = EventBus()
    called = []

    async def async_handler(event):
        called.append(event)

    bus.subscribe(EventType.PLACE, async_handler)
    bus.emit(place_event())

    assert called == []
