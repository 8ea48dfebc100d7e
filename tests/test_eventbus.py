import queue
import threading

import pytest

from cqrsbus.eventbus import (
    Event,
    EventBus,
    HandlerNotFoundError,
    default_async_event_bus,
    default_sync_event_bus,
)


class Ping(Event):
    def __init__(self, value=0):
        self.value = value

    def event_type(self):
        return "Ping"


class Pong(Event):
    def event_type(self):
        return "Pong"


def _drain(q, count):
    return [q.get(timeout=5) for _ in range(count)]


def test_sync_dispatch_calls_handlers_in_order():
    bus = default_sync_event_bus()
    calls = []
    bus.register("Ping", lambda e: calls.append(("first", e.value)))
    bus.register("Ping", lambda e: calls.append(("second", e.value)))
    bus.dispatch(Ping(7))
    assert calls == [("first", 7), ("second", 7)]


def test_sync_dispatch_routes_by_event_type():
    bus = default_sync_event_bus()
    pings, pongs = [], []
    bus.register("Ping", pings.append)
    bus.register("Pong", pongs.append)
    event = Pong()
    bus.dispatch(event)
    assert pongs == [event]
    assert pings == []


def test_dispatch_without_handler_raises():
    bus = default_sync_event_bus()
    bus.register("Pong", lambda e: None)
    with pytest.raises(HandlerNotFoundError, match="no handlers registered for event type: Ping"):
        bus.dispatch(Ping())


def test_async_dispatch_without_handler_raises():
    bus = default_async_event_bus()
    with pytest.raises(HandlerNotFoundError, match="no handlers registered for event type: Ping"):
        bus.dispatch(Ping())


def test_async_dispatch_runs_every_handler():
    bus = default_async_event_bus()
    delivered = queue.Queue()
    bus.register("Ping", lambda e: delivered.put(("first", e.value)))
    bus.register("Ping", lambda e: delivered.put(("second", e.value)))
    bus.dispatch(Ping(3))
    assert sorted(_drain(delivered, 2)) == [("first", 3), ("second", 3)]
    assert delivered.empty()


def test_async_handler_runs_in_other_thread():
    bus = default_async_event_bus()
    delivered = queue.Queue()
    caller = threading.get_ident()
    bus.register("Ping", lambda e: delivered.put((e.value, threading.get_ident() == caller)))
    bus.dispatch(Ping(5))
    assert _drain(delivered, 1) == [(5, False)]
    assert delivered.empty()


def test_factories_set_mode():
    assert default_async_event_bus().asynchronous is True
    assert default_sync_event_bus().asynchronous is False
    assert EventBus().asynchronous is False


def test_event_is_abstract():
    with pytest.raises(TypeError):
        Event()