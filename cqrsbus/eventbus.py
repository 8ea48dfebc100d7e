"""Event bus that routes domain events to handlers by event type."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Callable

__all__ = [
    "Event",
    "EventBus",
    "EventHandler",
    "HandlerNotFoundError",
    "default_async_event_bus",
    "default_sync_event_bus",
]


class HandlerNotFoundError(LookupError):
    """Raised when a message is sent to a bus with no handler for its type."""


class Event(ABC):
    """A domain event: an immutable fact about something that happened."""

    @abstractmethod
    def event_type(self) -> str:
        """Return the identifier the event bus routes this event by."""


EventHandler = Callable[[Event], None]


class EventBus:
    """Routes events to every handler registered for their event type.

    When ``asynchronous`` is true each handler runs in its own thread and
    ``dispatch`` returns without waiting; otherwise handlers run one after
    another in registration order.
    """

    def __init__(self, asynchronous: bool = False) -> None:
        self.asynchronous = asynchronous
        self._handlers: defaultdict[str, list[EventHandler]] = defaultdict(list)

    def dispatch(self, event: Event) -> None:
        """Send ``event`` to all handlers registered for its type."""
        event_type = event.event_type()
        handlers = list(self._handlers.get(event_type, ()))
        if not handlers:
            raise HandlerNotFoundError(
                f"no handlers registered for event type: {event_type}"
            )
        if self.asynchronous:
            for handler in handlers:
                threading.Thread(target=handler, args=(event,), daemon=True).start()
        else:
            for handler in handlers:
                handler(event)

    def register(self, event_type: str, handler: EventHandler) -> None:
        """Add ``handler`` for events whose ``event_type()`` is ``event_type``."""
        self._handlers[event_type].append(handler)


def default_async_event_bus() -> EventBus:
    """Return an event bus that runs handlers concurrently."""
    return EventBus(asynchronous=True)


def default_sync_event_bus() -> EventBus:
    """Return an event bus that runs handlers one by one."""
    return EventBus(asynchronous=False)