"""Command bus that runs commands through their registered handlers."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Any

from cqrsbus.eventbus import Event, EventBus, HandlerNotFoundError

__all__ = ["CommandBus", "CommandHandler", "default_command_bus"]


class CommandHandler(ABC):
    """Executes one kind of command and collects the events it produced."""

    @abstractmethod
    def handle(self, command: Any) -> CommandHandler:
        """Run ``command`` and return the handler whose events to collect."""

    @abstractmethod
    def collect_events(self) -> list[Event]:
        """Return the domain events produced while handling commands."""


class CommandBus:
    """Maps command types to handlers and publishes their events."""

    def __init__(self, event_bus: EventBus) -> None:
        self.event_bus = event_bus
        self._handlers: defaultdict[type, list[CommandHandler]] = defaultdict(list)

    def dispatch(self, command: Any) -> threading.Thread:
        """Run ``command`` in a background thread and return that thread."""
        thread = threading.Thread(target=self._handle, args=(command,), daemon=True)
        thread.start()
        return thread

    def execute(self, command: Any) -> None:
        """Run ``command`` and wait for it to finish."""
        self._handle(command)

    def register(self, command: Any, handler: CommandHandler) -> None:
        """Add ``handler`` for commands of the same type as ``command``."""
        self._handlers[type(command)].append(handler)

    def _handle(self, command: Any) -> None:
        command_type = type(command)
        handlers = list(self._handlers.get(command_type, ()))
        if not handlers:
            raise HandlerNotFoundError(
                f"no handlers registered for command type: {command_type.__name__}"
            )
        for handler in handlers:
            result = handler.handle(command)
            for event in result.collect_events():
                self.event_bus.dispatch(event)


def default_command_bus(event_bus: EventBus) -> CommandBus:
    """Return a command bus that publishes events to ``event_bus``."""
    return CommandBus(event_bus)