"""Command that registers a user and announces it with an event."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cqrsbus.commandbus import CommandHandler
from cqrsbus.eventbus import Event

__all__ = ["RegisterCommand", "RegisterCommandHandler", "UserRegistered"]


@dataclass(frozen=True)
class RegisterCommand:
    """Request to register a new user."""

    username: str = ""
    email: str = ""
    password: str = ""


@dataclass(frozen=True)
class UserRegistered(Event):
    """A user has been registered."""

    username: str = ""
    email: str = ""

    def event_type(self) -> str:
        return "UserRegistered"


class RegisterCommandHandler(CommandHandler):
    """Registers users and records a ``UserRegistered`` event for each."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def handle(self, command: Any) -> RegisterCommandHandler:
        """Register the user named by ``command``; other commands are ignored."""
        if isinstance(command, RegisterCommand):
            print(
                f"Registering user: {command.username} with email: {command.email}"
            )
            print("Save user here")
            self._events.append(
                UserRegistered(username=command.username, email=command.email)
            )
        return self

    def collect_events(self) -> list[Event]:
        """Return every event recorded so far."""
        return list(self._events)