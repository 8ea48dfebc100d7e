"""Command that checks a username's length and reports the outcome."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cqrsbus.commandbus import CommandHandler
from cqrsbus.eventbus import Event

__all__ = ["UsernameValidated", "ValidateUsernameCommand", "ValidateUsernameHandler"]

MIN_LENGTH = 8
MAX_LENGTH = 16


@dataclass(frozen=True)
class ValidateUsernameCommand:
    """Request to validate a username."""

    username: str = ""


@dataclass(frozen=True)
class UsernameValidated(Event):
    """The outcome of validating a username."""

    username: str = ""
    is_valid: bool = False
    reason: str = ""

    def event_type(self) -> str:
        return "UsernameValidated"


class ValidateUsernameHandler(CommandHandler):
    """Checks that usernames are 8 to 16 bytes long and records the result."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def handle(self, command: Any) -> ValidateUsernameHandler:
        """Validate the username in ``command``; other commands are ignored."""
        if isinstance(command, ValidateUsernameCommand):
            print(f"Validating username: {command.username}")
            length = len(command.username.encode("utf-8"))
            if MIN_LENGTH <= length <= MAX_LENGTH:
                is_valid = True
                reason = "Username is valid"
                print("Username validation passed")
            else:
                is_valid = False
                if length < MIN_LENGTH:
                    reason = "Username too short (minimum 8 characters)"
                else:
                    reason = "Username too long (maximum 16 characters)"
                print(f"Username validation failed: {reason}")
            self._events.append(
                UsernameValidated(
                    username=command.username, is_valid=is_valid, reason=reason
                )
            )
        return self

    def collect_events(self) -> list[Event]:
        """Return every event recorded so far."""
        return list(self._events)