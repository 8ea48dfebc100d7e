# cqrsbus

Small in-process buses for applications built around Command Query
Responsibility Segregation:

- a **command bus** (`cqrsbus.commandbus`) that runs write operations and
  sends the domain events they produce on to an event bus,
- a **query bus** (`cqrsbus.querybus`) that routes read operations to a
  single handler and returns a `QueryResult`,
- an **event bus** (`cqrsbus.eventbus`) that delivers domain events to every
  handler registered for their type, either one after another or
  concurrently in threads.

The package has no dependencies beyond the standard library and supports
Python 3.10 and later.

## Installation

```
pip install cqrsbus
```

## Events

An event is any object derived from `Event` whose `event_type()` method
returns the name it is routed by.

```python
from cqrsbus.eventbus import Event, default_sync_event_bus


class UserRegistered(Event):
    def __init__(self, username):
        self.username = username

    def event_type(self):
        return "UserRegistered"


bus = default_sync_event_bus()
bus.register("UserRegistered", lambda event: print("welcome", event.username))
bus.dispatch(UserRegistered("john_doe"))
```

`default_sync_event_bus()` (the same as `EventBus()`) runs the handlers one
after another, in the order they were registered. `default_async_event_bus()`
(the same as `EventBus(asynchronous=True)`) starts each handler in its own
daemon thread and returns straight away. If an event has no handlers,
`dispatch` raises `HandlerNotFoundError`, a subclass of `LookupError`.

## Commands

A command is a plain object. It is routed by its type, so registering one
instance of a command class covers all commands of that class. A
`CommandHandler` does the work in `handle`, returns the handler whose events
should be collected (usually itself), and hands those events over through
`collect_events`. Each of them is dispatched to the event bus the command
bus was built with.

```python
from cqrsbus.commandbus import default_command_bus
from cqrsbus.eventbus import default_sync_event_bus
from cqrsbus.validate_username import ValidateUsernameCommand, ValidateUsernameHandler

events = default_sync_event_bus()
events.register("UsernameValidated", lambda event: print(event))

commands = default_command_bus(events)
commands.register(ValidateUsernameCommand("placeholder"), ValidateUsernameHandler())

commands.execute(ValidateUsernameCommand("validuser123"))
```

`execute` runs the command and returns once it has finished. `dispatch` runs
it in a background daemon thread and returns that thread at once, so the
caller may `join()` it; an error raised in the background, such as a
missing handler, is not passed back to the caller. More than one handler may
be registered for a command type, and each one runs in turn. Running a
command that has no handlers raises `HandlerNotFoundError`.

## Queries

A query is routed by its type to the single handler registered for it. If
the type is registered again, the later handler takes the place of the
earlier one. `ask` returns the handler's `QueryResult`, a frozen dataclass
with a `payload` and a `success` flag. Asking a query with no handler raises
`HandlerNotFoundError`.

```python
from cqrsbus.querybus import default_query_bus
from cqrsbus.get_username import GetUsernameQuery, GetUsernameQueryHandler

queries = default_query_bus()
queries.register(GetUsernameQuery(0), GetUsernameQueryHandler())

result = queries.ask(GetUsernameQuery(1))
print(result.success, result.payload)   # True john_doe
```

## Bundled examples

- `cqrsbus.get_username`: `GetUsernameQuery` and `GetUsernameQueryHandler`,
  which look a user name up by id in a fixed table of five users (ids 1 to
  5). An unknown id gives a failed result with the payload `unknown_user`.
- `cqrsbus.user_register`: `RegisterCommand` and `RegisterCommandHandler`,
  which print the registration and record a `UserRegistered` event.
- `cqrsbus.validate_username`: `ValidateUsernameCommand` and
  `ValidateUsernameHandler`, which check that a user name is 8 to 16 bytes
  long in UTF-8 and record a `UsernameValidated` event with `is_valid` and a
  `reason`.

The query example can be run from the command line:

```
cqrsbus-get-username
```

It asks for the user names with ids 1 to 6 and prints whether each was found.

## What it does not do

The buses live in one process and keep nothing: events are not stored or
replayed, and there is no transport between processes. The
`RegisterCommandHandler` example does not save users anywhere; it only
prints and records the event.

## Running the tests

```
pip install "cqrsbus[test]"
pytest
```