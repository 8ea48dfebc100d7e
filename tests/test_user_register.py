from cqrsbus.commandbus import default_command_bus
from cqrsbus.eventbus import default_sync_event_bus
from cqrsbus.user_register import (
    RegisterCommand,
    RegisterCommandHandler,
    UserRegistered,
)


def _command(username="alice", email="alice@example.com"):
    password = "password"
    return RegisterCommand(username=username, email=email, password=password)


def test_event_type_is_user_registered():
    assert UserRegistered(username="alice", email="alice@example.com").event_type() == "UserRegistered"


def test_handle_returns_handler_and_records_event():
    handler = RegisterCommandHandler()
    assert handler.handle(_command()) is handler
    assert handler.collect_events() == [
        UserRegistered(username="alice", email="alice@example.com")
    ]


def test_handle_prints_progress(capsys):
    RegisterCommandHandler().handle(_command())
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Registering user: alice with email: alice@example.com",
        "Save user here",
    ]


def test_other_commands_are_ignored():
    handler = RegisterCommandHandler()
    assert handler.handle(object()) is handler
    assert handler.collect_events() == []


def test_events_accumulate_in_order():
    handler = RegisterCommandHandler()
    handler.handle(_command("alice", "alice@example.com"))
    handler.handle(_command("bob", "bob@example.com"))
    assert [e.username for e in handler.collect_events()] == ["alice", "bob"]


def test_collect_events_returns_a_copy():
    handler = RegisterCommandHandler()
    handler.handle(_command())
    handler.collect_events().clear()
    assert len(handler.collect_events()) == 1


def test_registration_through_command_bus_publishes_event():
    received = []
    event_bus = default_sync_event_bus()
    event_bus.register("UserRegistered", received.append)
    command_bus = default_command_bus(event_bus)
    command = _command()
    command_bus.register(command, RegisterCommandHandler())

    command_bus.execute(command)

    assert received == [UserRegistered(username="alice", email="alice@example.com")]