"""Query that looks a user's name up by numeric id."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Any

from cqrsbus.querybus import QueryHandler, QueryResult, default_query_bus

__all__ = ["GetUsernameQuery", "GetUsernameQueryHandler", "main"]

_USERNAMES = {
    1: "john_doe",
    2: "jane_smith",
    3: "bob_wilson",
    4: "alice_johnson",
    5: "charlie_brown",
}

_UNKNOWN_USER = "unknown_user"


@dataclass(frozen=True)
class GetUsernameQuery:
    """Ask for the name of the user with the given id."""

    id: int = 0


class GetUsernameQueryHandler(QueryHandler):
    """Answers username queries from a fixed table of users."""

    def handle(self, query: Any) -> QueryResult:
        """Return the username for ``query.id``, or a failed unknown-user result."""
        if not isinstance(query, GetUsernameQuery):
            raise TypeError(
                f"expected GetUsernameQuery, got {type(query).__name__}"
            )
        username = _USERNAMES.get(query.id)
        if username is None:
            return QueryResult(payload=_UNKNOWN_USER, success=False)
        return QueryResult(payload=username, success=True)


def main(argv: list[str] | None = None) -> int:
    """Look up user ids 1 to 6 and print what the query bus answers."""
    parser = argparse.ArgumentParser(
        description="Look up usernames through a query bus."
    )
    parser.parse_args(argv)

    query_bus = default_query_bus()
    query_bus.register(GetUsernameQuery(), GetUsernameQueryHandler())

    for user_id in range(1, 7):
        result = query_bus.ask(GetUsernameQuery(id=user_id))
        status = "found" if result.success else "not found"
        print(f"User ID {user_id}: {result.payload} ({status})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())