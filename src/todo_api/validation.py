from __future__ import annotations

from fastapi import Path

from .errors import InvalidInputError
from .models import TodoId

# Largest value an SQLite INTEGER PRIMARY KEY can hold.
MAX_TODO_ID = 2**63 - 1

INVALID_ID_MESSAGE = "Invalid ID"


# PUBLIC_INTERFACE
def parse_id(raw: str) -> TodoId:
    """
    Parse a raw path segment into a validated todo id.

    Only plain base-10 digit strings whose value lies in 1..MAX_TODO_ID are
    accepted. Signs, whitespace, decimals and the empty string are rejected.

    Raises:
        InvalidInputError: if the value is not a positive integer id.
    """
    if not raw or not raw.isascii() or not raw.isdigit():
        raise InvalidInputError(INVALID_ID_MESSAGE)
    value = int(raw, 10)
    if value <= 0 or value > MAX_TODO_ID:
        raise InvalidInputError(INVALID_ID_MESSAGE)
    return TodoId(value)


# PUBLIC_INTERFACE
def valid_todo_id(
    todo_id: str = Path(..., description="Positive integer id of the todo item"),
) -> TodoId:
    """FastAPI dependency turning the ``{todo_id}`` path parameter into a TodoId."""
    return parse_id(todo_id)
