from __future__ import annotations

from typing import NewType, TypedDict

# An id that has passed validation (positive, fits SQLite INTEGER).
# Produced by validation.parse_id and consumed by the storage layer.
TodoId = NewType("TodoId", int)


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A lightweight domain model representing a stored Todo row.

    Fields:
    - id: Unique integer identifier assigned by storage
    - title: Todo text, never null
    - completed: Boolean completion flag, false on creation
    """

    id: int
    title: str
    completed: bool
