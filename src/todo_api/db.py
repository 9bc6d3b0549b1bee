from __future__ import annotations

import os
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generator, List, Optional

from .errors import InternalInconsistencyError
from .logging_config import get_logger
from .models import TodoEntity, TodoId

logger = get_logger(__name__)


@dataclass(frozen=True)
class _Cols:
    table: str = "todos"
    id: str = "id"
    title: str = "title"
    completed: str = "completed"


_COLS = _Cols()

_RETURNING = f"RETURNING {_COLS.id}, {_COLS.title}, {_COLS.completed}"

_CREATE_TABLE_SQL = f"""
    CREATE TABLE IF NOT EXISTS {_COLS.table} (
        {_COLS.id} INTEGER PRIMARY KEY AUTOINCREMENT,
        {_COLS.title} TEXT NOT NULL,
        {_COLS.completed} BOOLEAN NOT NULL DEFAULT 0
    )
"""

_SELECT_ALL_SQL = f"SELECT {_COLS.id}, {_COLS.title}, {_COLS.completed} FROM {_COLS.table} ORDER BY {_COLS.id}"
_SELECT_ONE_SQL = f"SELECT {_COLS.id}, {_COLS.title}, {_COLS.completed} FROM {_COLS.table} WHERE {_COLS.id} = ?"
_INSERT_SQL = f"INSERT INTO {_COLS.table} ({_COLS.title}, {_COLS.completed}) VALUES (?, 0) {_RETURNING}"
# Absent fields are passed as NULL and keep their stored value.
_UPDATE_SQL = f"""
    UPDATE {_COLS.table}
    SET {_COLS.title} = COALESCE(?, {_COLS.title}),
        {_COLS.completed} = COALESCE(?, {_COLS.completed})
    WHERE {_COLS.id} = ?
    {_RETURNING}
"""
_DELETE_SQL = f"DELETE FROM {_COLS.table} WHERE {_COLS.id} = ?"


# PUBLIC_INTERFACE
class SQLiteRepository:
    """
    SQLite-backed storage for todo items.

    Every operation opens its own short-lived connection and runs a single
    statement, so atomicity of each mutation is left to SQLite. The table is
    created on construction if it does not exist yet; a store that cannot be
    opened raises ``sqlite3.Error`` from the constructor.
    """

    def __init__(self, db_path: str) -> None:
        os.makedirs(os.path.dirname(db_path) or ".", exist_ok=True)
        self._db_path = db_path
        self._init_db()

    @contextmanager
    def _conn(self) -> Generator[sqlite3.Connection, None, None]:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def _init_db(self) -> None:
        with self._conn() as conn:
            conn.execute(_CREATE_TABLE_SQL)
        logger.info("SQLite store ready at %s", self._db_path)

    def _row_to_entity(self, row: sqlite3.Row) -> TodoEntity:
        return {
            "id": int(row[_COLS.id]),
            "title": str(row[_COLS.title]),
            "completed": bool(row[_COLS.completed]),
        }

    def list(self) -> List[TodoEntity]:
        """Return every todo in insertion (id) order."""
        with self._conn() as conn:
            rows = conn.execute(_SELECT_ALL_SQL).fetchall()
            return [self._row_to_entity(r) for r in rows]

    def get(self, todo_id: TodoId) -> Optional[TodoEntity]:
        """Return a todo by id, or None if not found."""
        with self._conn() as conn:
            row = conn.execute(_SELECT_ONE_SQL, (todo_id,)).fetchone()
            return self._row_to_entity(row) if row else None

    def create(self, title: str) -> TodoEntity:
        """Insert a new, incomplete todo and return the stored row."""
        with self._conn() as conn:
            # Drain RETURNING rows so the statement is finished before commit.
            rows = conn.execute(_INSERT_SQL, (title,)).fetchall()
        assert len(rows) == 1
        return self._row_to_entity(rows[0])

    def update(
        self,
        todo_id: TodoId,
        title: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> Optional[TodoEntity]:
        """
        Apply the supplied fields to an existing todo.

        Returns None if the todo does not exist and the current row unchanged
        when no field is supplied.

        Raises:
            InternalInconsistencyError: if the row disappears between the
                existence check and the update.
        """
        current = self.get(todo_id)
        if current is None:
            return None
        if title is None and completed is None:
            return current

        completed_value = None if completed is None else int(completed)
        with self._conn() as conn:
            rows = conn.execute(_UPDATE_SQL, (title, completed_value, todo_id)).fetchall()
        if not rows:
            logger.error("Todo %s vanished between existence check and update", todo_id)
            raise InternalInconsistencyError("Failed to update todo")
        return self._row_to_entity(rows[0])

    def delete(self, todo_id: TodoId) -> int:
        """Delete a todo by id and return the number of rows removed."""
        with self._conn() as conn:
            cur = conn.execute(_DELETE_SQL, (todo_id,))
            return cur.rowcount
