from __future__ import annotations

from fastapi import Request

from .db import SQLiteRepository
from .settings import Settings


# PUBLIC_INTERFACE
def open_repository(settings: Settings) -> SQLiteRepository:
    """
    Open the configured store, creating the todos table if needed.

    Called once at application startup; any ``sqlite3.Error`` is left to
    propagate so that startup fails.
    """
    return SQLiteRepository(settings.sqlite_db_path)


# PUBLIC_INTERFACE
def get_repository(request: Request) -> SQLiteRepository:
    """
    FastAPI dependency returning the repository opened at startup.
    """
    return request.app.state.repository
