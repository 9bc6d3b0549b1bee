from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List

DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - SQLITE_DB_PATH: path to the sqlite db file. Default './todo.db'
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - HOST: interface the server binds to (default: 0.0.0.0)
    - PORT: port the server listens on (default: 3000)
    - LOG_LEVEL: logging level name (default: INFO)
    - PUBLIC_URL: server URL advertised in the OpenAPI document
      (default: http://localhost:<PORT>)
    """

    sqlite_db_path: str
    cors_allow_origins: List[str]
    host: str
    port: int
    log_level: str
    public_url: str


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_port(value: str, default: int = DEFAULT_PORT) -> int:
    try:
        port = int(value.strip())
    except ValueError:
        return default
    if not (0 < port < 65536):
        return default
    return port


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    port = _parse_port(_get_env("PORT", str(DEFAULT_PORT)))
    return Settings(
        sqlite_db_path=_get_env("SQLITE_DB_PATH", "./todo.db").strip(),
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*")),
        host=_get_env("HOST", "0.0.0.0").strip(),
        port=port,
        log_level=_get_env("LOG_LEVEL", "INFO").strip().upper(),
        public_url=_get_env("PUBLIC_URL", f"http://localhost:{port}").strip().rstrip("/"),
    )
