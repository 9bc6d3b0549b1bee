"""
Centralized logging configuration.

All modules obtain their logger via ``get_logger(__name__)``; the root
logger is configured once, either explicitly from the application factory
(with the configured level) or lazily on first use.
"""
from __future__ import annotations

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


# PUBLIC_INTERFACE
def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once and (re)apply the given level.

    Unknown level names fall back to INFO.
    """
    global _initialized
    root = logging.getLogger()
    if not _initialized:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        root.addHandler(handler)
        _initialized = True
    resolved = logging.getLevelName(level.upper())
    root.setLevel(resolved if isinstance(resolved, int) else logging.INFO)


# PUBLIC_INTERFACE
def get_logger(name: str) -> logging.Logger:
    """Return a named logger, configuring logging with defaults if needed."""
    if not _initialized:
        configure_logging()
    return logging.getLogger(name)
