"""
Utility script to generate and write the OpenAPI schema for the Todo List API.

Serializes the application's OpenAPI schema to interfaces/openapi.json so that
API clients and documentation tools can consume a stable description without
running the server.

Usage:
    python -m todo_api.generate_openapi [output_path]
"""
from __future__ import annotations

import json
import os
import sys
from typing import Any, Dict, List, Optional

from fastapi import FastAPI

from .logging_config import get_logger
from .main import create_app, openapi_tags

logger = get_logger(__name__)

DEFAULT_OUTPUT = os.path.join("interfaces", "openapi.json")


def _ensure_tags(schema: Dict[str, Any]) -> None:
    """
    Ensure the OpenAPI schema contains the expected tags metadata without
    overriding tag definitions that are already present.
    """
    existing_tags: List[Dict[str, Any]] = schema.get("tags", []) or []
    existing_names = {t.get("name") for t in existing_tags if isinstance(t, dict)}
    for tag in openapi_tags:
        if tag.get("name") not in existing_names:
            existing_tags.append(tag)
    if existing_tags:
        schema["tags"] = existing_tags


# PUBLIC_INTERFACE
def build_openapi(app: Optional[FastAPI] = None) -> Dict[str, Any]:
    """Return the OpenAPI schema of the given (or a freshly built) application."""
    schema = (app or create_app()).openapi()
    _ensure_tags(schema)
    return schema


# PUBLIC_INTERFACE
def generate_openapi(out_path: str = DEFAULT_OUTPUT, app: Optional[FastAPI] = None) -> str:
    """Write the OpenAPI schema to ``out_path`` and return the written path."""
    schema = build_openapi(app)
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(schema, f, indent=2, ensure_ascii=False)
    logger.info("Wrote OpenAPI schema to: %s", out_path)
    return out_path


def main() -> None:
    generate_openapi(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_OUTPUT)


if __name__ == "__main__":
    main()
