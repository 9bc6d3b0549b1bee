"""
Run the Todo List API with uvicorn.

Usage:
    python -m todo_api
    todo-api

Host, port and the database path come from the environment (see settings.py).
"""
from __future__ import annotations

import uvicorn

from .logging_config import get_logger
from .main import DOCS_PATH, create_app
from .settings import get_settings

logger = get_logger(__name__)


# PUBLIC_INTERFACE
def main() -> None:
    """Serve the application until interrupted."""
    settings = get_settings()
    app = create_app(settings)
    logger.info("Server listening at http://%s:%s", settings.host, settings.port)
    logger.info("Swagger UI available at %s%s", settings.public_url, DOCS_PATH)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
