"""
Todo List API package.

A FastAPI service exposing CRUD operations over a single SQLite-backed
``todos`` table. The ASGI application lives in ``todo_api.main`` (``app`` or
``create_app()``); ``python -m todo_api`` serves it with uvicorn.
"""

__version__ = "1.0.0"
