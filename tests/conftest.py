import pytest
from fastapi.testclient import TestClient

from todo_api.db import SQLiteRepository
from todo_api.main import create_app
from todo_api.settings import Settings


def make_settings(db_path: str) -> Settings:
    return Settings(
        sqlite_db_path=db_path,
        cors_allow_origins=["*"],
        host="127.0.0.1",
        port=3000,
        log_level="INFO",
        public_url="http://localhost:3000",
    )


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "data" / "todos.db")


@pytest.fixture
def settings(db_path):
    return make_settings(db_path)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the client runs startup, which opens the store.
    with TestClient(app) as c:
        yield c


@pytest.fixture
def repo(db_path):
    return SQLiteRepository(db_path)


@pytest.fixture
def settings_factory():
    return make_settings
