from todo_api.settings import DEFAULT_PORT, get_settings

_ENV_VARS = ("SQLITE_DB_PATH", "CORS_ALLOW_ORIGINS", "HOST", "PORT", "LOG_LEVEL", "PUBLIC_URL")


def _clear_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    _clear_env(monkeypatch)
    settings = get_settings()
    assert settings.sqlite_db_path == "./todo.db"
    assert settings.cors_allow_origins == ["*"]
    assert settings.host == "0.0.0.0"
    assert settings.port == DEFAULT_PORT == 3000
    assert settings.log_level == "INFO"
    assert settings.public_url == "http://localhost:3000"


def test_environment_overrides(monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("SQLITE_DB_PATH", "/tmp/x/todos.db")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.example, http://b.example,")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.sqlite_db_path == "/tmp/x/todos.db"
    assert settings.cors_allow_origins == ["http://a.example", "http://b.example"]
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.public_url == "http://localhost:8080"


def test_invalid_port_falls_back(monkeypatch):
    _clear_env(monkeypatch)
    for raw in ("abc", "0", "70000"):
        monkeypatch.setenv("PORT", raw)
        assert get_settings().port == DEFAULT_PORT


def test_empty_values_use_defaults(monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("SQLITE_DB_PATH", "")
    monkeypatch.setenv("PUBLIC_URL", "")
    settings = get_settings()
    assert settings.sqlite_db_path == "./todo.db"
    assert settings.public_url == "http://localhost:3000"


def test_public_url_trailing_slash_stripped(monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("PUBLIC_URL", "https://todos.example/")
    assert get_settings().public_url == "https://todos.example"
