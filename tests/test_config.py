from __future__ import annotations

from pathlib import Path

from config import Settings


def test_defaults(monkeypatch):
    for name in (
        "DATABASE_URL",
        "TASKS_LOG_LEVEL",
        "TASKS_LOG_DIR",
        "TASKS_CORS_ORIGINS",
        "TASKS_DB_CONNECT_RETRIES",
        "TASKS_DB_RETRY_DELAY",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.database_url == "sqlite:///./tasks.db"
    assert s.log_level == "INFO"
    assert s.log_dir == Path(".local/tasks")
    assert s.cors_origins == ["http://localhost", "http://localhost:8000"]
    assert s.db_connect_retries == 10
    assert s.db_retry_delay == 2.0


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db/tasks")
    monkeypatch.setenv("TASKS_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKS_CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("TASKS_DB_CONNECT_RETRIES", "3")
    monkeypatch.setenv("TASKS_DB_RETRY_DELAY", "0.5")

    s = Settings.from_env()
    assert s.database_url == "postgresql://u:p@db/tasks"
    assert s.log_level == "DEBUG"
    assert s.cors_origins == ["http://a.test", "http://b.test"]
    assert s.db_connect_retries == 3
    assert s.db_retry_delay == 0.5


def test_bad_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("TASKS_DB_CONNECT_RETRIES", "many")
    monkeypatch.setenv("TASKS_DB_RETRY_DELAY", "soon")

    s = Settings.from_env()
    assert s.db_connect_retries == 10
    assert s.db_retry_delay == 2.0
