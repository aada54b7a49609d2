"""Settings loaded from environment variables (+ optional .env)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from dotenv import load_dotenv

ENV_PREFIX = "TASKS"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.replace(",", " ").split() if p.strip()]


@dataclass(frozen=True)
class Settings:
    database_url: str
    log_level: str
    log_dir: Path
    cors_origins: List[str]
    db_connect_retries: int
    db_retry_delay: float

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            database_url=_env("DATABASE_URL", "sqlite:///./tasks.db"),
            log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
            log_dir=Path(_env(_k("LOG_DIR"), ".local/tasks")).expanduser(),
            cors_origins=_env_list(
                _k("CORS_ORIGINS"),
                ["http://localhost", "http://localhost:8000"],
            ),
            db_connect_retries=max(1, _env_int(_k("DB_CONNECT_RETRIES"), 10)),
            db_retry_delay=max(0.0, _env_float(_k("DB_RETRY_DELAY"), 2.0)),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
