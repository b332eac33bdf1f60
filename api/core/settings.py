"""
Environment-driven settings.

Values are read on each call so tests and `.env` files can change them
without reloading modules.
"""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 3000
DEFAULT_DB_PORT = 5432


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def db_user() -> str:
    return _env_str("DB_USER")


def db_password() -> str:
    return os.environ.get("DB_PASS", "")


def db_host() -> str:
    return _env_str("DB_HOST", "localhost")


def db_name() -> str:
    return _env_str("DB_NAME")


def db_port() -> int:
    return _env_int("DB_PORT", DEFAULT_DB_PORT)


def port() -> int:
    return _env_int("PORT", DEFAULT_PORT)


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def database_params() -> dict[str, Any]:
    # Empty values are left out so asyncpg falls back to libpq env/defaults.
    params: dict[str, Any] = {
        "user": db_user(),
        "password": db_password(),
        "host": db_host(),
        "database": db_name(),
        "port": db_port(),
    }
    return {k: v for k, v in params.items() if v not in ("", None)}
