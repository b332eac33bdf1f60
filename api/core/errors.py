"""
Store error pass-through.

Driver failures are not classified: the asyncpg error fields are copied into
the HTTP error body as they are.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import asyncpg
from fastapi import HTTPException, status

logger = logging.getLogger(__name__)

# Server-side errors (constraint violations, bad casts), client-side argument
# encoding errors (e.g. a malformed UUID path segment), and failures to open or
# acquire a connection (refused, unresolvable host, connect timeout).
STORE_ERRORS: tuple[type[Exception], ...] = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)

_POSTGRES_FIELDS = (
    "sqlstate",
    "severity",
    "message",
    "detail",
    "hint",
    "schema_name",
    "table_name",
    "column_name",
    "constraint_name",
)


def store_error_detail(exc: Exception) -> dict[str, Any]:
    detail: dict[str, Any] = {}
    for name in _POSTGRES_FIELDS:
        value = getattr(exc, name, None)
        if value is not None:
            detail[name] = value
    detail.setdefault("message", str(exc))
    return detail


def store_error(exc: Exception, *, status_code: int, action: str) -> HTTPException:
    logger.warning(
        "store_error action=%s sqlstate=%s error=%s",
        action,
        getattr(exc, "sqlstate", None),
        exc,
    )
    return HTTPException(status_code=status_code, detail=store_error_detail(exc))


def read_failed(exc: Exception, *, action: str) -> HTTPException:
    return store_error(exc, status_code=status.HTTP_400_BAD_REQUEST, action=action)


def write_failed(exc: Exception, *, action: str) -> HTTPException:
    return store_error(exc, status_code=422, action=action)
