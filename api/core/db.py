"""
Async database access helpers (raw SQL) using asyncpg.

The pool is created once per process by the FastAPI lifespan (see
`api/main.py`), stored on `app.state.pool`, and handed to route handlers
through the `get_pool` dependency. Repository functions receive it (or a
connection taken from it) as their first argument.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import asyncpg
from fastapi import Request

from . import settings

logger = logging.getLogger(__name__)

# Anything with fetchrow/fetch/execute: an asyncpg.Pool or asyncpg.Connection.
Executor = Any


async def create_pool() -> asyncpg.Pool:
    pool = await asyncpg.create_pool(**settings.database_params())
    logger.info("db_pool_created host=%s database=%s", settings.db_host(), settings.db_name())
    return pool


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()
    logger.info("db_pool_closed")


def get_pool(request: Request) -> asyncpg.Pool:
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise RuntimeError("DB pool is not initialized. It is created in the app lifespan.")
    return pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(executor: Executor, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await executor.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(executor: Executor, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await executor.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(executor: Executor, sql: str, *args: Any) -> None:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
    """
    await executor.execute(sql, *args)


@asynccontextmanager
async def transaction(pool: asyncpg.Pool) -> AsyncIterator[asyncpg.Connection]:
    """
    Hold one pooled connection inside a transaction.

    Commits when the block exits normally, rolls back on any exception, and
    returns the connection to the pool either way.
    """
    async with pool.acquire() as conn:  # type: asyncpg.Connection
        async with conn.transaction():
            yield conn
