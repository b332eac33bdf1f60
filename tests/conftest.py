from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import pytest
from fastapi.testclient import TestClient

from core import db
from main import app


class FakeTransaction:
    def __init__(self, conn: "FakeConnection") -> None:
        self.conn = conn

    async def __aenter__(self) -> "FakeTransaction":
        self.conn.events.append("begin")
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        self.conn.events.append("rollback" if exc_type is not None else "commit")
        return False


class FakeConnection:
    """
    Records statements and hands back queued rows, standing in for asyncpg.Connection.
    """

    def __init__(self) -> None:
        self.events: list[str] = []
        self.statements: list[tuple[str, tuple[Any, ...]]] = []
        self.rows: list[dict[str, Any] | None] = []
        self.results: list[list[dict[str, Any]]] = []
        self.execute_error: Exception | None = None

    def transaction(self) -> FakeTransaction:
        return FakeTransaction(self)

    async def fetchrow(self, sql: str, *args: Any) -> dict[str, Any] | None:
        self.statements.append((sql, args))
        return self.rows.pop(0) if self.rows else None

    async def fetch(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self.statements.append((sql, args))
        return self.results.pop(0) if self.results else []

    async def execute(self, sql: str, *args: Any) -> str:
        self.statements.append((sql, args))
        if self.execute_error is not None:
            raise self.execute_error
        return "INSERT 0 1"


class FakePool:
    def __init__(self, conn: FakeConnection) -> None:
        self.conn = conn
        # Raised instead of handing out a connection, like an unreachable server.
        self.connect_error: Exception | None = None

    def _check_connect(self) -> None:
        if self.connect_error is not None:
            raise self.connect_error

    @asynccontextmanager
    async def acquire(self):
        self._check_connect()
        self.conn.events.append("acquire")
        try:
            yield self.conn
        finally:
            self.conn.events.append("release")

    async def fetchrow(self, sql: str, *args: Any) -> dict[str, Any] | None:
        self._check_connect()
        return await self.conn.fetchrow(sql, *args)

    async def fetch(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self._check_connect()
        return await self.conn.fetch(sql, *args)

    async def execute(self, sql: str, *args: Any) -> str:
        self._check_connect()
        return await self.conn.execute(sql, *args)


@pytest.fixture
def fake_conn() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def fake_pool(fake_conn: FakeConnection) -> FakePool:
    return FakePool(fake_conn)


@pytest.fixture
def client(fake_pool: FakePool):
    # No `with` block: the lifespan (real pool) never starts.
    app.dependency_overrides[db.get_pool] = lambda: fake_pool
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
