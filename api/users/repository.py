"""
User persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_users(executor: db.Executor) -> list[dict[str, Any]]:
    return await db.fetch_all(
        executor,
        """
        SELECT id, name, email
        FROM users
        """,
    )


async def create_user(executor: db.Executor, *, name: str, email: str | None) -> dict[str, Any]:
    row = await db.fetch_one(
        executor,
        """
        INSERT INTO users (name, email)
        VALUES ($1, $2)
        RETURNING id, name, email
        """,
        name,
        email,
    )
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row
