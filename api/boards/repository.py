"""
Board persistence (raw SQL).

A board and its admin link are written in one transaction so a board row
never exists without exactly one admin.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

import asyncpg

from core import db


async def list_boards(executor: db.Executor) -> list[dict[str, Any]]:
    """
    Boards joined to their admin user.
    """
    return await db.fetch_all(
        executor,
        """
        SELECT b.id, b.name, bu.user_id AS "adminUserId"
        FROM boards b
        JOIN board_users bu ON bu.board_id = b.id
        WHERE bu.is_admin IS true
        """,
    )


async def create_board_with_admin(
    pool: asyncpg.Pool,
    *,
    name: str,
    admin_user_id: UUID,
) -> dict[str, Any]:
    """
    Insert a board + its admin board_users row in a single transaction.
    """
    async with db.transaction(pool) as conn:
        board = await db.fetch_one(
            conn,
            """
            INSERT INTO boards (name)
            VALUES ($1)
            RETURNING id, name
            """,
            name,
        )
        if board is None or "id" not in board:
            raise RuntimeError("Failed to insert board.")

        await db.execute(
            conn,
            """
            INSERT INTO board_users (board_id, user_id, is_admin)
            VALUES ($1, $2, $3)
            """,
            board["id"],
            admin_user_id,
            True,
        )
        return board
