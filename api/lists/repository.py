"""
List persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core import db


async def list_lists(
    executor: db.Executor,
    *,
    board_id: UUID | str | None = None,
) -> list[dict[str, Any]]:
    """
    All lists, or only the lists of `board_id` when given.
    """
    if board_id is None:
        return await db.fetch_all(
            executor,
            """
            SELECT id, name, board_id AS "boardId"
            FROM lists
            """,
        )
    return await db.fetch_all(
        executor,
        """
        SELECT id, name, board_id AS "boardId"
        FROM lists
        WHERE board_id = $1
        """,
        board_id,
    )


async def create_list(executor: db.Executor, *, name: str, board_id: UUID) -> dict[str, Any]:
    row = await db.fetch_one(
        executor,
        """
        INSERT INTO lists (name, board_id)
        VALUES ($1, $2)
        RETURNING id, name, board_id AS "boardId"
        """,
        name,
        board_id,
    )
    if row is None:
        raise RuntimeError("Failed to create list.")
    return row
