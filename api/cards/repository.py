"""
Card persistence (raw SQL).

Card creation writes the card and its owner link in one transaction, so
every card has exactly one creator recorded in card_users.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

import asyncpg

from core import db

_CARD_COLUMNS = 'id, title, description, due_date, list_id AS "listId"'
_CARD_USER_COLUMNS = 'card_id AS "cardId", user_id AS "userId", is_owner AS "isOwner"'


async def list_cards(
    executor: db.Executor,
    *,
    list_id: UUID | str | None = None,
) -> list[dict[str, Any]]:
    if list_id is None:
        return await db.fetch_all(executor, f"SELECT {_CARD_COLUMNS} FROM cards")
    return await db.fetch_all(
        executor,
        f"SELECT {_CARD_COLUMNS} FROM cards WHERE list_id = $1",
        list_id,
    )


async def create_card_with_owner(
    pool: asyncpg.Pool,
    *,
    title: str,
    description: str | None,
    due_date: datetime | None,
    list_id: UUID,
    user_id: UUID,
) -> dict[str, Any]:
    """
    Insert a card + the creator's card_users row (is_owner = true) in a
    single transaction. Returns the card row.
    """
    async with db.transaction(pool) as conn:
        card = await db.fetch_one(
            conn,
            f"""
            INSERT INTO cards (title, description, due_date, list_id)
            VALUES ($1, $2, $3, $4)
            RETURNING {_CARD_COLUMNS}
            """,
            title,
            description,
            due_date,
            list_id,
        )
        if card is None or "id" not in card:
            raise RuntimeError("Failed to insert card.")

        await db.execute(
            conn,
            """
            INSERT INTO card_users (card_id, user_id, is_owner)
            VALUES ($1, $2, true)
            """,
            card["id"],
            user_id,
        )
        return card


async def get_card_creator(executor: db.Executor, card_id: UUID | str) -> dict[str, Any] | None:
    """
    The card joined with its owning user, or None when no owner row exists.
    """
    return await db.fetch_one(
        executor,
        """
        SELECT c.id, c.title, c.description, c.due_date, c.list_id AS "listId",
               u.id AS "creatorId", u.name AS "creatorName", u.email AS "creatorEmail"
        FROM cards c
        JOIN card_users cu ON cu.card_id = c.id AND cu.is_owner = true
        JOIN users u ON u.id = cu.user_id
        WHERE c.id = $1
        """,
        card_id,
    )


async def list_card_users(executor: db.Executor, card_id: UUID | str) -> list[dict[str, Any]]:
    return await db.fetch_all(
        executor,
        """
        SELECT u.id, u.name, u.email, cu.is_owner AS "isOwner"
        FROM card_users cu
        JOIN users u ON u.id = cu.user_id
        WHERE cu.card_id = $1
        ORDER BY cu.is_owner DESC, u.name
        """,
        card_id,
    )


async def create_card_user(
    executor: db.Executor,
    *,
    card_id: UUID,
    user_id: UUID,
    is_owner: bool,
) -> dict[str, Any]:
    row = await db.fetch_one(
        executor,
        f"""
        INSERT INTO card_users (card_id, user_id, is_owner)
        VALUES ($1, $2, $3)
        RETURNING {_CARD_USER_COLUMNS}
        """,
        card_id,
        user_id,
        is_owner,
    )
    if row is None:
        raise RuntimeError("Failed to create card user.")
    return row
