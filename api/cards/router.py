"""
Card and card-user API endpoints.
"""

from __future__ import annotations

from typing import Any

import asyncpg
from fastapi import APIRouter, Body, Depends, HTTPException, Query

from core import db, errors, validation

from . import repository, schemas

router = APIRouter()


@router.get("/cards")
async def list_cards(
    list_id: str | None = Query(default=None, alias="listId"),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[dict]:
    try:
        return await repository.list_cards(pool, list_id=list_id)
    except errors.STORE_ERRORS as exc:
        raise errors.read_failed(exc, action="list_cards") from exc


@router.post("/cards", status_code=201)
async def create_card(
    payload: Any = Body(default=None),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    """
    Create a card in a list and record `userId` as its owner, atomically.
    """
    card = validation.require_valid(schemas.CardCreate, payload)
    try:
        return await repository.create_card_with_owner(
            pool,
            title=card.title,
            description=card.description,
            due_date=card.due_date,
            list_id=card.list_id,
            user_id=card.user_id,
        )
    except errors.STORE_ERRORS as exc:
        raise errors.write_failed(exc, action="create_card") from exc


@router.get("/cards/{card_id}/creator")
async def get_card_creator(
    card_id: str,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    try:
        row = await repository.get_card_creator(pool, card_id)
    except errors.STORE_ERRORS as exc:
        raise errors.read_failed(exc, action="get_card_creator") from exc
    if row is None:
        raise HTTPException(status_code=404, detail="Card or creator not found.")
    return row


@router.get("/cards/{card_id}/users")
async def list_card_users(
    card_id: str,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[dict]:
    try:
        return await repository.list_card_users(pool, card_id)
    except errors.STORE_ERRORS as exc:
        raise errors.read_failed(exc, action="list_card_users") from exc


@router.post("/card-users", status_code=201)
async def create_card_user(
    payload: Any = Body(default=None),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    card_user = validation.require_valid(schemas.CardUserCreate, payload)
    try:
        return await repository.create_card_user(
            pool,
            card_id=card_user.card_id,
            user_id=card_user.user_id,
            is_owner=card_user.is_owner,
        )
    except errors.STORE_ERRORS as exc:
        raise errors.write_failed(exc, action="create_card_user") from exc
