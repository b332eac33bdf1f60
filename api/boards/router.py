"""
Board API endpoints.
"""

from __future__ import annotations

from typing import Any

import asyncpg
from fastapi import APIRouter, Body, Depends

from core import db, errors, validation
from lists import repository as lists_repository

from . import repository, schemas

router = APIRouter()


@router.get("/boards")
async def list_boards(pool: asyncpg.Pool = Depends(db.get_pool)) -> list[dict]:
    try:
        return await repository.list_boards(pool)
    except errors.STORE_ERRORS as exc:
        raise errors.read_failed(exc, action="list_boards") from exc


@router.post("/boards", status_code=201)
async def create_board(
    payload: Any = Body(default=None),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    """
    Create a board and record `adminUserId` as its admin, atomically.
    """
    board = validation.require_valid(schemas.BoardCreate, payload)
    try:
        return await repository.create_board_with_admin(
            pool,
            name=board.name,
            admin_user_id=board.admin_user_id,
        )
    except errors.STORE_ERRORS as exc:
        raise errors.write_failed(exc, action="create_board") from exc


@router.get("/boards/{board_id}/lists")
async def list_board_lists(
    board_id: str,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[dict]:
    # board_id stays a string; a malformed id is a store error (400), like any read.
    try:
        return await lists_repository.list_lists(pool, board_id=board_id)
    except errors.STORE_ERRORS as exc:
        raise errors.read_failed(exc, action="list_board_lists") from exc
