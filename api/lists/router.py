"""
List API endpoints.
"""

from __future__ import annotations

from typing import Any

import asyncpg
from fastapi import APIRouter, Body, Depends, Query

from core import db, errors, validation

from . import repository, schemas

router = APIRouter()


@router.get("/lists")
async def list_lists(
    board_id: str | None = Query(default=None, alias="boardId"),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[dict]:
    try:
        return await repository.list_lists(pool, board_id=board_id)
    except errors.STORE_ERRORS as exc:
        raise errors.read_failed(exc, action="list_lists") from exc


@router.post("/lists", status_code=201)
async def create_list(
    payload: Any = Body(default=None),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    new_list = validation.require_valid(schemas.ListCreate, payload)
    try:
        return await repository.create_list(pool, name=new_list.name, board_id=new_list.board_id)
    except errors.STORE_ERRORS as exc:
        raise errors.write_failed(exc, action="create_list") from exc
