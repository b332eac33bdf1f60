"""
User API endpoints.
"""

from __future__ import annotations

from typing import Any

import asyncpg
from fastapi import APIRouter, Body, Depends

from core import db, errors, validation

from . import repository, schemas

router = APIRouter()


@router.get("/users")
async def list_users(pool: asyncpg.Pool = Depends(db.get_pool)) -> list[dict]:
    try:
        return await repository.list_users(pool)
    except errors.STORE_ERRORS as exc:
        raise errors.read_failed(exc, action="list_users") from exc


@router.post("/users", status_code=201)
async def create_user(
    payload: Any = Body(default=None),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    user = validation.require_valid(schemas.UserCreate, payload)
    try:
        return await repository.create_user(pool, name=user.name, email=user.email)
    except errors.STORE_ERRORS as exc:
        raise errors.write_failed(exc, action="create_user") from exc
