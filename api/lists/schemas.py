"""
List request schemas.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field


class ListCreate(BaseModel):
    name: str = Field(..., min_length=1)
    board_id: UUID = Field(..., alias="boardId")
