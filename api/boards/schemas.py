"""
Board request schemas.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field


class BoardCreate(BaseModel):
    name: str = Field(..., min_length=1)
    admin_user_id: UUID = Field(..., alias="adminUserId")
