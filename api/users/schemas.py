"""
User request schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1)
    # Format and presence are not checked here; the store decides.
    email: str | None = None
