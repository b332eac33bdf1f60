"""
Card and card-user request schemas.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, StrictBool, field_validator

_YEAR_MONTH = re.compile(r"([0-9]{4})(?:-([0-9]{2}))?")
_INVALID_DUE_DATE = "due_date must be an ISO 8601 date string."


def parse_due_date(value: Any) -> datetime | None:
    """
    Accept an ISO 8601 date or datetime string, as given.

    Reduced precision forms (`2024`, `2024-05`) resolve to the first day of
    the period. Only the format is checked; past dates are allowed. Naive
    values are taken as UTC.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            match = _YEAR_MONTH.fullmatch(value)
            if match:
                parsed = datetime(int(match.group(1)), int(match.group(2) or 1), 1)
            else:
                parsed = datetime.fromisoformat(value)
        except ValueError as exc:
            raise ValueError(_INVALID_DUE_DATE) from exc
    else:
        raise ValueError(_INVALID_DUE_DATE)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class CardCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: str | None = None
    due_date: datetime | None = None
    list_id: UUID = Field(..., alias="listId")
    user_id: UUID = Field(..., alias="userId")

    @field_validator("due_date", mode="before")
    @classmethod
    def _due_date_is_iso(cls, value: Any) -> datetime | None:
        return parse_due_date(value)


class CardUserCreate(BaseModel):
    card_id: UUID = Field(..., alias="cardId")
    user_id: UUID = Field(..., alias="userId")
    is_owner: StrictBool = Field(..., alias="isOwner")
