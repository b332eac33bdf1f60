"""
Explicit request validation.

Handlers take the raw JSON body and call `validate(Model, payload)`. The
result carries either the typed model or the field-level violations, so the
caller decides how to reject the request before any SQL runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from fastapi import HTTPException
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class Violation:
    field: str
    message: str
    type: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message, "type": self.type}


@dataclass(frozen=True)
class Validated(Generic[ModelT]):
    value: ModelT | None = None
    violations: list[Violation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.violations


def _violation_from_error(error: dict[str, Any]) -> Violation:
    loc = [str(part) for part in error.get("loc") or ()]
    return Violation(
        field=".".join(loc) or "body",
        message=str(error.get("msg") or "Invalid value."),
        type=str(error.get("type") or "value_error"),
    )


def validate(model: type[ModelT], payload: Any) -> Validated[ModelT]:
    try:
        value = model.model_validate(payload)
    except ValidationError as exc:
        return Validated(violations=[_violation_from_error(e) for e in exc.errors()])
    return Validated(value=value)


def require_valid(model: type[ModelT], payload: Any) -> ModelT:
    """
    Validate `payload` or raise a 422 carrying the violation list.
    """
    result = validate(model, payload)
    if not result.ok:
        raise HTTPException(
            status_code=422,
            detail=[v.as_dict() for v in result.violations],
        )
    return result.value
