"""Todo data models using Pydantic."""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationInfo,
    field_validator,
)


class TodoPayload(BaseModel):
    """Request body for creating or updating a todo.

    Missing or ``null`` fields fall back to zero values. Types are checked
    strictly, so ``"done": "yes"`` or ``"title": 5`` is rejected instead of
    coerced. Any ``id`` sent by the client is accepted and ignored.
    """

    id: StrictInt = Field(0, description="Ignored; the server assigns identifiers")
    title: StrictStr = ""
    done: StrictBool = False

    @field_validator("id", "title", "done", mode="before")
    @classmethod
    def null_as_zero_value(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class Todo(BaseModel):
    """Stored todo item."""

    id: int
    title: str = ""
    done: bool = False

    model_config = ConfigDict(from_attributes=True)


class ErrorResponse(BaseModel):
    error: str


class MessageResponse(BaseModel):
    message: str
