"""Pydantic models for todo items and API responses."""

from .todo import ErrorResponse, MessageResponse, Todo, TodoPayload

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "Todo",
    "TodoPayload",
]
