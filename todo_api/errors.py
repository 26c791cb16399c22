"""Error types and the handlers that turn them into ``{"error": ...}`` bodies."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

TODO_NOT_FOUND = "Todo not found"


class TodoNotFoundError(LookupError):
    """Raised when no todo has the requested id."""

    def __init__(self, todo_id: int) -> None:
        super().__init__(TODO_NOT_FOUND)
        self.todo_id = todo_id


def register_error_handlers(app: FastAPI) -> None:
    """Register the todo API error handlers on the FastAPI app."""

    @app.exception_handler(TodoNotFoundError)
    async def todo_not_found_handler(request: Request, exc: TodoNotFoundError):
        logger.info("Todo %s not found (%s %s)", exc.todo_id, request.method, request.url.path)
        return _error_response(status.HTTP_404_NOT_FOUND, TODO_NOT_FOUND)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        body_errors = [error for error in errors if _location(error)[:1] == ["body"]]
        if body_errors or not errors:
            message = format_validation_error(body_errors or errors)
            logger.warning("Bad request on %s %s: %s", request.method, request.url.path, message)
            return _error_response(status.HTTP_400_BAD_REQUEST, message)
        # an unparsable path id cannot match any todo
        return _error_response(status.HTTP_404_NOT_FOUND, TODO_NOT_FOUND)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return _error_response(exc.status_code, detail, headers=getattr(exc, "headers", None))


def format_validation_error(errors: List[Dict[str, Any]]) -> str:
    """Render the first validation error as ``"<location>: <message>"``."""
    if not errors:
        return "Invalid request body"
    first = errors[0]
    location = ".".join(str(part) for part in _location(first))
    message = first.get("msg", "Invalid request body")
    return f"{location}: {message}" if location else message


def _location(error: Dict[str, Any]) -> List[Any]:
    return list(error.get("loc") or ())


def _error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)
