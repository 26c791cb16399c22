"""API dependencies for todo management."""

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from ..models.todo import TodoPayload
from ..repositories.todo_repository import TodoRepository
from ..services.todo_service import TodoService


def get_todo_repository(request: Request) -> TodoRepository:
    """Dependency for the store owned by the running application."""
    return request.app.state.todo_repository


def get_todo_service(
    repository: TodoRepository = Depends(get_todo_repository),
) -> TodoService:
    """Dependency for getting todo service instance."""
    return TodoService(repository)


async def get_todo_payload(request: Request) -> TodoPayload:
    """Decode the request body as JSON whatever its Content-Type."""
    body = await request.body()
    try:
        return TodoPayload.model_validate_json(body)
    except ValidationError as exc:
        errors = [
            {"type": error["type"], "loc": ("body", *error["loc"]), "msg": error["msg"]}
            for error in exc.errors()
        ]
        raise RequestValidationError(errors) from exc
