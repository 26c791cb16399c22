"""API routes for todo management."""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from ..models.todo import ErrorResponse, MessageResponse, Todo, TodoPayload
from ..services.todo_service import TodoService
from .dependencies import get_todo_payload, get_todo_service

router = APIRouter()

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Todo not found"}}
BAD_REQUEST_RESPONSE = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Body could not be decoded"}}
TODO_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": TodoPayload.model_json_schema()}},
    }
}


@router.get("/health", include_in_schema=False)
def read_health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/todos", response_model=List[Todo], tags=["Todos"], summary="Get all todos")
def get_todos(service: TodoService = Depends(get_todo_service)) -> List[Todo]:
    """Returns list of all todos."""
    return service.get_todos()


@router.get(
    "/todos/{todo_id}",
    response_model=Todo,
    tags=["Todos"],
    summary="Get todo by ID",
    responses=NOT_FOUND_RESPONSE,
)
def get_todo(
    todo_id: int = Path(..., description="Todo ID"),
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Returns a single todo."""
    return service.get_todo_by_id(todo_id)


@router.post(
    "/todos",
    response_model=Todo,
    status_code=status.HTTP_201_CREATED,
    tags=["Todos"],
    summary="Create new todo",
    responses=BAD_REQUEST_RESPONSE,
    openapi_extra=TODO_BODY,
)
def create_todo(
    todo_data: TodoPayload = Depends(get_todo_payload),
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Add a new todo item. Any id in the body is replaced by a server-assigned one."""
    return service.create_todo(todo_data)


@router.put(
    "/todos/{todo_id}",
    response_model=Todo,
    tags=["Todos"],
    summary="Update todo by ID",
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE},
    openapi_extra=TODO_BODY,
)
def update_todo(
    todo_data: TodoPayload = Depends(get_todo_payload),
    todo_id: int = Path(..., description="Todo ID"),
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Update an existing todo."""
    return service.update_todo(todo_id, todo_data)


@router.delete(
    "/todos/{todo_id}",
    response_model=MessageResponse,
    tags=["Todos"],
    summary="Delete todo by ID",
    responses=NOT_FOUND_RESPONSE,
)
def delete_todo(
    todo_id: int = Path(..., description="Todo ID"),
    service: TodoService = Depends(get_todo_service),
) -> MessageResponse:
    """Remove a todo."""
    service.delete_todo(todo_id)
    return MessageResponse(message="Deleted")
