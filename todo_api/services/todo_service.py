"""Todo service - business logic layer."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..errors import TodoNotFoundError
from ..models.todo import Todo, TodoPayload
from ..repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)


class TodoService:
    """Service for todo business logic."""

    def __init__(self, repository: Optional[TodoRepository] = None) -> None:
        self.repository = repository if repository is not None else TodoRepository()

    def get_todos(self) -> List[Todo]:
        """Get all todo items."""
        return self.repository.list_all()

    def get_todo_by_id(self, todo_id: int) -> Todo:
        """Get a specific todo by ID."""
        todo = self.repository.get_by_id(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        return todo

    def create_todo(self, todo_data: TodoPayload) -> Todo:
        """Create a new todo item. The payload id is ignored."""
        todo = self.repository.create(todo_data.title, todo_data.done)
        logger.info("Created todo id=%s", todo.id)
        return todo

    def update_todo(self, todo_id: int, todo_data: TodoPayload) -> Todo:
        """Overwrite title and done of an existing todo."""
        todo = self.repository.update(todo_id, todo_data.title, todo_data.done)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        logger.info("Updated todo id=%s done=%s", todo.id, todo.done)
        return todo

    def delete_todo(self, todo_id: int) -> None:
        """Delete a todo item."""
        if not self.repository.delete(todo_id):
            raise TodoNotFoundError(todo_id)
        logger.info("Deleted todo id=%s", todo_id)
