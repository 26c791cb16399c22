"""Todo repository - data access layer."""

from __future__ import annotations

import threading
from enum import Enum
from typing import List, Optional

from ..models.todo import Todo


class IdStrategy(str, Enum):
    """How new todo identifiers are assigned."""

    COUNTER = "counter"
    # len(collection) + 1; repeats an id after a delete followed by a create
    LENGTH = "length"


class TodoRepository:
    """Repository for todo data access with in-memory storage.

    Items are kept in insertion order and looked up by linear scan. Every
    access holds ``_lock``; sync endpoints run in a thread pool.
    """

    def __init__(self, id_strategy: IdStrategy = IdStrategy.COUNTER) -> None:
        self.id_strategy = IdStrategy(id_strategy)
        self._todos: List[Todo] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def list_all(self) -> List[Todo]:
        """Get all todos in insertion order."""
        with self._lock:
            return [todo.model_copy() for todo in self._todos]

    def get_by_id(self, todo_id: int) -> Optional[Todo]:
        """Get todo by ID."""
        with self._lock:
            index = self._find_index(todo_id)
            if index is None:
                return None
            return self._todos[index].model_copy()

    def create(self, title: str, done: bool) -> Todo:
        """Create a new todo."""
        with self._lock:
            todo = Todo(id=self._assign_id(), title=title, done=done)
            self._todos.append(todo)
            return todo.model_copy()

    def update(self, todo_id: int, title: str, done: bool) -> Optional[Todo]:
        """Overwrite title and done of an existing todo; the id is kept."""
        with self._lock:
            index = self._find_index(todo_id)
            if index is None:
                return None
            todo = self._todos[index]
            todo.title = title
            todo.done = done
            return todo.model_copy()

    def delete(self, todo_id: int) -> bool:
        """Delete a todo."""
        with self._lock:
            index = self._find_index(todo_id)
            if index is None:
                return False
            del self._todos[index]
            return True

    def clear(self) -> None:
        """Clear all stored todos (testing helper)."""
        with self._lock:
            self._todos.clear()
            self._next_id = 1

    def _find_index(self, todo_id: int) -> Optional[int]:
        for index, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return index
        return None

    def _assign_id(self) -> int:
        if self.id_strategy is IdStrategy.LENGTH:
            return len(self._todos) + 1
        todo_id = self._next_id
        self._next_id += 1
        return todo_id
