from .todo_repository import IdStrategy, TodoRepository

__all__ = ["IdStrategy", "TodoRepository"]
