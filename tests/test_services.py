"""Service layer tests."""

from pytest import fixture, raises

from todo_api.errors import TodoNotFoundError
from todo_api.models.todo import TodoPayload
from todo_api.repositories.todo_repository import TodoRepository
from todo_api.services.todo_service import TodoService


@fixture
def todo_service() -> TodoService:
    """Create todo service for testing."""
    return TodoService(TodoRepository())


class TestTodoService:
    """Test suite for TodoService."""

    def test_create_and_get_todo(self, todo_service: TodoService) -> None:
        created = todo_service.create_todo(TodoPayload(title="Test todo"))

        assert created.id == 1
        assert created.title == "Test todo"
        assert created.done is False
        assert todo_service.get_todo_by_id(created.id) == created

    def test_create_ignores_payload_id(self, todo_service: TodoService) -> None:
        created = todo_service.create_todo(TodoPayload(id=77, title="x"))
        assert created.id == 1

    def test_create_accepts_empty_title(self, todo_service: TodoService) -> None:
        created = todo_service.create_todo(TodoPayload())
        assert (created.title, created.done) == ("", False)

    def test_get_missing_raises(self, todo_service: TodoService) -> None:
        with raises(TodoNotFoundError) as exc_info:
            todo_service.get_todo_by_id(999)
        assert exc_info.value.todo_id == 999

    def test_update_todo(self, todo_service: TodoService) -> None:
        todo = todo_service.create_todo(TodoPayload(title="a"))
        updated = todo_service.update_todo(todo.id, TodoPayload(id=5, title="b", done=True))

        assert updated.id == todo.id
        assert updated.title == "b"
        assert updated.done is True

    def test_update_overwrites_with_defaults(self, todo_service: TodoService) -> None:
        todo = todo_service.create_todo(TodoPayload(title="a", done=True))
        updated = todo_service.update_todo(todo.id, TodoPayload())
        assert (updated.title, updated.done) == ("", False)

    def test_update_missing_raises(self, todo_service: TodoService) -> None:
        with raises(TodoNotFoundError):
            todo_service.update_todo(9999, TodoPayload(title="b"))

    def test_delete_todo(self, todo_service: TodoService) -> None:
        todo = todo_service.create_todo(TodoPayload(title="To delete"))
        todo_service.delete_todo(todo.id)

        with raises(TodoNotFoundError):
            todo_service.get_todo_by_id(todo.id)
        assert todo_service.get_todos() == []

    def test_delete_missing_raises(self, todo_service: TodoService) -> None:
        with raises(TodoNotFoundError):
            todo_service.delete_todo(9999)

    def test_uses_injected_empty_repository(self) -> None:
        repository = TodoRepository()
        service = TodoService(repository)

        assert service.repository is repository
        service.create_todo(TodoPayload(title="a"))
        assert len(repository) == 1
