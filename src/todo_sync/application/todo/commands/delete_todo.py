from __future__ import annotations

from todo_sync.application.todo.errors import TodoNotFoundError
from todo_sync.domain.todo.repositories.todo_repository import TodoRepository


class DeleteTodoCommand:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, todo_id: int) -> None:
        if not self._repository.delete(todo_id):
            raise TodoNotFoundError(todo_id)


class TruncateTodosCommand:
    """Removes every todo. Only wired up when test routes are enabled."""

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self) -> None:
        self._repository.truncate()
