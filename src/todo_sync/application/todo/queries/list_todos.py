from __future__ import annotations

from todo_sync.application.contracts.todo_dtos import TodoItemDto
from todo_sync.application.todo.errors import TodoNotFoundError
from todo_sync.domain.todo.repositories.todo_repository import TodoRepository


class ListTodosQuery:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self) -> list[TodoItemDto]:
        return list(self._repository.list())


class GetTodoQuery:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, todo_id: int) -> TodoItemDto:
        item = self._repository.get(todo_id)
        if item is None:
            raise TodoNotFoundError(todo_id)
        return item
