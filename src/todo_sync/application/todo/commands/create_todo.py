from __future__ import annotations

from todo_sync.application.contracts.todo_dtos import CreateTodoRequest, TodoItemDto
from todo_sync.application.todo.errors import TodoTextEmptyError
from todo_sync.domain.todo.entities.todo import normalize_text
from todo_sync.domain.todo.repositories.todo_repository import TodoRepository


class CreateTodoCommand:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, request: CreateTodoRequest) -> TodoItemDto:
        text = normalize_text(request.text)
        if not text:
            raise TodoTextEmptyError("Text cannot be empty")
        return self._repository.add(text)
