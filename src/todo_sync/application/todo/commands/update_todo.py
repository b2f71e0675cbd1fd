from __future__ import annotations

from todo_sync.application.contracts.todo_dtos import TodoItemDto, UpdateTodoRequest
from todo_sync.application.todo.errors import TodoTextEmptyError
from todo_sync.domain.todo.entities.todo import normalize_text
from todo_sync.domain.todo.repositories.todo_repository import TodoRepository


class UpdateTodoCommand:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, request: UpdateTodoRequest) -> TodoItemDto:
        text = normalize_text(request.text)
        if not text:
            raise TodoTextEmptyError("Text cannot be empty")
        # Raises TodoNotFoundError for unknown ids.
        return self._repository.update(request.todo_id, text)
