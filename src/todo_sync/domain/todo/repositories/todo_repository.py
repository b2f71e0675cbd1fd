from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from todo_sync.application.contracts.todo_dtos import TodoItemDto


@runtime_checkable
class TodoRepository(Protocol):
    """Server-side storage for todo items, ordered by id."""

    def add(self, text: str) -> TodoItemDto:
        ...

    def get(self, todo_id: int) -> Optional[TodoItemDto]:
        ...

    def list(self) -> list[TodoItemDto]:
        ...

    def update(self, todo_id: int, text: str) -> TodoItemDto:
        ...

    def delete(self, todo_id: int) -> bool:
        ...

    def truncate(self) -> None:
        ...
