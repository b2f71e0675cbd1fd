from __future__ import annotations

from datetime import datetime, timezone
from itertools import count
from typing import Dict, Iterable, Optional

from todo_sync.application.contracts.todo_dtos import TodoItemDto
from todo_sync.domain.todo.repositories.todo_repository import TodoRepository
from todo_sync.domain.todo.exceptions.todo_exceptions import TodoNotFoundError


class InMemoryTodoRepository(TodoRepository):
    """Simple in-memory repository backed by a dict."""

    def __init__(self, initial_texts: Optional[Iterable[str]] = None) -> None:
        self._items: Dict[int, TodoItemDto] = {}
        self._next_id = count(1)
        if initial_texts:
            for text in initial_texts:
                self.add(text)

    def add(self, text: str) -> TodoItemDto:
        now = datetime.now(timezone.utc)
        item = TodoItemDto(id=next(self._next_id), text=text, created_at=now, updated_at=now)
        self._items[item.id] = item
        return item

    def get(self, todo_id: int) -> Optional[TodoItemDto]:
        return self._items.get(todo_id)

    def list(self) -> list[TodoItemDto]:
        return [self._items[key] for key in sorted(self._items)]

    def update(self, todo_id: int, text: str) -> TodoItemDto:
        existing = self._items.get(todo_id)
        if existing is None:
            raise TodoNotFoundError(todo_id)
        item = TodoItemDto(
            id=existing.id,
            text=text,
            created_at=existing.created_at,
            updated_at=datetime.now(timezone.utc),
        )
        self._items[todo_id] = item
        return item

    def delete(self, todo_id: int) -> bool:
        if todo_id in self._items:
            del self._items[todo_id]
            return True
        return False

    def truncate(self) -> None:
        self._items.clear()
        self._next_id = count(1)
