from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class CreateTodoRequest:
    text: str


@dataclass(frozen=True)
class UpdateTodoRequest:
    todo_id: int
    text: str


@dataclass(frozen=True)
class TodoItemDto:
    id: int
    text: str
    created_at: datetime
    updated_at: datetime

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
