from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from todo_sync.domain.todo.exceptions.todo_exceptions import TodoTextEmptyError

TodoId = Union[int, str]


def normalize_text(text: str | None) -> str:
    return (text or "").strip()


@dataclass(frozen=True)
class Todo:
    id: TodoId
    text: str

    def __post_init__(self) -> None:
        if not normalize_text(self.text):
            raise TodoTextEmptyError("Todo text must not be empty.")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Todo":
        return cls(id=payload["id"], text=payload["text"])

    def with_text(self, text: str) -> "Todo":
        return Todo(id=self.id, text=text)
