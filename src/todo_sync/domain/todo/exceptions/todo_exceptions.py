from __future__ import annotations


class TodoError(Exception):
    """Base class for all todo errors."""


class TodoTextEmptyError(TodoError, ValueError):
    pass


class TodoNotFoundError(TodoError, LookupError):
    def __init__(self, todo_id: int | str) -> None:
        super().__init__(f"Todo with id '{todo_id}' not found")
        self.todo_id = todo_id
