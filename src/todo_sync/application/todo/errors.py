from __future__ import annotations

from todo_sync.domain.todo.exceptions.todo_exceptions import (
    TodoError,
    TodoNotFoundError,
    TodoTextEmptyError,
)

__all__ = [
    "InvalidState",
    "NetworkFailure",
    "RemoteTodoError",
    "ServerError",
    "TodoError",
    "TodoNotFoundError",
    "TodoTextEmptyError",
]


class RemoteTodoError(TodoError):
    """A call to the remote todo service did not succeed."""

    kind = "remote"


class NetworkFailure(RemoteTodoError):
    kind = "network"


class ServerError(RemoteTodoError):
    kind = "server"

    def __init__(self, message: str, status_code: int | None = None, detail: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class InvalidState(TodoError):
    """An intent was issued in a state that forbids it."""

    kind = "invalid_state"
