from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from todo_sync.domain.todo.entities.todo import Todo, TodoId


@runtime_checkable
class RemoteTodoService(Protocol):
    """Remote todo collection as seen by the client.

    Implementations raise ``NetworkFailure`` for transport problems and
    ``ServerError`` for non-2xx responses or unusable bodies.
    """

    async def list_todos(self) -> Sequence[Todo]:
        ...

    async def create_todo(self, text: str) -> Todo:
        ...

    async def update_todo(self, todo_id: TodoId, text: str) -> Todo:
        ...

    async def delete_todo(self, todo_id: TodoId) -> None:
        ...
