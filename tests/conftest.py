from __future__ import annotations

import asyncio
from itertools import count
from typing import Iterable, Optional

import pytest

from todo_sync import config
from todo_sync.application.todo.errors import RemoteTodoError, ServerError
from todo_sync.domain.todo.entities.todo import Todo, TodoId
from todo_sync.infrastructure.data.repositories.in_memory_todo_repository import (
    InMemoryTodoRepository,
)
from todo_sync.presentation.controllers.todo_controller import TodoStoreController

TODO_ENV_VARS = (
    "TODO_API_URL",
    "TODO_HTTP_TIMEOUT",
    "TODO_HOST",
    "TODO_PORT",
    "TODO_SERVE_API",
    "TODO_DB_PATH",
    "TODO_ENABLE_TEST_ROUTES",
    "TODO_DEBUG",
)


class FakeTodoService:
    """Async stand-in for the remote service; ids start at 101."""

    def __init__(self, todos: Iterable[Todo] = ()) -> None:
        self.todos: list[Todo] = list(todos)
        self.calls: list[tuple] = []
        self.fail_next: Optional[RemoteTodoError] = None
        self.gate: Optional[asyncio.Event] = None
        self._ids = count(101)

    async def _settle(self, *call) -> None:
        self.calls.append(call)
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_next is not None:
            error, self.fail_next = self.fail_next, None
            raise error

    async def list_todos(self) -> list[Todo]:
        await self._settle("list")
        return list(self.todos)

    async def create_todo(self, text: str) -> Todo:
        await self._settle("create", text)
        todo = Todo(id=next(self._ids), text=text)
        self.todos.append(todo)
        return todo

    async def update_todo(self, todo_id: TodoId, text: str) -> Todo:
        await self._settle("update", todo_id, text)
        for index, todo in enumerate(self.todos):
            if todo.id == todo_id:
                self.todos[index] = todo.with_text(text)
                return self.todos[index]
        raise ServerError("Todo not found", status_code=404)

    async def delete_todo(self, todo_id: TodoId) -> None:
        await self._settle("delete", todo_id)
        self.todos = [todo for todo in self.todos if todo.id != todo_id]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in TODO_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setattr(config, "_LOADED", True)


@pytest.fixture()
def service() -> FakeTodoService:
    return FakeTodoService(
        [Todo(id=1, text="süt al"), Todo(id=2, text="ekmek al"), Todo(id=3, text="fatura öde")]
    )


@pytest.fixture()
def empty_service() -> FakeTodoService:
    return FakeTodoService()


@pytest.fixture()
def controller(service: FakeTodoService) -> TodoStoreController:
    return TodoStoreController(service)


@pytest.fixture()
def loaded_controller(controller: TodoStoreController, service: FakeTodoService) -> TodoStoreController:
    asyncio.run(controller.load())
    service.calls.clear()
    return controller


@pytest.fixture()
def in_memory_todo_repo() -> InMemoryTodoRepository:
    return InMemoryTodoRepository()
