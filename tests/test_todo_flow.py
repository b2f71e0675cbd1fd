from __future__ import annotations

import asyncio

import httpx
from fastapi import FastAPI

from todo_sync.composition_root import create_app_container
from todo_sync.config import Settings
from todo_sync.infrastructure.data.repositories.in_memory_todo_repository import (
    InMemoryTodoRepository,
)
from todo_sync.presentation.controllers.todo_controller import TodoStoreController


def _container_with_asgi_server():
    repository = InMemoryTodoRepository()
    api = FastAPI()
    container = create_app_container(
        Settings(api_url="http://testserver", db_path=":memory:", enable_test_routes=True),
        transport=httpx.ASGITransport(app=api),
        repository=repository,
    )
    api.include_router(container.build_api_router())
    return container, repository


def test_todo_flow_create_edit_delete_against_api() -> None:
    container, repository = _container_with_asgi_server()
    controller = container.create_controller()

    async def scenario() -> None:
        async with container.api_client:
            await container.api_client.truncate()
            assert await controller.load() is True
            assert controller.state.is_empty

            await controller.add("süt al")
            await controller.add("ekmek al")
            assert [todo.text for todo in controller.state.todos] == ["süt al", "ekmek al"]

            first_id = controller.state.todos[0].id
            controller.begin_edit(first_id)
            controller.update_draft("süt al (2 litre)")
            await controller.save_edit()

            await controller.delete(controller.state.todos[1].id)

    asyncio.run(scenario())

    assert controller.state.error is None
    assert [(todo.id, todo.text) for todo in controller.state.todos] == [(1, "süt al (2 litre)")]
    assert [(item.id, item.text) for item in repository.list()] == [(1, "süt al (2 litre)")]


def test_todo_flow_reports_server_rejection() -> None:
    container, repository = _container_with_asgi_server()
    controller = container.create_controller()
    repository.add("süt al")

    async def scenario() -> None:
        async with container.api_client:
            await controller.load()
            repository.delete(1)
            controller.begin_edit(1)
            controller.update_draft("x")
            await controller.save_edit()

    asyncio.run(scenario())

    assert controller.state.error is not None
    assert controller.state.error.kind == "server"
    assert controller.state.edit is not None
    assert controller.state.find(1).text == "süt al"


def test_container_builds_one_controller_per_call() -> None:
    container, _ = _container_with_asgi_server()

    first = container.create_controller()
    second = container.create_controller()

    assert isinstance(first, TodoStoreController)
    assert first is not second
    asyncio.run(container.api_client.aclose())
