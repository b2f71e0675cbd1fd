from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx
from fastapi import APIRouter

from todo_sync.config import Settings
from todo_sync.domain.todo.repositories.todo_repository import TodoRepository
from todo_sync.infrastructure.data.repositories.in_memory_todo_repository import (
    InMemoryTodoRepository,
)
from todo_sync.infrastructure.data.repositories.sql_todo_repository import (
    SqlTodoRepository,
    create_sqlite_engine,
)
from todo_sync.infrastructure.http.todo_api_client import TodoApiClient
from todo_sync.presentation.api.todo_routes import build_todo_router
from todo_sync.presentation.controllers.todo_controller import TodoStoreController


@dataclass(frozen=True)
class AppContainer:
    settings: Settings
    api_client: TodoApiClient
    repository: Optional[TodoRepository] = None

    def create_controller(self) -> TodoStoreController:
        return TodoStoreController(self.api_client)

    def build_api_router(self) -> APIRouter:
        if self.repository is None:
            raise RuntimeError("API server is disabled (TODO_SERVE_API=0)")
        return build_todo_router(
            self.repository, enable_test_routes=self.settings.enable_test_routes
        )


def create_repository(settings: Settings) -> TodoRepository:
    if settings.uses_in_memory_db:
        return InMemoryTodoRepository()
    return SqlTodoRepository(create_sqlite_engine(settings.db_path))


def create_app_container(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    repository: TodoRepository | None = None,
) -> AppContainer:
    settings = settings or Settings.from_env()
    if repository is None and settings.serve_api:
        repository = create_repository(settings)
    api_client = TodoApiClient(
        settings.api_url,
        timeout_s=settings.http_timeout_s,
        transport=transport,
    )
    return AppContainer(settings=settings, api_client=api_client, repository=repository)
