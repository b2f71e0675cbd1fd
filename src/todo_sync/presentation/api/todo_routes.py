from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException, Request, Response

from todo_sync.application.contracts.todo_dtos import CreateTodoRequest, UpdateTodoRequest
from todo_sync.application.todo.commands.create_todo import CreateTodoCommand
from todo_sync.application.todo.commands.delete_todo import DeleteTodoCommand, TruncateTodosCommand
from todo_sync.application.todo.commands.update_todo import UpdateTodoCommand
from todo_sync.application.todo.errors import TodoNotFoundError, TodoTextEmptyError
from todo_sync.application.todo.queries.list_todos import GetTodoQuery, ListTodosQuery
from todo_sync.domain.todo.repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)


async def _read_text(request: Request, require_json_content_type: bool) -> str:
    if require_json_content_type:
        content_type = request.headers.get("content-type", "").split(";")[0].strip()
        if content_type != "application/json":
            raise HTTPException(status_code=400, detail="Content-Type must be application/json")
    try:
        payload = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid JSON")
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Invalid JSON")
    text = payload.get("text")
    if text is not None and not isinstance(text, str):
        raise HTTPException(status_code=400, detail="Text must be a string")
    return text or ""


def _parse_id(todo_id: str) -> int:
    try:
        return int(todo_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid todo ID") from None


def build_todo_router(repository: TodoRepository, enable_test_routes: bool = False) -> APIRouter:
    router = APIRouter()
    create_command = CreateTodoCommand(repository)
    update_command = UpdateTodoCommand(repository)
    delete_command = DeleteTodoCommand(repository)
    list_query = ListTodosQuery(repository)
    get_query = GetTodoQuery(repository)

    @router.post("/api/todos", status_code=201)
    async def create_todo(request: Request) -> dict[str, Any]:
        text = await _read_text(request, require_json_content_type=True)
        try:
            item = create_command.execute(CreateTodoRequest(text=text))
        except TodoTextEmptyError:
            raise HTTPException(status_code=400, detail="Text cannot be empty")
        logger.info("Created todo %s", item.id)
        return item.to_payload()

    @router.get("/api/todos")
    def list_todos() -> list[dict[str, Any]]:
        return [item.to_payload() for item in list_query.execute()]

    @router.get("/api/todos/{todo_id}")
    def get_todo(todo_id: str) -> dict[str, Any]:
        todo_id = _parse_id(todo_id)
        try:
            return get_query.execute(todo_id).to_payload()
        except TodoNotFoundError:
            raise HTTPException(status_code=404, detail="Todo not found")

    @router.put("/api/todos/{todo_id}")
    async def update_todo(todo_id: str, request: Request) -> dict[str, Any]:
        todo_id = _parse_id(todo_id)
        text = await _read_text(request, require_json_content_type=False)
        try:
            item = update_command.execute(UpdateTodoRequest(todo_id=todo_id, text=text))
        except TodoTextEmptyError:
            raise HTTPException(status_code=400, detail="Text cannot be empty")
        except TodoNotFoundError:
            raise HTTPException(status_code=404, detail="Todo not found")
        logger.info("Updated todo %s", item.id)
        return item.to_payload()

    @router.delete("/api/todos/{todo_id}", status_code=204)
    def delete_todo(todo_id: str) -> Response:
        todo_id = _parse_id(todo_id)
        try:
            delete_command.execute(todo_id)
        except TodoNotFoundError:
            raise HTTPException(status_code=404, detail="Todo not found")
        logger.info("Deleted todo %s", todo_id)
        return Response(status_code=204)

    if enable_test_routes:
        truncate_command = TruncateTodosCommand(repository)

        @router.post("/api/test/truncate", status_code=204)
        def truncate_todos() -> Response:
            truncate_command.execute()
            logger.warning("All todos truncated via test route")
            return Response(status_code=204)

    return router


def create_api_app(repository: TodoRepository, enable_test_routes: bool = False) -> FastAPI:
    """Standalone FastAPI app serving only the todo API."""
    api = FastAPI(title="Todo API")
    api.include_router(build_todo_router(repository, enable_test_routes=enable_test_routes))
    return api
