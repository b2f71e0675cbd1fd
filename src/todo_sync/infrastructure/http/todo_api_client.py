from __future__ import annotations

import logging
from typing import Any

import httpx

from todo_sync.application.contracts.todo_service import RemoteTodoService
from todo_sync.application.todo.errors import NetworkFailure, ServerError
from todo_sync.domain.todo.entities.todo import Todo, TodoId
from todo_sync.domain.todo.exceptions.todo_exceptions import TodoTextEmptyError

logger = logging.getLogger(__name__)

TODOS_PATH = "/api/todos"
TRUNCATE_PATH = "/api/test/truncate"


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text.strip()
    if isinstance(payload, dict) and "detail" in payload:
        return str(payload["detail"])
    return response.text.strip()


def _parse_todo(payload: Any) -> Todo:
    if not isinstance(payload, dict):
        raise ServerError(f"Expected a todo object, got {type(payload).__name__}")
    todo_id = payload.get("id")
    if isinstance(todo_id, bool) or not isinstance(todo_id, (int, str)):
        raise ServerError(f"Malformed todo id in response: {todo_id!r}")
    try:
        return Todo.from_payload(payload)
    except (KeyError, AttributeError, TodoTextEmptyError) as exc:
        raise ServerError(f"Malformed todo in response: {payload!r}") from exc


class TodoApiClient(RemoteTodoService):
    """JSON-over-HTTP client for the todo API."""

    def __init__(
        self,
        base_url: str,
        timeout_s: float = 8.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_s,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "TodoApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, url: str, json: Any = None) -> httpx.Response:
        logger.debug("%s %s", method, url)
        try:
            response = await self._client.request(method, url, json=json)
        except httpx.TransportError as exc:
            raise NetworkFailure(f"{method} {url} failed: {exc}") from exc
        if not response.is_success:
            detail = _error_detail(response)
            raise ServerError(
                f"{method} {url} returned {response.status_code}: {detail or response.reason_phrase}",
                status_code=response.status_code,
                detail=detail,
            )
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise ServerError(
                f"Invalid JSON from {response.request.url}",
                status_code=response.status_code,
            ) from exc

    async def list_todos(self) -> list[Todo]:
        response = await self._request("GET", TODOS_PATH)
        payload = self._json(response)
        if not isinstance(payload, list):
            raise ServerError("Expected a JSON array of todos", status_code=response.status_code)
        return [_parse_todo(item) for item in payload]

    async def create_todo(self, text: str) -> Todo:
        response = await self._request("POST", TODOS_PATH, json={"text": text})
        return _parse_todo(self._json(response))

    async def update_todo(self, todo_id: TodoId, text: str) -> Todo:
        response = await self._request("PUT", f"{TODOS_PATH}/{todo_id}", json={"text": text})
        return _parse_todo(self._json(response))

    async def delete_todo(self, todo_id: TodoId) -> None:
        await self._request("DELETE", f"{TODOS_PATH}/{todo_id}")

    async def truncate(self) -> None:
        await self._request("POST", TRUNCATE_PATH)
