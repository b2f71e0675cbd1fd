from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from todo_sync.application.todo.errors import NetworkFailure, ServerError
from todo_sync.domain.todo.entities.todo import Todo
from todo_sync.infrastructure.http.todo_api_client import TodoApiClient

BASE_URL = "http://todo.test"


def _client(handler) -> TodoApiClient:
    return TodoApiClient(BASE_URL, transport=httpx.MockTransport(handler))


def _run(client: TodoApiClient, call):
    async def scenario():
        async with client:
            return await call(client)

    return asyncio.run(scenario())


def test_list_todos_parses_server_order() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        assert request.url.path == "/api/todos"
        return httpx.Response(
            200,
            json=[
                {"id": 2, "text": "ekmek al", "created_at": "2024-01-01T00:00:00"},
                {"id": 1, "text": "süt al"},
            ],
        )

    todos = _run(_client(handler), lambda client: client.list_todos())

    assert todos == [Todo(id=2, text="ekmek al"), Todo(id=1, text="süt al")]


def test_create_todo_posts_json_text() -> None:
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"id": 7, "text": "süt al"})

    todo = _run(_client(handler), lambda client: client.create_todo("süt al"))

    assert todo == Todo(id=7, text="süt al")
    assert seen == {"method": "POST", "path": "/api/todos", "body": {"text": "süt al"}}


def test_update_todo_puts_to_item_path() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "PUT"
        assert request.url.path == "/api/todos/7"
        assert json.loads(request.content) == {"text": "x"}
        return httpx.Response(200, json={"id": 7, "text": "x"})

    assert _run(_client(handler), lambda client: client.update_todo(7, "x")) == Todo(id=7, text="x")


@pytest.mark.parametrize("status", [200, 204])
def test_delete_todo_accepts_empty_success(status: int) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "DELETE"
        assert request.url.path == "/api/todos/7"
        return httpx.Response(status)

    assert _run(_client(handler), lambda client: client.delete_todo(7)) is None


def test_truncate_posts_to_test_route() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert (request.method, request.url.path) == ("POST", "/api/test/truncate")
        return httpx.Response(204)

    assert _run(_client(handler), lambda client: client.truncate()) is None


def test_non_2xx_raises_server_error_with_detail() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"detail": "Todo not found"})

    with pytest.raises(ServerError) as excinfo:
        _run(_client(handler), lambda client: client.delete_todo(9))

    assert excinfo.value.status_code == 404
    assert excinfo.value.detail == "Todo not found"


def test_plain_text_error_body_is_kept() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="Failed to create todo\n")

    with pytest.raises(ServerError) as excinfo:
        _run(_client(handler), lambda client: client.create_todo("x"))

    assert excinfo.value.detail == "Failed to create todo"


def test_transport_error_raises_network_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NetworkFailure):
        _run(_client(handler), lambda client: client.list_todos())


def test_timeout_raises_network_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(NetworkFailure):
        _run(_client(handler), lambda client: client.create_todo("x"))


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="not json"),
        httpx.Response(200, json={"todos": []}),
        httpx.Response(200, json=[{"id": 1}]),
        httpx.Response(200, json=[{"id": 1, "text": "  "}]),
    ],
)
def test_malformed_list_raises_server_error(response: httpx.Response) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return response

    with pytest.raises(ServerError):
        _run(_client(handler), lambda client: client.list_todos())


@pytest.mark.parametrize(
    "payload",
    [
        [{"id": [1], "text": "süt al"}],
        [{"id": True, "text": "süt al"}],
        [{"id": None, "text": "süt al"}],
        [{"id": 1.5, "text": "süt al"}],
    ],
)
def test_list_with_unusable_id_raises_server_error(payload: list) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    with pytest.raises(ServerError, match="Malformed todo id"):
        _run(_client(handler), lambda client: client.list_todos())


def test_string_ids_are_accepted() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(201, json={"id": "a1", "text": "süt al"})

    todo = _run(_client(handler), lambda client: client.create_todo("süt al"))

    assert todo == Todo(id="a1", text="süt al")
