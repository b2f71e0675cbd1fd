"""Client-side todo state, kept in sync with the remote todo service.

The controller owns the local list, the edit session and the busy flag.
Every remote call is confirm-then-apply: the list only changes after the
server answered. At most one remote call is in flight at any time; remote
intents issued while busy raise ``InvalidState`` without sending a request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, Iterable, Optional, Sequence, TypeVar

from todo_sync.application.contracts.todo_service import RemoteTodoService
from todo_sync.application.todo.errors import InvalidState, RemoteTodoError, ServerError
from todo_sync.domain.todo.entities.todo import Todo, TodoId, normalize_text

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class EditSession:
    todo_id: TodoId
    draft: str


@dataclass(frozen=True)
class FailureReport:
    operation: str
    kind: str
    message: str

    @classmethod
    def from_error(cls, operation: str, error: RemoteTodoError) -> "FailureReport":
        return cls(operation=operation, kind=error.kind, message=str(error))


@dataclass(frozen=True)
class TodoState:
    todos: tuple[Todo, ...] = ()
    busy: bool = False
    edit: Optional[EditSession] = None
    error: Optional[FailureReport] = None

    @property
    def is_empty(self) -> bool:
        return not self.todos

    def find(self, todo_id: TodoId) -> Optional[Todo]:
        return next((todo for todo in self.todos if todo.id == todo_id), None)


StateListener = Callable[[TodoState], None]


def _unique_by_id(todos: Iterable[Todo]) -> tuple[Todo, ...]:
    seen: set[TodoId] = set()
    result: list[Todo] = []
    for todo in todos:
        if todo.id in seen:
            logger.warning("Dropping duplicate todo id %r from server list", todo.id)
            continue
        seen.add(todo.id)
        result.append(todo)
    return tuple(result)


def _append(todos: tuple[Todo, ...], created: Todo) -> tuple[Todo, ...]:
    if any(todo.id == created.id for todo in todos):
        return tuple(created if todo.id == created.id else todo for todo in todos)
    return todos + (created,)


class TodoStoreController:
    """Single source of truth for one client's todo list.

    Construct one instance per page and pass it to whatever renders it.
    Listeners registered with :meth:`subscribe` receive a fresh
    :class:`TodoState` snapshot after every committed change.
    """

    def __init__(self, service: RemoteTodoService) -> None:
        self._service = service
        self._state = TodoState()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> TodoState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, **changes: Any) -> None:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("Todo state listener %r failed", listener)

    async def _remote(
        self,
        operation: str,
        call: Callable[[], Awaitable[T]],
        settle: Callable[[T], dict[str, Any]],
        **dispatch_changes: Any,
    ) -> tuple[bool, Optional[T]]:
        """Run one remote call; ``settle`` maps its result to the state changes.

        Busy is released on every exit path, in the same commit as the settled
        changes or the failure report.
        """
        # Check and set happen before the first await, so no second call can slip in.
        if self._state.busy:
            raise InvalidState(f"Cannot {operation} while another request is in flight")
        self._commit(busy=True, error=None, **dispatch_changes)
        changes: dict[str, Any] = {}
        try:
            result = await call()
            changes = settle(result)
        except RemoteTodoError as exc:
            logger.warning("Todo %s failed: %s", operation, exc)
            changes = {"error": FailureReport.from_error(operation, exc)}
            return False, None
        finally:
            self._commit(busy=False, **changes)
        return True, result

    async def load(self) -> bool:
        logger.debug("load")

        def settle(todos: Optional[Sequence[Todo]]) -> dict[str, Any]:
            if todos is None:
                raise ServerError("List returned no todos")
            loaded = _unique_by_id(todos)
            edit = self._state.edit
            if edit is not None and not any(todo.id == edit.todo_id for todo in loaded):
                edit = None
            return {"todos": loaded, "edit": edit}

        ok, _ = await self._remote("load", self._service.list_todos, settle)
        return ok

    async def add(self, text: str) -> Optional[Todo]:
        text = normalize_text(text)
        if not text:
            logger.debug("add ignored: blank text")
            return None
        logger.debug("add %r", text)

        def settle(created: Optional[Todo]) -> dict[str, Any]:
            if created is None:
                raise ServerError("Create returned no todo")
            return {"todos": _append(self._state.todos, created)}

        ok, created = await self._remote(
            "add", lambda: self._service.create_todo(text), settle
        )
        return created if ok else None

    def begin_edit(self, todo_id: TodoId) -> EditSession:
        todo = self._state.find(todo_id)
        if todo is None:
            raise InvalidState(f"Cannot edit unknown todo {todo_id!r}")
        logger.debug("begin_edit %r", todo_id)
        session = EditSession(todo_id=todo.id, draft=todo.text)
        self._commit(edit=session)
        return session

    def update_draft(self, text: str) -> None:
        if self._state.edit is None:
            raise InvalidState("No active edit session")
        self._commit(edit=replace(self._state.edit, draft=text))

    async def save_edit(self) -> Optional[Todo]:
        session = self._state.edit
        if session is None:
            raise InvalidState("No active edit session")
        text = normalize_text(session.draft)
        if not text:
            logger.debug("save_edit ignored: blank draft")
            return None
        logger.debug("save_edit %r", session.todo_id)

        def settle(saved: Optional[Todo]) -> dict[str, Any]:
            if saved is None:
                raise ServerError("Update returned no todo")
            todos = tuple(
                todo.with_text(saved.text) if todo.id == session.todo_id else todo
                for todo in self._state.todos
            )
            edit = self._state.edit
            if edit is not None and edit.todo_id == session.todo_id:
                edit = None
            return {"todos": todos, "edit": edit}

        ok, saved = await self._remote(
            "save", lambda: self._service.update_todo(session.todo_id, text), settle
        )
        if not ok:
            return None
        return self._state.find(session.todo_id) or saved

    def cancel_edit(self) -> None:
        if self._state.edit is None:
            return
        logger.debug("cancel_edit %r", self._state.edit.todo_id)
        self._commit(edit=None)

    async def delete(self, todo_id: TodoId) -> bool:
        if self._state.find(todo_id) is None:
            raise InvalidState(f"Cannot delete unknown todo {todo_id!r}")
        logger.debug("delete %r", todo_id)

        def closes_session() -> bool:
            edit = self._state.edit
            return edit is not None and edit.todo_id == todo_id

        def settle(_: None) -> dict[str, Any]:
            return {
                "todos": tuple(todo for todo in self._state.todos if todo.id != todo_id),
                "edit": None if closes_session() else self._state.edit,
            }

        dispatch_changes = {"edit": None} if closes_session() else {}
        ok, _ = await self._remote(
            "delete", lambda: self._service.delete_todo(todo_id), settle, **dispatch_changes
        )
        # The deleted item wins over any session opened while the call was in flight.
        if not ok and closes_session():
            self._commit(edit=None)
        return ok

    def dismiss_error(self) -> None:
        if self._state.error is not None:
            self._commit(error=None)
