from __future__ import annotations

from typing import Any

from todo_sync.domain.todo.entities.todo import Todo, normalize_text
from todo_sync.presentation.controllers.todo_controller import TodoState

_ERROR_MESSAGES = {
    "load": "Görevler yüklenemedi.",
    "add": "Görev eklenemedi.",
    "save": "Görev güncellenemedi.",
    "delete": "Görev silinemedi.",
}


def can_submit(text: str | None, busy: bool) -> bool:
    return not busy and bool(normalize_text(text))


def todo_to_viewmodel(todo: Todo, state: TodoState) -> dict[str, Any]:
    editing = state.edit is not None and state.edit.todo_id == todo.id
    return {
        "id": todo.id,
        "text": todo.text,
        "label": f"#{todo.id}",
        "editing": editing,
        "draft": state.edit.draft if editing and state.edit is not None else "",
    }


def todos_to_viewmodel(state: TodoState) -> dict[str, Any]:
    error = state.error
    return {
        "items": [todo_to_viewmodel(todo, state) for todo in state.todos],
        "count_label": f"{len(state.todos)} görev",
        "empty": state.is_empty,
        "loading": state.busy,
        "error": _ERROR_MESSAGES.get(error.operation, error.message) if error else None,
    }


def needs_redraw(previous: TodoState | None, current: TodoState) -> bool:
    """Whether the list must be re-rendered; draft edits alone never redraw."""
    if previous is None:
        return True
    previous_target = previous.edit.todo_id if previous.edit else None
    current_target = current.edit.todo_id if current.edit else None
    return (
        previous.todos != current.todos
        or previous.busy != current.busy
        or previous_target != current_target
    )
