from __future__ import annotations

import logging
from typing import Any, Optional

from nicegui import ui

from todo_sync.application.todo.errors import InvalidState
from todo_sync.presentation.controllers.todo_controller import (
    FailureReport,
    TodoState,
    TodoStoreController,
)
from todo_sync.presentation.ui.viewmodels.todo_viewmodel import (
    can_submit,
    needs_redraw,
    todos_to_viewmodel,
)
from todo_sync.styles import (
    C_BTN_DANGER,
    C_BTN_PRIM,
    C_BTN_SEC,
    C_CARD,
    C_INPUT,
    C_PAGE_TITLE,
    C_SECTION_TITLE,
    STYLE_LIST_ROW,
    STYLE_TEXT_HINT,
    STYLE_TEXT_SUBTLE,
)

logger = logging.getLogger(__name__)

_BUSY_MESSAGE = "Bir işlem sürüyor, lütfen bekleyin."


def render_todos(controller: TodoStoreController) -> None:
    ui.label("📝 ToDo Listesi").classes(C_PAGE_TITLE).props('data-testid="app-title"')
    ui.label("Günlük görevlerinizi organize edin").classes(STYLE_TEXT_SUBTLE)

    rendered: dict[str, Optional[Any]] = {"state": None, "error": None}

    async def run_intent(intent) -> Any:
        try:
            return await intent
        except InvalidState as exc:
            logger.info("Intent refused: %s", exc)
            ui.notify(_BUSY_MESSAGE, color="orange")
            return None

    with ui.card().classes(f"{C_CARD} p-4 w-full"):
        with ui.row().classes("w-full gap-2 items-center no-wrap"):
            text_input = (
                ui.input(placeholder="Bugün ne yapacaksınız? (örn: süt al)")
                .classes(C_INPUT)
                .props('outlined dense data-testid="todo-input" aria-label="Todo text input"')
            )

            async def handle_add() -> None:
                created = await run_intent(controller.add(text_input.value or ""))
                if created is not None:
                    text_input.value = ""

            add_button = (
                ui.button("Ekle", icon="add", on_click=handle_add)
                .classes(C_BTN_PRIM)
                .props('data-testid="add-button" aria-label="Add todo button"')
            )
            text_input.on("keydown.enter", handle_add)

    def sync_controls(state: TodoState) -> None:
        text_input.set_enabled(not state.busy)
        add_button.set_enabled(can_submit(text_input.value, state.busy))

    text_input.on_value_change(lambda _: sync_controls(controller.state))

    @ui.refreshable
    def todo_list() -> None:
        view = todos_to_viewmodel(controller.state)
        with ui.row().classes("w-full items-center justify-between"):
            ui.label("Görevler").classes(C_SECTION_TITLE)
            ui.label(view["count_label"]).classes(STYLE_TEXT_HINT)
        if view["loading"]:
            with ui.row().classes("items-center gap-2"):
                ui.spinner(size="sm")
                ui.label("Yükleniyor...").classes(STYLE_TEXT_SUBTLE)
        if view["empty"]:
            with ui.column().classes("w-full items-center py-6").props('data-testid="empty-state"'):
                ui.label("📋").classes("text-3xl")
                ui.label("Henüz görev yok").classes(C_SECTION_TITLE)
                ui.label("Yukarıdaki form ile ilk görevinizi ekleyin!").classes(STYLE_TEXT_SUBTLE)
            return
        with ui.column().classes("w-full gap-0"):
            for item in view["items"]:
                with ui.row().classes(STYLE_LIST_ROW).props('data-testid="todo-item"'):
                    if item["editing"]:
                        _render_edit_row(controller, item, run_intent, view["loading"])
                    else:
                        _render_item_row(controller, item, run_intent, view["loading"])

    def on_state(state: TodoState) -> None:
        if needs_redraw(rendered["state"], state):
            todo_list.refresh()
            sync_controls(state)
        rendered["state"] = state
        report_error(state.error)

    def report_error(error: Optional[FailureReport]) -> None:
        if error is None or error is rendered["error"]:
            rendered["error"] = error
            return
        rendered["error"] = error
        ui.notify(todos_to_viewmodel(controller.state)["error"], color="red")

    with ui.card().classes(f"{C_CARD} p-4 w-full"):
        todo_list()
    sync_controls(controller.state)
    rendered["state"] = controller.state

    unsubscribe = controller.subscribe(on_state)
    ui.context.client.on_disconnect(unsubscribe)


def _render_item_row(controller: TodoStoreController, item: dict, run_intent, busy: bool) -> None:
    with ui.row().classes("items-center gap-2"):
        ui.label(item["text"]).classes("text-sm text-slate-700")
        ui.label(item["label"]).classes(STYLE_TEXT_HINT)

    def handle_edit() -> None:
        controller.begin_edit(item["id"])

    async def handle_delete() -> None:
        await run_intent(controller.delete(item["id"]))

    with ui.row().classes("gap-1 no-wrap"):
        ui.button(icon="edit", on_click=handle_edit).props(
            'flat dense data-testid="edit-button" aria-label="Edit todo"'
        ).classes(C_BTN_SEC)
        delete_button = ui.button(icon="delete", on_click=handle_delete).props(
            'flat dense data-testid="delete-button" aria-label="Delete todo"'
        ).classes(C_BTN_DANGER)
        delete_button.set_enabled(not busy)


def _render_edit_row(controller: TodoStoreController, item: dict, run_intent, busy: bool) -> None:
    edit_input = (
        ui.input(value=item["draft"])
        .classes(C_INPUT)
        .props('outlined dense autofocus data-testid="edit-input" aria-label="Edit todo text"')
    )

    async def handle_save() -> None:
        await run_intent(controller.save_edit())

    edit_input.on("keydown.enter", handle_save)
    edit_input.on("keydown.escape", controller.cancel_edit)

    with ui.row().classes("gap-1 no-wrap"):
        save_button = ui.button("Kaydet", on_click=handle_save).props(
            'dense data-testid="save-button" aria-label="Save todo"'
        ).classes(C_BTN_PRIM)
        save_button.set_enabled(can_submit(item["draft"], busy))
        ui.button("İptal", on_click=controller.cancel_edit).props(
            'flat dense data-testid="cancel-button" aria-label="Cancel edit"'
        ).classes(C_BTN_SEC)

    def handle_draft(event) -> None:
        if controller.state.edit is None:
            return
        controller.update_draft(event.value or "")
        save_button.set_enabled(can_submit(event.value, controller.state.busy))

    edit_input.on_value_change(handle_draft)
