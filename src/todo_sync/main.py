"""Run the todo NiceGUI app (UI plus the bundled todo API)."""

from __future__ import annotations

import logging

from nicegui import app, ui

from todo_sync.composition_root import AppContainer, create_app_container
from todo_sync.config import Settings
from todo_sync.logging_setup import setup_logging
from todo_sync.presentation.ui.pages.todos import render_todos
from todo_sync.styles import C_BG, C_CONTAINER

logger = logging.getLogger(__name__)


def register_app(container: AppContainer) -> None:
    if container.settings.serve_api:
        app.include_router(container.build_api_router())
        logger.info("Serving todo API (test routes: %s)", container.settings.enable_test_routes)
    app.on_shutdown(container.api_client.aclose)

    @ui.page("/")
    async def index_page() -> None:
        ui.query("body").classes(C_BG)
        controller = container.create_controller()
        with ui.column().classes(C_CONTAINER):
            render_todos(controller)
        await ui.context.client.connected()
        await controller.load()


def run() -> None:
    settings = Settings.from_env()
    setup_logging(debug=settings.debug)
    container = create_app_container(settings)
    register_app(container)
    logger.info("Todo API base URL: %s", settings.api_url)
    ui.run(
        title="Todo App",
        host=settings.host,
        port=settings.port,
        language="tr",
        favicon="📝",
        reload=False,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    run()
