"""Main Flet desktop application entry point."""

from __future__ import annotations

import flet as ft

from ..devtools import dev_log
from ..logging_config import session_log_path, setup_logging
from . import controllers
from .components import show_message
from .context import create_app_context
from .views.habits import build_habits_view


def main(page: ft.Page) -> None:
    """Main entry point for the Flet desktop app."""

    ctx = create_app_context()
    logger = setup_logging(ctx.config)
    logger.info("HabitWeek desktop application starting", extra={"habits": len(ctx.tracker.store)})

    def on_page_close(_):
        slp = session_log_path()
        logger.info("Application closing", extra={"session_log": str(slp) if slp else None})

    page.on_close = on_page_close

    ctx.page = page
    page.title = f"{ctx.config.APP_NAME} (DEV)" if ctx.dev_mode else ctx.config.APP_NAME
    if ctx.dev_mode:
        dev_log(ctx.config, "Dev mode enabled", context={"data_dir": ctx.config.DATA_DIR})
    page.theme_mode = ft.ThemeMode.LIGHT
    page.padding = 0
    page.window.width = 1280
    page.window.height = 720
    page.window.min_width = 1100
    page.window.min_height = 480

    controllers.attach_file_picker(ctx, page)

    def handle_shortcuts(e: ft.KeyboardEvent):
        controllers.handle_shortcut(ctx, page, e.key, e.ctrl)

    page.on_keyboard_event = handle_shortcuts

    def _on_error(e: ft.ControlEvent):  # pragma: no cover (UI callback)
        msg = getattr(e, "data", None) or "<no-data>"
        logger.error("Flet page error", extra={"event": "error", "data": msg})
        show_message(page, f"UI error: {msg}")

    page.on_error = _on_error

    page.views.clear()
    page.views.append(build_habits_view(ctx, page))
    page.update()


if __name__ == "__main__":
    ft.app(target=main)
