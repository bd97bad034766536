"""Controller helpers wiring desktop gestures back into the tracker."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

import flet as ft

from ..devtools import dev_log
from ..domain.view_model import Cell, RowAction
from ..services.tracker import RESET_CONFIRM, Outcome
from .components import show_confirm_dialog, show_message

if TYPE_CHECKING:
    from .context import AppContext


def report(page: ft.Page, outcome: Outcome) -> None:
    """Surface an outcome message, if any, to the user."""

    if outcome.message:
        show_message(page, outcome.message)


def toggle_cell(ctx: AppContext, page: ft.Page, cell: Cell) -> None:
    if not cell.enabled:
        return
    outcome = ctx.tracker.toggle(cell.habit_id, cell.date_key)
    dev_log(
        ctx.config,
        "Cell toggled",
        context={"cell": cell.control_id, "changed": outcome.ok},
    )
    report(page, outcome)


def add_habit(ctx: AppContext, page: ft.Page, field: ft.TextField) -> None:
    outcome = ctx.tracker.add_habit(field.value or "")
    if outcome.ok:
        field.value = ""
        field.error_text = None
    else:
        field.error_text = outcome.message
    page.update()
    if outcome.ok:
        report(page, outcome)


def run_row_action(ctx: AppContext, page: ft.Page, action: RowAction) -> None:
    """Run a row action, asking first when the action needs confirmation."""

    if not action.requires_confirmation:
        report(page, ctx.tracker.run_action(action))
        return
    show_confirm_dialog(
        page,
        action.label,
        action.confirm_message or "",
        on_confirm=lambda: report(page, ctx.tracker.run_action(action)),
        confirm_label=action.label,
    )


def confirm_reset(ctx: AppContext, page: ft.Page) -> None:
    show_confirm_dialog(
        page,
        "Reset all data",
        RESET_CONFIRM,
        on_confirm=lambda: report(page, ctx.tracker.reset_all()),
        confirm_label="Reset",
    )


def attach_file_picker(ctx: AppContext, page: ft.Page) -> ft.FilePicker:
    """Create and attach the shared file picker used for import and export."""

    def _on_result(e: ft.FilePickerResultEvent) -> None:
        mode = ctx.file_picker_mode
        ctx.file_picker_mode = None
        if mode == "import":
            selected = e.files[0] if e.files else None
            if not selected or not selected.path:
                dev_log(ctx.config, "Import picker dismissed")
                return
            dev_log(ctx.config, "Import file selected", context={"path": selected.path})
            report(page, ctx.tracker.import_file(Path(selected.path)))
        elif mode == "export":
            target = Path(e.path) if e.path else ctx.config.EXPORT_DIR
            dev_log(ctx.config, "Export destination selected", context={"path": target})
            report(page, ctx.tracker.export_to(target))
        else:
            dev_log(ctx.config, "File picker result without mode", context={"mode": mode})

    picker = ft.FilePicker(on_result=_on_result)
    page.overlay.append(picker)
    ctx.file_picker = picker
    return picker


def _ensure_picker(ctx: AppContext, page: ft.Page) -> Optional[ft.FilePicker]:
    if ctx.file_picker is None:
        show_message(page, "File picker is not available.")
        return None
    return ctx.file_picker


def start_import(ctx: AppContext, page: ft.Page) -> None:
    picker = _ensure_picker(ctx, page)
    if picker is None:
        return
    ctx.file_picker_mode = "import"
    picker.pick_files(
        dialog_title="Import habits",
        allow_multiple=False,
        allowed_extensions=["json"],
    )


def start_export(ctx: AppContext, page: ft.Page) -> None:
    picker = _ensure_picker(ctx, page)
    if picker is None:
        return
    ctx.file_picker_mode = "export"
    picker.get_directory_path(dialog_title="Select export destination")


def handle_shortcut(ctx: AppContext, page: ft.Page, key: str, ctrl: bool) -> bool:
    """Ctrl+E export, Ctrl+I import, F5 rebuild; returns True when handled."""

    if key == "F5":
        ctx.tracker.refresh()
        return True
    if not ctrl:
        return False
    if key.upper() == "E":
        start_export(ctx, page)
        return True
    if key.upper() == "I":
        start_import(ctx, page)
        return True
    return False


__all__ = [
    "add_habit",
    "attach_file_picker",
    "confirm_reset",
    "handle_shortcut",
    "report",
    "run_row_action",
    "start_export",
    "start_import",
    "toggle_cell",
]
