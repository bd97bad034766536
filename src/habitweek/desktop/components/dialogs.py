"""Dialog and message components for the desktop app."""

from __future__ import annotations

from typing import Callable, Optional

import flet as ft


def show_message(page: ft.Page, message: str) -> None:
    """Display a snack bar message (the app's alert capability)."""

    if message:
        page.open(ft.SnackBar(content=ft.Text(message)))


def show_confirm_dialog(
    page: ft.Page,
    title: str,
    message: str,
    on_confirm: Callable[[], None],
    on_cancel: Optional[Callable[[], None]] = None,
    *,
    confirm_label: str = "Confirm",
) -> ft.AlertDialog:
    """Show a modal yes/no prompt; callbacks run after the dialog closes."""

    def handle_confirm(_e):
        page.close(dialog)
        on_confirm()

    def handle_cancel(_e):
        page.close(dialog)
        if on_cancel:
            on_cancel()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(title),
        content=ft.Text(message),
        actions=[
            ft.TextButton("Cancel", on_click=handle_cancel),
            ft.FilledButton(confirm_label, on_click=handle_confirm),
        ],
    )
    page.open(dialog)
    return dialog
