"""Reusable UI components for the desktop app."""

from .dialogs import show_confirm_dialog, show_message
from .widgets import day_checkbox, empty_state, header_row

__all__ = [
    "day_checkbox",
    "empty_state",
    "header_row",
    "show_confirm_dialog",
    "show_message",
]
