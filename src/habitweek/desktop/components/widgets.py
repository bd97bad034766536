"""Reusable widget components for the desktop app."""

from __future__ import annotations

import flet as ft

from ...domain.view_model import Cell, CellState

NAME_WIDTH = 200
CELL_WIDTH = 92
STREAK_WIDTH = 64
ACTIONS_WIDTH = 200


def empty_state(title: str, hint: str) -> ft.Container:
    """Invitational placeholder shown instead of habit rows."""

    return ft.Container(
        content=ft.Column(
            [
                ft.Icon(ft.Icons.CHECK_CIRCLE_OUTLINE, size=40, color=ft.Colors.ON_SURFACE_VARIANT),
                ft.Text(title, size=18, weight=ft.FontWeight.BOLD),
                ft.Text(hint, color=ft.Colors.ON_SURFACE_VARIANT),
            ],
            alignment=ft.MainAxisAlignment.CENTER,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
        padding=20,
    )


def header_row(labels: tuple[str, ...]) -> ft.Row:
    controls: list[ft.Control] = [
        ft.Container(ft.Text("Habit", weight=ft.FontWeight.BOLD), width=NAME_WIDTH),
    ]
    controls.extend(
        ft.Container(
            ft.Text(label, weight=ft.FontWeight.BOLD, text_align=ft.TextAlign.CENTER),
            width=CELL_WIDTH,
            alignment=ft.alignment.center,
        )
        for label in labels
    )
    controls.append(ft.Container(ft.Text("Streak", weight=ft.FontWeight.BOLD), width=STREAK_WIDTH))
    controls.append(ft.Container(ft.Text("Actions", weight=ft.FontWeight.BOLD), width=ACTIONS_WIDTH))
    return ft.Row(controls, spacing=0)


def day_checkbox(cell: Cell, on_toggle) -> ft.Container:
    """Checkbox for one (habit, day); Space/Enter activate it like a click."""

    checkbox = ft.Checkbox(
        value=cell.checked,
        disabled=not cell.enabled,
        tooltip=cell.aria_label,
        data=cell.control_id,
        active_color=ft.Colors.GREEN if cell.state is CellState.COMPLETED else None,
        on_change=lambda _e: on_toggle(cell),
    )
    return ft.Container(checkbox, width=CELL_WIDTH, alignment=ft.alignment.center)
