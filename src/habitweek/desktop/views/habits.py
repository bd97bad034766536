"""Habits view: paints the weekly grid and wires gestures to the tracker."""

from __future__ import annotations

from typing import TYPE_CHECKING

import flet as ft

from .. import controllers
from ...domain.view_model import ActionKind, HabitGrid, ViewRow
from ..components import day_checkbox, empty_state, header_row
from ..components.widgets import NAME_WIDTH, STREAK_WIDTH

if TYPE_CHECKING:
    from ..context import AppContext


def build_row_control(ctx: AppContext, page: ft.Page, row: ViewRow) -> ft.Control:
    """One habit row: name, seven day checkboxes, streak, actions."""

    controls: list[ft.Control] = [
        ft.Container(
            ft.Text(row.name, no_wrap=True, overflow=ft.TextOverflow.ELLIPSIS, tooltip=row.name),
            width=NAME_WIDTH,
        )
    ]
    controls.extend(
        day_checkbox(cell, lambda c: controllers.toggle_cell(ctx, page, c)) for cell in row.cells
    )
    controls.append(ft.Container(ft.Text(str(row.streak)), width=STREAK_WIDTH))

    tick = row.action(ActionKind.TICK_TODAY)
    delete = row.action(ActionKind.DELETE)
    controls.append(
        ft.Row(
            [
                ft.OutlinedButton(
                    tick.label,
                    on_click=lambda _e, a=tick: controllers.run_row_action(ctx, page, a),
                ),
                ft.OutlinedButton(
                    delete.label,
                    icon=ft.Icons.DELETE_OUTLINE,
                    icon_color=ft.Colors.RED,
                    on_click=lambda _e, a=delete: controllers.run_row_action(ctx, page, a),
                ),
            ],
            spacing=8,
        )
    )
    return ft.Container(
        content=ft.Row(controls, spacing=0, vertical_alignment=ft.CrossAxisAlignment.CENTER),
        padding=ft.padding.symmetric(vertical=4),
        border=ft.border.only(bottom=ft.BorderSide(1, ft.Colors.OUTLINE_VARIANT)),
        data=row.habit_id,
    )


def build_habits_view(ctx: AppContext, page: ft.Page) -> ft.View:
    """Build the habits view and register its painter on the context."""

    range_text = ft.Text("", color=ft.Colors.ON_SURFACE_VARIANT)
    header_holder = ft.Container()
    rows_column = ft.Column(spacing=0)

    def paint(grid: HabitGrid) -> None:
        """Replace every row from the freshly built grid; no diffing."""

        range_text.value = grid.range_label
        header_holder.content = header_row(grid.headers)
        if grid.is_empty:
            rows_column.controls = [empty_state(grid.empty_title, grid.empty_hint)]
        else:
            rows_column.controls = [build_row_control(ctx, page, row) for row in grid.rows]
        page.update()

    ctx.painter = paint

    name_field = ft.TextField(
        label="New habit",
        hint_text="e.g. Read 20 pages",
        width=320,
        max_length=100,
        on_submit=lambda _e: controllers.add_habit(ctx, page, name_field),
    )

    form = ft.Row(
        [
            name_field,
            ft.FilledButton(
                "Add habit",
                icon=ft.Icons.ADD,
                on_click=lambda _e: controllers.add_habit(ctx, page, name_field),
            ),
        ],
        vertical_alignment=ft.CrossAxisAlignment.START,
    )

    toolbar = ft.Row(
        [
            ft.OutlinedButton(
                "Export JSON",
                icon=ft.Icons.DOWNLOAD,
                tooltip="Export (Ctrl+E)",
                on_click=lambda _e: controllers.start_export(ctx, page),
            ),
            ft.OutlinedButton(
                "Import JSON",
                icon=ft.Icons.UPLOAD_FILE,
                tooltip="Import (Ctrl+I)",
                on_click=lambda _e: controllers.start_import(ctx, page),
            ),
            ft.OutlinedButton(
                "Reset all",
                icon=ft.Icons.DELETE_FOREVER,
                icon_color=ft.Colors.RED,
                on_click=lambda _e: controllers.confirm_reset(ctx, page),
            ),
            ft.IconButton(
                icon=ft.Icons.REFRESH,
                tooltip="Refresh (F5)",
                on_click=lambda _e: ctx.tracker.refresh(),
            ),
        ],
        spacing=8,
    )

    ctx.tracker.refresh()

    content = ft.Column(
        [
            ft.Row(
                [ft.Text("This week", size=24, weight=ft.FontWeight.BOLD), range_text],
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            ),
            form,
            header_holder,
            rows_column,
            ft.Divider(),
            toolbar,
        ],
        scroll=ft.ScrollMode.AUTO,
        expand=True,
    )

    return ft.View(
        route="/",
        appbar=ft.AppBar(
            leading=ft.Icon(ft.Icons.CHECK_CIRCLE),
            title=ft.Text(ctx.config.APP_NAME, size=20, weight=ft.FontWeight.BOLD),
            center_title=False,
            bgcolor=ft.Colors.SURFACE_CONTAINER_HIGHEST,
        ),
        controls=[ft.Container(content, padding=16, expand=True)],
        padding=0,
    )
