"""Headless smoke tests for the Flet desktop adapter."""

from __future__ import annotations

import logging
from types import SimpleNamespace

import flet as ft
import pytest

from habitweek.config import BaseConfig
from habitweek.desktop import controllers
from habitweek.desktop.app import main as desktop_main
from habitweek.desktop.context import create_app_context
from habitweek.desktop.views.habits import build_habits_view
from habitweek.domain.view_model import ActionKind


class DummyPage:
    """Minimal stand-in for flet.Page used in view builders and controller tests."""

    def __init__(self):
        self.views: list[ft.View] = []
        self.overlay: list[ft.Control] = []
        self.opened: list[ft.Control] = []
        self.closed: list[ft.Control] = []
        self.updates = 0
        self.window = SimpleNamespace()
        self.title = ""

    def open(self, control):
        self.opened.append(control)

    def close(self, control):
        self.closed.append(control)

    def update(self):
        self.updates += 1

    padding = 0
    theme_mode = ft.ThemeMode.LIGHT


def _walk(control):
    yield control
    content = getattr(control, "content", None)
    if isinstance(content, ft.Control):
        yield from _walk(content)
    for child in getattr(control, "controls", None) or []:
        yield from _walk(child)


def _checkboxes(view):
    return [c for c in _walk(view) if isinstance(c, ft.Checkbox)]


def _texts(view):
    return [c.value for c in _walk(view) if isinstance(c, ft.Text)]


def _snack_messages(page):
    return [c.content.value for c in page.opened if isinstance(c, ft.SnackBar)]


@pytest.fixture
def ctx(tmp_path, clock):
    return create_app_context(BaseConfig(data_dir=tmp_path), clock=clock)


@pytest.fixture
def page():
    return DummyPage()


@pytest.fixture
def view(ctx, page):
    return build_habits_view(ctx, page)


def test_empty_view_shows_invitation(view):
    assert isinstance(view, ft.View)
    assert view.route == "/"
    texts = _texts(view)
    assert "No habits yet" in texts
    assert "Add a habit" in texts
    assert "1/9/2024 – 1/15/2024" in texts
    assert _checkboxes(view) == []


def test_add_habit_repaints_grid(ctx, page, view):
    field = ft.TextField(value="Run")

    controllers.add_habit(ctx, page, field)

    assert field.value == ""
    boxes = _checkboxes(view)
    assert len(boxes) == 7
    assert boxes[-1].data == "cell:" + ctx.tracker.store.habits[0].id + ":2024-01-15"
    assert "No habits yet" not in _texts(view)


def test_blank_name_sets_field_error(ctx, page, view):
    field = ft.TextField(value="   ")

    controllers.add_habit(ctx, page, field)

    assert field.error_text == "Habit name is required"
    assert len(ctx.tracker.store) == 0


def test_checkbox_change_toggles_day(ctx, page, view):
    controllers.add_habit(ctx, page, ft.TextField(value="Run"))
    habit = ctx.tracker.store.habits[0]

    _checkboxes(view)[-1].on_change(None)

    assert habit.is_completed("2024-01-15")
    assert _checkboxes(view)[-1].value is True
    assert "1" in _texts(view)


def test_delete_requires_dialog_confirmation(ctx, page, view):
    controllers.add_habit(ctx, page, ft.TextField(value="Run"))
    row = ctx.tracker.build().rows[0]

    controllers.run_row_action(ctx, page, row.action(ActionKind.DELETE))

    dialog = next(c for c in page.opened if isinstance(c, ft.AlertDialog))
    assert dialog.content.value == 'Delete habit "Run"?'
    assert len(ctx.tracker.store) == 1

    dialog.actions[1].on_click(None)

    assert dialog in page.closed
    assert len(ctx.tracker.store) == 0
    assert "No habits yet" in _texts(view)


def test_reset_cancel_keeps_data(ctx, page, view):
    controllers.add_habit(ctx, page, ft.TextField(value="Run"))

    controllers.confirm_reset(ctx, page)
    dialog = next(c for c in page.opened if isinstance(c, ft.AlertDialog))
    dialog.actions[0].on_click(None)

    assert len(ctx.tracker.store) == 1


def test_reset_confirm_clears_and_reports(ctx, page, view):
    controllers.add_habit(ctx, page, ft.TextField(value="Run"))

    controllers.confirm_reset(ctx, page)
    dialog = next(c for c in page.opened if isinstance(c, ft.AlertDialog))
    dialog.actions[1].on_click(None)

    assert len(ctx.tracker.store) == 0
    assert "All data reset." in _snack_messages(page)
    assert ctx.gateway.load() == {"habits": []}


def test_shortcuts(ctx, page, view):
    assert controllers.handle_shortcut(ctx, page, "F5", False) is True
    assert controllers.handle_shortcut(ctx, page, "E", False) is False

    assert controllers.handle_shortcut(ctx, page, "I", True) is True
    assert "File picker is not available." in _snack_messages(page)


def test_file_picker_attaches_to_overlay(ctx, page):
    picker = controllers.attach_file_picker(ctx, page)

    assert picker in page.overlay
    assert ctx.file_picker is picker


def test_main_builds_single_view(page):
    try:
        desktop_main(page)
    finally:
        root = logging.getLogger("habitweek")
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        root.setLevel(logging.NOTSET)

    assert len(page.views) == 1
    assert page.title == "HabitWeek"
    assert page.window.min_width == 1100
    assert any(isinstance(c, ft.FilePicker) for c in page.overlay)
