"""Renderer-agnostic view model for the weekly habit grid.

``build_grid`` is pure: the same collection, window and ``today_key`` always
produce an equal ``HabitGrid``. Renderers paint it and route gestures back
through the ``RowAction`` / ``Cell`` identifiers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

from ..models.habit import Habit
from .dates import DateWindow
from .streaks import compute_streak

CHECK_GLYPH = "✓"
ACTIVATION_KEYS = frozenset({" ", "Space", "Enter"})
EMPTY_TITLE = "No habits yet"
EMPTY_HINT = "Add a habit"


class CellState(str, Enum):
    COMPLETED = "completed"
    EMPTY = "empty"
    FUTURE_DISABLED = "future-disabled"


class ActionKind(str, Enum):
    TICK_TODAY = "tick-today"
    DELETE = "delete"


@dataclass(frozen=True)
class Cell:
    habit_id: Any
    date_key: str
    day_label: str
    state: CellState
    aria_label: str

    @property
    def control_id(self) -> str:
        """Stable event-wiring id for this (habit, day) pair."""
        return f"cell:{self.habit_id}:{self.date_key}"

    @property
    def checked(self) -> bool:
        return self.state is CellState.COMPLETED

    @property
    def enabled(self) -> bool:
        return self.state is not CellState.FUTURE_DISABLED

    @property
    def text(self) -> str:
        return CHECK_GLYPH if self.checked else ""

    def activates_on(self, key: str) -> bool:
        """Keyboard parity with clicks: Space/Enter toggle enabled cells only."""
        return self.enabled and key in ACTIVATION_KEYS


@dataclass(frozen=True)
class RowAction:
    kind: ActionKind
    label: str
    habit_id: Any
    date_key: Optional[str] = None
    confirm_message: Optional[str] = None

    @property
    def requires_confirmation(self) -> bool:
        return self.confirm_message is not None


@dataclass(frozen=True)
class ViewRow:
    habit_id: Any
    name: str
    cells: tuple[Cell, ...]
    streak: int
    actions: tuple[RowAction, ...]

    def action(self, kind: ActionKind) -> RowAction:
        for action in self.actions:
            if action.kind is kind:
                return action
        raise KeyError(kind)


@dataclass(frozen=True)
class HabitGrid:
    rows: tuple[ViewRow, ...]
    is_empty: bool
    headers: tuple[str, ...] = ()
    range_label: str = ""
    today_key: str = ""
    empty_title: str = EMPTY_TITLE
    empty_hint: str = EMPTY_HINT

    def find_cell(self, control_id: str) -> Optional[Cell]:
        for row in self.rows:
            for cell in row.cells:
                if cell.control_id == control_id:
                    return cell
        return None


def cell_state(habit: Habit, key: str, today_key: str) -> CellState:
    if key > today_key:
        return CellState.FUTURE_DISABLED
    if habit.log.get(key):
        return CellState.COMPLETED
    return CellState.EMPTY


def delete_confirm_message(name: str) -> str:
    return f'Delete habit "{name}"?'


def build_row(habit: Habit, window: DateWindow, today_key: str) -> ViewRow:
    cells = tuple(
        Cell(
            habit_id=habit.id,
            date_key=key,
            day_label=label,
            state=cell_state(habit, key, today_key),
            aria_label=f"{habit.name} on {label}",
        )
        for key, label in zip(window.keys, window.labels)
    )
    actions = (
        RowAction(ActionKind.TICK_TODAY, "Tick today", habit.id, date_key=today_key),
        RowAction(
            ActionKind.DELETE,
            "Delete",
            habit.id,
            confirm_message=delete_confirm_message(habit.name),
        ),
    )
    return ViewRow(
        habit_id=habit.id,
        name=habit.name,
        cells=cells,
        streak=compute_streak(habit, window.keys),
        actions=actions,
    )


def build_grid(
    habits: Iterable[Habit], window: DateWindow, today_key: Optional[str] = None
) -> HabitGrid:
    """Build the full grid; an empty collection yields the empty sentinel."""

    today = today_key or window.today_key
    rows = tuple(build_row(habit, window, today) for habit in habits)
    return HabitGrid(
        rows=rows,
        is_empty=not rows,
        headers=window.labels,
        range_label=window.range_label,
        today_key=today,
    )


__all__ = [
    "ACTIVATION_KEYS",
    "CHECK_GLYPH",
    "ActionKind",
    "Cell",
    "CellState",
    "HabitGrid",
    "RowAction",
    "ViewRow",
    "build_grid",
    "build_row",
    "cell_state",
    "delete_confirm_message",
]
