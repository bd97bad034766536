"""Pure habit-tracking core: date window, store, streaks and view model."""

from .dates import DateWindow, compute_window, date_key, today_key
from .store import HabitStore
from .streaks import compute_streak
from .view_model import CellState, HabitGrid, ViewRow, build_grid

__all__ = [
    "CellState",
    "DateWindow",
    "HabitGrid",
    "HabitStore",
    "ViewRow",
    "build_grid",
    "compute_streak",
    "compute_window",
    "date_key",
    "today_key",
]
