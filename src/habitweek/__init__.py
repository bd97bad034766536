"""HabitWeek: a seven-day habit tracker."""

from __future__ import annotations

from .config import BaseConfig
from .domain import HabitStore, build_grid, compute_streak, compute_window
from .services import HabitTracker

__all__ = [
    "BaseConfig",
    "HabitStore",
    "HabitTracker",
    "build_grid",
    "compute_streak",
    "compute_window",
]
