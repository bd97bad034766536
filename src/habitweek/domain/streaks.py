"""Streak calculation over the visible window."""

from __future__ import annotations

from typing import Sequence

from ..models.habit import Habit


def compute_streak(habit: Habit, window_keys: Sequence[str]) -> int:
    """Return consecutive completed days ending at the last key (today).

    Walks backwards from today and stops at the first gap, so the result is
    bounded by ``len(window_keys)``.
    """

    streak = 0
    for key in reversed(window_keys):
        if not habit.log.get(key):
            break
        streak += 1
    return streak


__all__ = ["compute_streak"]
