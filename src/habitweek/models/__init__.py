"""Data structures and SQLModel table exports."""

from .habit import Habit, HabitCollection
from .state_blob import StateBlob

__all__ = ["Habit", "HabitCollection", "StateBlob"]
