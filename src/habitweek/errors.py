"""Error kinds raised by the habit tracker core."""

from __future__ import annotations


class HabitWeekError(Exception):
    """Base class for recoverable tracker errors."""


class ValidationError(HabitWeekError, ValueError):
    """User input or imported data has the wrong shape."""


class StorageError(HabitWeekError):
    """The backing store could not be read or written."""


class FutureDateError(HabitWeekError):
    """A completion was requested for a day after today."""

    def __init__(self, date_key: str, today_key: str):
        super().__init__(f"{date_key} is after today ({today_key})")
        self.date_key = date_key
        self.today_key = today_key


__all__ = ["HabitWeekError", "ValidationError", "StorageError", "FutureDateError"]
