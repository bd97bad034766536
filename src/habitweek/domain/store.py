"""In-memory habit collection and its mutation API."""

from __future__ import annotations

import uuid
from typing import Any, Callable, Iterator, Mapping, Optional

from ..errors import FutureDateError, ValidationError
from ..logging_config import get_logger
from ..models.habit import Habit, HabitCollection
from .dates import Clock, local_now, today_key

logger = get_logger(__name__)

IdFactory = Callable[[], str]


def new_habit_id() -> str:
    """Random 128-bit identifier as 32 hex characters."""
    return uuid.uuid4().hex


class HabitStore:
    """Owns the habit collection; knows nothing about persistence or rendering.

    Every mutating call is synchronous. The caller persists and rebuilds the
    view afterwards.
    """

    def __init__(
        self,
        collection: HabitCollection | None = None,
        *,
        id_factory: IdFactory = new_habit_id,
        clock: Clock = local_now,
    ):
        self.collection = collection if collection is not None else HabitCollection()
        self._id_factory = id_factory
        self._clock = clock

    def __len__(self) -> int:
        return len(self.collection)

    def __iter__(self) -> Iterator[Habit]:
        return iter(self.collection)

    @property
    def habits(self) -> list[Habit]:
        return self.collection.habits

    def get(self, habit_id: Any) -> Optional[Habit]:
        """Return the first habit with ``habit_id`` or None."""
        for habit in self.collection.habits:
            if habit.id == habit_id:
                return habit
        return None

    def to_dict(self) -> dict[str, Any]:
        return self.collection.to_dict()

    def add_habit(self, name: str) -> Habit:
        cleaned = (name or "").strip()
        if not cleaned:
            raise ValidationError("Habit name is required")
        habit_id = self._id_factory()
        while self.get(habit_id) is not None:
            logger.warning("Generated habit id collided, retrying", extra={"habit_id": habit_id})
            habit_id = self._id_factory()
        habit = Habit(id=habit_id, name=cleaned)
        self.collection.habits.append(habit)
        logger.info("Habit added", extra={"habit_id": habit_id})
        return habit

    def delete_habit(self, habit_id: Any) -> bool:
        """Remove the habit; returns False when nothing matched."""
        before = len(self.collection.habits)
        self.collection.habits = [h for h in self.collection.habits if h.id != habit_id]
        removed = before - len(self.collection.habits)
        if removed:
            logger.info("Habit deleted", extra={"habit_id": habit_id})
        return bool(removed)

    def _guard_not_future(self, date_key: str) -> None:
        current = today_key(self._clock)
        # Fixed-width keys compare correctly as strings.
        if date_key > current:
            raise FutureDateError(date_key, current)

    def toggle_log(self, habit_id: Any, date_key: str) -> bool:
        """Flip completion of ``date_key``; returns True when the log changed."""

        habit = self.get(habit_id)
        if habit is None:
            return False
        try:
            self._guard_not_future(date_key)
        except FutureDateError as exc:
            logger.warning(
                "Attempted to log a future day",
                extra={"habit_id": habit_id, "date_key": exc.date_key, "today": exc.today_key},
            )
            return False

        if habit.log.get(date_key):
            del habit.log[date_key]
        else:
            habit.log[date_key] = True
        return True

    def replace_all(self, data: Any) -> None:
        """Replace the whole collection with imported/stored data.

        Only the top-level shape is checked; individual habits are loaded as-is.
        """

        if not isinstance(data, Mapping) or not isinstance(data.get("habits"), list):
            raise ValidationError("Expected an object with a 'habits' list")
        self.collection = HabitCollection.from_dict(data)
        logger.info("Habit collection replaced", extra={"habits": len(self.collection)})

    def reset_all(self) -> None:
        self.collection = HabitCollection()
        logger.info("Habit collection reset")


__all__ = ["HabitStore", "IdFactory", "new_habit_id"]
