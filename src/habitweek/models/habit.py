"""Habit tracking data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

_HABIT_FIELDS = ("id", "name", "log")


@dataclass
class Habit:
    """A user-defined habit plus its sparse completion log.

    ``log`` maps ``YYYY-MM-DD`` keys to ``True``; a missing key means the day
    was not completed. Unknown fields from imported files ride along in
    ``extra`` so they survive a save/export round trip.
    """

    id: Any
    name: str
    log: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    def is_completed(self, date_key: str) -> bool:
        return bool(self.log.get(date_key))

    @classmethod
    def from_dict(cls, raw: Any) -> "Habit":
        """Build a habit from stored/imported data without validating fields."""

        data: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
        name = data.get("name")
        log = data.get("log")
        return cls(
            id=data.get("id"),
            name="" if name is None else str(name),
            log=dict(log) if isinstance(log, Mapping) else {},
            extra={k: v for k, v in data.items() if k not in _HABIT_FIELDS},
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = dict(self.extra)
        payload.update({"id": self.id, "name": self.name, "log": dict(self.log)})
        return payload


@dataclass
class HabitCollection:
    """Ordered habits; list order is display order."""

    habits: list[Habit] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.habits)

    def __iter__(self):
        return iter(self.habits)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HabitCollection":
        """Parse the serialized form; the caller has checked ``habits`` is a list."""

        return cls(
            habits=[Habit.from_dict(item) for item in data["habits"]],
            extra={k: v for k, v in data.items() if k != "habits"},
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = dict(self.extra)
        payload["habits"] = [habit.to_dict() for habit in self.habits]
        return payload


__all__ = ["Habit", "HabitCollection"]
