"""Rolling seven-day window anchored on the local calendar date."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable, Union

WINDOW_DAYS = 7

Clock = Callable[[], datetime]
Reference = Union[date, datetime]


def local_now() -> datetime:
    """Default clock: naive local wall-clock time."""
    return datetime.now()


def to_local_date(reference: Reference) -> date:
    """Return the calendar date of ``reference`` on the local clock.

    Aware datetimes are converted to the local zone first so a UTC timestamp
    just after midnight UTC does not land on the wrong local day.
    """

    if isinstance(reference, datetime):
        if reference.tzinfo is not None:
            reference = reference.astimezone()
        return reference.date()
    return reference


def date_key(reference: Reference) -> str:
    """Format a date as the canonical zero-padded ``YYYY-MM-DD`` key."""

    d = to_local_date(reference)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def today_key(clock: Clock = local_now) -> str:
    return date_key(clock())


def parse_date_key(key: str) -> date:
    """Parse a ``YYYY-MM-DD`` key; raises ValueError on anything else."""

    if len(key) != 10:
        raise ValueError(f"Not a YYYY-MM-DD date key: {key!r}")
    return date.fromisoformat(key)


def day_label(day: date, offset: int) -> str:
    """Header label for a day ``offset`` days before today."""

    if offset == 0:
        return "Today"
    if offset == 1:
        return "Yesterday"
    return f"{day.strftime('%a')} {day.month:02d}/{day.day:02d}"


@dataclass(frozen=True)
class DateWindow:
    """Seven consecutive days, oldest first, ending today."""

    dates: tuple[date, ...]
    keys: tuple[str, ...]
    labels: tuple[str, ...]

    @property
    def today_key(self) -> str:
        return self.keys[-1]

    @property
    def range_label(self) -> str:
        """Week header text, e.g. ``1/9/2024 – 1/15/2024``."""

        first, last = self.dates[0], self.dates[-1]
        return f"{first.month}/{first.day}/{first.year} – {last.month}/{last.day}/{last.year}"

    def label_for(self, key: str) -> str:
        return self.labels[self.keys.index(key)]


def compute_window(reference: Reference | None = None, *, clock: Clock = local_now) -> DateWindow:
    """Compute the window ending on ``reference`` (defaults to ``clock()``).

    Callers must recompute this on every render; the date may have rolled
    over since the previous one.
    """

    today = to_local_date(reference if reference is not None else clock())
    dates: list[date] = []
    keys: list[str] = []
    labels: list[str] = []
    for offset in range(WINDOW_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        dates.append(day)
        keys.append(date_key(day))
        labels.append(day_label(day, offset))
    return DateWindow(dates=tuple(dates), keys=tuple(keys), labels=tuple(labels))


__all__ = [
    "WINDOW_DAYS",
    "Clock",
    "DateWindow",
    "compute_window",
    "date_key",
    "day_label",
    "local_now",
    "parse_date_key",
    "to_local_date",
    "today_key",
]
