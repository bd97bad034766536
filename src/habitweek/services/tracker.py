"""Top-level controller running the mutate, persist, rebuild, repaint cycle."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Protocol

from ..domain.dates import Clock, compute_window, local_now, today_key
from ..domain.store import HabitStore, IdFactory, new_habit_id
from ..domain.view_model import ActionKind, HabitGrid, RowAction, build_grid, delete_confirm_message
from ..errors import StorageError, ValidationError
from ..logging_config import get_logger
from . import transfer

logger = get_logger(__name__)

IMPORT_OK = "Import complete. Data loaded."
IMPORT_FAILED = "Import failed. Please check the JSON file format."
RESET_CONFIRM = "Are you sure? This will permanently remove all habits and logs from this device."
RESET_DONE = "All data reset."
SAVE_FAILED = "Changes could not be saved; they are kept for this session only."

Confirm = Callable[[str], bool]
Listener = Callable[[HabitGrid], None]


class StateGateway(Protocol):
    """Storage medium for the serialized collection."""

    def load(self) -> dict[str, Any]:
        ...

    def save(self, data: dict[str, Any]) -> bool:
        ...


@dataclass(frozen=True)
class Outcome:
    """Result of a user-facing operation; ``message`` is shown when non-empty."""

    ok: bool
    message: str = ""
    saved: bool = True
    path: Optional[Path] = None


class HabitTracker:
    """Owns the habit state and drives every render cycle.

    Each successful mutation is persisted, the grid is rebuilt from scratch
    (with a freshly computed date window) and every listener is repainted.
    """

    def __init__(
        self,
        gateway: StateGateway,
        *,
        store: HabitStore | None = None,
        clock: Clock = local_now,
        id_factory: IdFactory = new_habit_id,
        listeners: Iterable[Listener] = (),
    ):
        self.gateway = gateway
        self.clock = clock
        self.store = store if store is not None else HabitStore(id_factory=id_factory, clock=clock)
        self._listeners: list[Listener] = list(listeners)

    @classmethod
    def load(cls, gateway: StateGateway, **kwargs: Any) -> "HabitTracker":
        """Create a tracker seeded from whatever the gateway has stored."""

        tracker = cls(gateway, **kwargs)
        tracker.store.replace_all(gateway.load())
        logger.info("Habit state loaded", extra={"habits": len(tracker.store)})
        return tracker

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def build(self) -> HabitGrid:
        window = compute_window(clock=self.clock)
        return build_grid(self.store, window, today_key(self.clock))

    def refresh(self) -> HabitGrid:
        """Rebuild and repaint without mutating (e.g. after midnight)."""
        grid = self.build()
        for listener in self._listeners:
            listener(grid)
        return grid

    def _commit(self, message: str = "", **extra: Any) -> Outcome:
        saved = self.gateway.save(self.store.to_dict())
        self.refresh()
        if not saved:
            message = f"{message} {SAVE_FAILED}".strip()
        return Outcome(ok=True, message=message, saved=saved, **extra)

    # Mutations -----------------------------------------------------------

    def add_habit(self, name: str) -> Outcome:
        try:
            self.store.add_habit(name)
        except ValidationError as exc:
            return Outcome(ok=False, message=str(exc))
        return self._commit()

    def toggle(self, habit_id: Any, date_key: str) -> Outcome:
        if not self.store.toggle_log(habit_id, date_key):
            return Outcome(ok=False)
        return self._commit()

    def tick_today(self, habit_id: Any) -> Outcome:
        """Toggle today's key; a second tick un-marks today again."""
        return self.toggle(habit_id, today_key(self.clock))

    def delete_habit(self, habit_id: Any, confirm: Confirm | None = None) -> Outcome:
        habit = self.store.get(habit_id)
        if habit is None:
            return Outcome(ok=False)
        if confirm is not None and not confirm(delete_confirm_message(habit.name)):
            return Outcome(ok=False)
        self.store.delete_habit(habit_id)
        return self._commit()

    def reset_all(self, confirm: Confirm | None = None) -> Outcome:
        if confirm is not None and not confirm(RESET_CONFIRM):
            return Outcome(ok=False)
        self.store.reset_all()
        return self._commit(RESET_DONE)

    def import_data(self, data: Any) -> Outcome:
        try:
            self.store.replace_all(data)
        except ValidationError as exc:
            logger.warning("Import rejected", extra={"reason": str(exc)})
            return Outcome(ok=False, message=IMPORT_FAILED)
        return self._commit(IMPORT_OK)

    def import_text(self, text: str) -> Outcome:
        try:
            data = transfer.parse_import_text(text)
        except ValidationError as exc:
            logger.warning("Import rejected", extra={"reason": str(exc)})
            return Outcome(ok=False, message=IMPORT_FAILED)
        return self.import_data(data)

    def import_file(self, path: Path) -> Outcome:
        # The file is read completely before the store is touched.
        try:
            data = transfer.read_import_file(path)
        except (ValidationError, StorageError) as exc:
            logger.warning("Import rejected", extra={"path": str(path), "reason": str(exc)})
            return Outcome(ok=False, message=IMPORT_FAILED)
        return self.import_data(data)

    # Export --------------------------------------------------------------

    def export_text(self) -> str:
        return transfer.serialize_export(self.store.to_dict())

    def export_to(self, output_dir: Path) -> Outcome:
        try:
            path = transfer.write_export(self.store.to_dict(), output_dir)
        except StorageError as exc:
            logger.warning("Export failed", exc_info=exc)
            return Outcome(ok=False, message=f"Export failed: {exc}")
        logger.info("Habits exported", extra={"path": str(path)})
        return Outcome(ok=True, message=f"Exported to {path}", path=path)

    # Renderer dispatch ---------------------------------------------------

    def run_action(self, action: RowAction, confirm: Confirm | None = None) -> Outcome:
        """Route a row action from any renderer back into the store."""

        if action.kind is ActionKind.TICK_TODAY:
            return self.tick_today(action.habit_id)
        if action.kind is ActionKind.DELETE:
            return self.delete_habit(action.habit_id, confirm=confirm)
        raise ValueError(f"Unknown action: {action.kind}")


__all__ = [
    "IMPORT_FAILED",
    "IMPORT_OK",
    "RESET_CONFIRM",
    "RESET_DONE",
    "Confirm",
    "HabitTracker",
    "Listener",
    "Outcome",
    "StateGateway",
]
