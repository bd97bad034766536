"""Persistence gateway storing the habit collection as one JSON blob."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from ..errors import StorageError
from ..logging_config import get_logger
from ..models.state_blob import StateBlob
from .database import SessionFactory

logger = get_logger(__name__)


def empty_state() -> dict[str, Any]:
    return {"habits": []}


class SQLModelStateGateway:
    """Load/save the serialized collection under a single key.

    ``load`` and ``save`` never raise: failures are logged as warnings and the
    caller keeps working with its in-memory state.
    """

    def __init__(self, session_factory: SessionFactory, key: str = "habitTrackerState"):
        self.session_factory = session_factory
        self.key = key

    def read_raw(self) -> str | None:
        """Return the stored payload text, raising StorageError on DB failure."""
        try:
            with self.session_factory() as session:
                row = session.exec(select(StateBlob).where(StateBlob.key == self.key)).first()
                return row.value if row else None
        except SQLAlchemyError as exc:
            raise StorageError(f"Could not read state '{self.key}'") from exc

    def write_raw(self, payload: str) -> None:
        """Upsert the payload text, raising StorageError on DB failure."""
        try:
            with self.session_factory() as session:
                row = session.get(StateBlob, self.key)
                if row is None:
                    row = StateBlob(key=self.key, value=payload)
                else:
                    row.value = payload
                    row.updated_at = datetime.now()
                session.add(row)
        except SQLAlchemyError as exc:
            raise StorageError(f"Could not write state '{self.key}'") from exc

    def load(self) -> dict[str, Any]:
        try:
            raw = self.read_raw()
        except StorageError as exc:
            logger.warning("Error loading state, starting empty", exc_info=exc)
            return empty_state()
        if raw is None:
            return empty_state()
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Stored state is not valid JSON, starting empty", extra={"error": str(exc)})
            return empty_state()
        if not isinstance(data, dict) or not isinstance(data.get("habits"), list):
            logger.warning("Stored state has no habits list, starting empty")
            return empty_state()
        return data

    def save(self, data: dict[str, Any]) -> bool:
        try:
            payload = json.dumps(data, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            logger.warning("State is not serializable, not saved", exc_info=exc)
            return False
        try:
            self.write_raw(payload)
        except StorageError as exc:
            logger.warning("Error saving state", exc_info=exc)
            return False
        logger.debug("State saved", extra={"key": self.key, "bytes": len(payload)})
        return True


__all__ = ["SQLModelStateGateway", "empty_state"]
