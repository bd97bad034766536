"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "HabitWeek"
    DB_FILENAME = "habitweek.db"
    EXPORT_FILENAME = "habits-export.json"
    DEFAULT_STORAGE_KEY = "habitTrackerState"

    def __init__(self, data_dir: str | Path | None = None) -> None:
        self.DATA_DIR = self._resolve_data_dir(data_dir)
        self.DEV_MODE = _env_bool("HABITWEEK_DEV_MODE", default=True)
        self.STORAGE_KEY = os.getenv("HABITWEEK_STORAGE_KEY", self.DEFAULT_STORAGE_KEY)
        self.DATABASE_URL = os.getenv("HABITWEEK_DATABASE_URL", self._build_sqlite_url())
        self.EXPORT_DIR = self._resolve_export_dir()
        if not self.STORAGE_KEY.strip():
            raise ValueError("HABITWEEK_STORAGE_KEY must not be blank.")

    def _resolve_data_dir(self, override: str | Path | None = None) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = override if override is not None else os.getenv("HABITWEEK_DATA_DIR", "instance")
        base_path = Path(data_root).expanduser()
        try:
            path = base_path.resolve()
            path.mkdir(parents=True, exist_ok=True)
            return path
        except PermissionError:
            # Protected install locations: fall back to user-local storage.
            local_app_data = os.getenv("LOCALAPPDATA") or (Path.home() / ".local" / "share")
            fallback_path = Path(local_app_data).expanduser() / self.APP_NAME
            fallback_path.mkdir(parents=True, exist_ok=True)
            return fallback_path.resolve()

    def _resolve_export_dir(self) -> Path:
        raw = os.getenv("HABITWEEK_EXPORT_DIR")
        if raw:
            return Path(raw).expanduser().resolve()
        return self.DATA_DIR / "exports"

    def _build_sqlite_url(self) -> str:
        """Construct the default SQLite URL inside DATA_DIR."""

        db_path = self.DATA_DIR / self.DB_FILENAME
        return f"sqlite:///{db_path}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        connect_args: dict[str, Any] = {}
        if self.DATABASE_URL.startswith("sqlite"):
            # Flet dispatches handlers on worker threads.
            connect_args["check_same_thread"] = False
        return {"connect_args": connect_args}

