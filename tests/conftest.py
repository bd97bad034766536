"""Pytest configuration and shared fixtures for HabitWeek tests.

Provides an isolated SQLite database per test, a fixed clock anchored on
Monday 2024-01-15 and deterministic habit ids, so domain, persistence and
service tests never touch the real data directory.
"""

from __future__ import annotations

import itertools
from datetime import datetime
from typing import Any

import pytest
from sqlmodel import SQLModel, create_engine

import habitweek.models  # noqa: F401  (registers tables)
from habitweek.domain.store import HabitStore
from habitweek.infra.database import create_session_factory
from habitweek.infra.persistence import SQLModelStateGateway
from habitweek.services.tracker import HabitTracker

FIXED_NOW = datetime(2024, 1, 15, 9, 30)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point configuration at a temporary data directory."""

    monkeypatch.setenv("HABITWEEK_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("HABITWEEK_DEV_MODE", "false")
    for name in ("HABITWEEK_DATABASE_URL", "HABITWEEK_STORAGE_KEY", "HABITWEEK_EXPORT_DIR"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine(tmp_path):
    """Create an isolated SQLite database for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}", echo=False)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the one the app builds."""
    return create_session_factory(db_engine)


@pytest.fixture
def gateway(session_factory) -> SQLModelStateGateway:
    return SQLModelStateGateway(session_factory, key="habitTrackerState")


# =============================================================================
# Clock, ids and state
# =============================================================================


class MutableClock:
    """Callable clock whose time tests can move forward."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock() -> MutableClock:
    return MutableClock(FIXED_NOW)


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"habit-{next(counter)}"


@pytest.fixture
def store(clock, id_factory) -> HabitStore:
    return HabitStore(id_factory=id_factory, clock=clock)


@pytest.fixture
def tracker(gateway, clock, id_factory) -> HabitTracker:
    return HabitTracker.load(gateway, clock=clock, id_factory=id_factory)


class MemoryGateway:
    """In-memory gateway double that records saves and can fail on demand."""

    def __init__(self, data: dict[str, Any] | None = None, *, fail_saves: bool = False):
        self.data = data if data is not None else {"habits": []}
        self.fail_saves = fail_saves
        self.saves: list[dict[str, Any]] = []

    def load(self) -> dict[str, Any]:
        return self.data

    def save(self, data: dict[str, Any]) -> bool:
        self.saves.append(data)
        if self.fail_saves:
            return False
        self.data = data
        return True


@pytest.fixture
def memory_gateway() -> MemoryGateway:
    return MemoryGateway()
