"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import flet as ft

from ..config import BaseConfig
from ..domain.dates import Clock, local_now
from ..domain.view_model import HabitGrid
from ..infra.database import SessionFactory, bootstrap_database
from ..infra.persistence import SQLModelStateGateway
from ..services.tracker import HabitTracker


@dataclass
class AppContext:
    """Centralized application context with services and UI state."""

    config: BaseConfig
    session_factory: SessionFactory
    gateway: SQLModelStateGateway
    tracker: HabitTracker

    # Page reference (set after initialization)
    page: Optional[ft.Page] = None
    file_picker: Optional[ft.FilePicker] = None
    file_picker_mode: Optional[str] = None
    dev_mode: bool = False

    # Set by the habits view; repaints the grid after every mutation
    painter: Optional[Callable[[HabitGrid], None]] = None

    def paint(self, grid: HabitGrid) -> None:
        if self.painter is not None:
            self.painter(grid)


def create_app_context(
    config: Optional[BaseConfig] = None, *, clock: Clock = local_now
) -> AppContext:
    """Create the context: database, gateway, and a tracker seeded from storage."""

    if config is None:
        config = BaseConfig()

    _engine, session_factory = bootstrap_database(config)
    gateway = SQLModelStateGateway(session_factory, key=config.STORAGE_KEY)
    tracker = HabitTracker.load(gateway, clock=clock)

    ctx = AppContext(
        config=config,
        dev_mode=config.DEV_MODE,
        session_factory=session_factory,
        gateway=gateway,
        tracker=tracker,
    )
    tracker.subscribe(ctx.paint)
    return ctx
