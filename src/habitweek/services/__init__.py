"""Service layer for HabitWeek."""

from .tracker import HabitTracker, Outcome
from .transfer import parse_import_text, read_import_file, serialize_export, write_export

__all__ = [
    "HabitTracker",
    "Outcome",
    "parse_import_text",
    "read_import_file",
    "serialize_export",
    "write_export",
]
