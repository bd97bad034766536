"""JSON export/import helpers for the whole habit collection."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from ..config import BaseConfig
from ..errors import StorageError, ValidationError

EXPORT_FILENAME = BaseConfig.EXPORT_FILENAME


def serialize_export(data: Mapping[str, Any]) -> str:
    """Pretty-printed JSON matching the stored document."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def write_export(
    data: Mapping[str, Any], output_dir: Path, *, filename: str = EXPORT_FILENAME
) -> Path:
    """Write ``filename`` into ``output_dir`` and return the path written."""

    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path = output_dir / filename
        output_path.write_text(serialize_export(data) + "\n", encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Could not write export to {output_dir}") from exc
    return output_path


def parse_import_text(text: str) -> dict[str, Any]:
    """Parse an export document, checking only the top-level ``habits`` list."""

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Not valid JSON: {exc.msg} (line {exc.lineno})") from exc
    if not isinstance(data, dict) or not isinstance(data.get("habits"), list):
        raise ValidationError("Expected an object with a 'habits' list")
    return data


def read_import_file(path: Path) -> dict[str, Any]:
    """Read and parse a user-chosen file in one go."""

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ValidationError(f"{path.name} is not UTF-8 text") from exc
    except OSError as exc:
        raise StorageError(f"Could not read {path}") from exc
    return parse_import_text(text)


__all__ = [
    "EXPORT_FILENAME",
    "parse_import_text",
    "read_import_file",
    "serialize_export",
    "write_export",
]
