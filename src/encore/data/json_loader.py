"""Read JSON documents for repositories and snapshots."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError


def load_json(path: Path) -> object:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(path, "File not found") from exc
    except OSError as exc:
        raise DataLoadError(path, f"Unable to read file ({exc.strerror})") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(path, f"Invalid JSON at line {exc.lineno} column {exc.colno}") from exc
