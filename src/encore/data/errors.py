"""Exceptions raised while reading skill track, role and snapshot files."""
from __future__ import annotations

from pathlib import Path
from typing import Sequence


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """A JSON file could not be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason


class DataValidationError(DataError):
    """A definition file parsed but does not have the expected shape."""


class DataReferenceError(DataError):
    """Definitions name skills that the generated tree does not contain."""

    def __init__(self, source: str, missing: Sequence[str]) -> None:
        super().__init__(f"{source} references unknown skills: {', '.join(missing)}")
        self.source = source
        self.missing = tuple(missing)
