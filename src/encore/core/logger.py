"""Process-wide logging setup."""
from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def resolve_level(level_name: str | None) -> int:
    """Map a level name to a logging constant, defaulting to WARNING."""
    if not isinstance(level_name, str):
        return logging.WARNING
    normalized = level_name.strip().upper()
    if normalized not in VALID_LEVELS:
        return logging.WARNING
    return getattr(logging, normalized)


def init_logging(level_name: str | None = None) -> logging.Logger:
    """Configure the root handler once and return the package logger."""
    logging.basicConfig(
        level=resolve_level(level_name),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    logger = logging.getLogger("encore")
    logger.setLevel(resolve_level(level_name))
    return logger


__all__ = ["LOG_FORMAT", "VALID_LEVELS", "init_logging", "resolve_level"]
