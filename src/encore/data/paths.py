"""Locate the skill track and role definition files."""
from __future__ import annotations

import os
from pathlib import Path

DEFINITIONS_ENV_VAR = "ENCORE_DEFINITIONS_PATH"


def get_repo_root() -> Path:
    """Return the checkout root (three levels above ``src/encore/data``)."""
    return Path(__file__).resolve().parents[3]


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Resolve the definitions directory.

    An explicit `base_path` wins, then the ``ENCORE_DEFINITIONS_PATH``
    environment variable, then ``data/definitions`` under the checkout root.
    """
    if base_path is not None:
        return Path(base_path)
    override = os.environ.get(DEFINITIONS_ENV_VAR)
    if override:
        return Path(override)
    return get_repo_root() / "data" / "definitions"
