"""Band role definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class RoleDef:
    """Maps a band role to the skills and gear categories that feed it."""

    name: str
    skill_slugs: Tuple[str, ...]
    gear_categories: Tuple[str, ...]
