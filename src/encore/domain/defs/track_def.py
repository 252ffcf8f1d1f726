"""Declarative track configuration structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from encore.core.types import TierName


@dataclass(frozen=True, slots=True)
class PrerequisiteConfig:
    """Explicit cross-track prerequisite attached to a tier entry."""

    slug: str
    required_value: int | None = None


@dataclass(frozen=True, slots=True)
class TierEntry:
    """One tier (Basic, Professional or Mastery) of a track."""

    name: str
    description: str
    slug: str | None = None
    xp: int | None = None
    duration: int | None = None
    icon: str | None = None
    required_value: int | None = None
    prerequisites: Tuple[PrerequisiteConfig, ...] = ()


@dataclass(frozen=True, slots=True)
class TrackConfig:
    """Template for a discipline expanded into up to three tiered skills."""

    prefix: str
    category: str
    track: str
    icon: str
    tiers: Dict[TierName, TierEntry] = field(default_factory=dict)
    chain_prerequisites: bool = True
