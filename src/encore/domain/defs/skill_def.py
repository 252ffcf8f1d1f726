"""Skill definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from encore.core.types import TierName


@dataclass(frozen=True, slots=True)
class SkillMetadata:
    category: str
    tier: TierName
    track: str


@dataclass(frozen=True, slots=True)
class SkillDefinition:
    """Describes one trainable skill at one tier of one track."""

    id: str
    slug: str
    display_name: str
    description: str
    icon_slug: str
    base_xp_gain: int
    training_duration_minutes: int
    metadata: SkillMetadata
