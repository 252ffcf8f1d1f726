"""Skill prerequisite edge structures."""
from __future__ import annotations

from dataclasses import dataclass

from encore.core.types import RelationshipType, TierName


@dataclass(frozen=True, slots=True)
class RelationshipMetadata:
    category: str
    type: RelationshipType
    track: str
    tier: TierName


@dataclass(frozen=True, slots=True)
class SkillRelationship:
    """Directed edge: `skill_slug` requires `required_skill_slug` at `required_value`."""

    id: str
    skill_slug: str
    required_skill_slug: str
    required_value: int
    metadata: RelationshipMetadata

    @staticmethod
    def make_key(skill_slug: str, required_skill_slug: str) -> str:
        return f"{skill_slug}__{required_skill_slug}"
