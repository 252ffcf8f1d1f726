"""Skill prerequisite graph built from declarative track templates.

Each track config expands into up to three skills (Basic -> Professional ->
Mastery). Consecutive tiers are chained with ``tier_prerequisite`` edges unless
the track disables chaining; tier entries may add ``cross_prerequisite`` edges to
skills in other tracks. Edges always point from a skill to a skill emitted
earlier, so the graph is acyclic when built from well-formed configs.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Tuple

from encore.core.types import TierName
from encore.domain.defs import (
    RelationshipMetadata,
    SkillDefinition,
    SkillMetadata,
    SkillRelationship,
    TierEntry,
    TrackConfig,
)

SKILL_TIER_ORDER: Tuple[TierName, ...] = ("Basic", "Professional", "Mastery")

PROFESSIONAL_UNLOCK_VALUE = 250
MASTERY_UNLOCK_VALUE = 650


@dataclass(frozen=True, slots=True)
class TierDefaults:
    xp: int
    duration: int


TIER_DEFAULTS: Dict[TierName, TierDefaults] = {
    "Basic": TierDefaults(xp=6, duration=30),
    "Professional": TierDefaults(xp=10, duration=45),
    "Mastery": TierDefaults(xp=14, duration=60),
}

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


class DuplicateSkillSlugError(ValueError):
    """Raised when two different skill definitions are generated with one slug."""


def sanitize_slug(value: str) -> str:
    """Lower-case, spell out '&', and collapse everything else to underscores."""
    lowered = value.lower().replace("&", " and ")
    return _NON_ALNUM.sub("_", lowered).strip("_")


def create_slug(prefix: str, tier: TierName, track: str) -> str:
    return f"{prefix}_{tier.lower()}_{sanitize_slug(track)}"


def default_required_value(tier: TierName) -> int:
    """Threshold on the required skill for unlocking a skill of `tier`."""
    return MASTERY_UNLOCK_VALUE if tier == "Mastery" else PROFESSIONAL_UNLOCK_VALUE


class SkillTree:
    """Read-only skill definitions plus a prerequisite adjacency list keyed by slug."""

    def __init__(
        self,
        definitions: Iterable[SkillDefinition],
        relationships: Iterable[SkillRelationship],
    ) -> None:
        self._definitions: Tuple[SkillDefinition, ...] = tuple(definitions)
        self._relationships: Tuple[SkillRelationship, ...] = tuple(relationships)
        self._by_slug: Dict[str, SkillDefinition] = {
            definition.slug: definition for definition in self._definitions
        }
        requires: Dict[str, List[SkillRelationship]] = {}
        required_by: Dict[str, List[SkillRelationship]] = {}
        for relationship in self._relationships:
            requires.setdefault(relationship.skill_slug, []).append(relationship)
            required_by.setdefault(relationship.required_skill_slug, []).append(relationship)
        self._requires = {slug: tuple(edges) for slug, edges in requires.items()}
        self._required_by = {slug: tuple(edges) for slug, edges in required_by.items()}

    @property
    def definitions(self) -> Tuple[SkillDefinition, ...]:
        return self._definitions

    @property
    def relationships(self) -> Tuple[SkillRelationship, ...]:
        return self._relationships

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    def __len__(self) -> int:
        return len(self._definitions)

    def definition(self, slug: str) -> SkillDefinition:
        try:
            return self._by_slug[slug]
        except KeyError as exc:
            raise KeyError(slug) from exc

    def requirements_for(self, slug: str) -> Tuple[SkillRelationship, ...]:
        """Edges leaving `slug`: the skills it requires."""
        return self._requires.get(slug, ())

    def dependents_of(self, slug: str) -> Tuple[SkillRelationship, ...]:
        """Edges entering `slug`: the skills that require it."""
        return self._required_by.get(slug, ())

    def track_slugs(self, track: str) -> Tuple[str, ...]:
        """Slugs of every tier of `track` (case-insensitive), in tier order."""
        wanted = track.strip().lower()
        return tuple(
            definition.slug
            for definition in self._definitions
            if definition.metadata.track.lower() == wanted
        )

    def missing_requirements(self, slug: str, values: Mapping[str, int]) -> List[SkillRelationship]:
        """Requirement edges of `slug` whose required skill value is below threshold."""
        return [
            relationship
            for relationship in self.requirements_for(slug)
            if values.get(relationship.required_skill_slug, 0) < relationship.required_value
        ]

    def is_unlocked(self, slug: str, values: Mapping[str, int]) -> bool:
        return not self.missing_requirements(slug, values)


class _SkillTreeBuilder:
    def __init__(self) -> None:
        self.definitions: Dict[str, SkillDefinition] = {}
        self.relationships: Dict[str, SkillRelationship] = {}

    def add_track(self, config: TrackConfig) -> None:
        previous_slug: str | None = None
        for tier in SKILL_TIER_ORDER:
            entry = config.tiers.get(tier)
            if entry is None:
                continue
            slug = entry.slug or create_slug(config.prefix, tier, config.track)
            self._add_definition(self._make_definition(config, tier, entry, slug))

            if config.chain_prerequisites and previous_slug is not None:
                required_value = (
                    entry.required_value if entry.required_value is not None else default_required_value(tier)
                )
                self._add_relationship(config, tier, slug, previous_slug, required_value, "tier_prerequisite")

            for prerequisite in entry.prerequisites:
                required_value = (
                    prerequisite.required_value
                    if prerequisite.required_value is not None
                    else default_required_value(tier)
                )
                self._add_relationship(
                    config, tier, slug, prerequisite.slug, required_value, "cross_prerequisite"
                )

            previous_slug = slug

    @staticmethod
    def _make_definition(config: TrackConfig, tier: TierName, entry: TierEntry, slug: str) -> SkillDefinition:
        defaults = TIER_DEFAULTS[tier]
        return SkillDefinition(
            id=slug,
            slug=slug,
            display_name=entry.name,
            description=entry.description,
            icon_slug=entry.icon or config.icon,
            base_xp_gain=entry.xp if entry.xp is not None else defaults.xp,
            training_duration_minutes=entry.duration if entry.duration is not None else defaults.duration,
            metadata=SkillMetadata(category=config.category, tier=tier, track=config.track),
        )

    def _add_definition(self, definition: SkillDefinition) -> None:
        existing = self.definitions.get(definition.slug)
        if existing is None:
            self.definitions[definition.slug] = definition
            return
        if existing != definition:
            raise DuplicateSkillSlugError(
                f"Skill slug '{definition.slug}' is generated by both track "
                f"'{existing.metadata.track}' ({existing.metadata.tier}) and track "
                f"'{definition.metadata.track}' ({definition.metadata.tier})."
            )

    def _add_relationship(
        self,
        config: TrackConfig,
        tier: TierName,
        slug: str,
        required_slug: str,
        required_value: int,
        relationship_type: str,
    ) -> None:
        key = SkillRelationship.make_key(slug, required_slug)
        if key in self.relationships:
            return
        self.relationships[key] = SkillRelationship(
            id=key,
            skill_slug=slug,
            required_skill_slug=required_slug,
            required_value=required_value,
            metadata=RelationshipMetadata(
                category=config.category,
                type=relationship_type,  # type: ignore[arg-type]
                track=config.track,
                tier=tier,
            ),
        )


def build_skill_tree(configs: Iterable[TrackConfig]) -> SkillTree:
    """Expand track configs into a flat skill tree.

    Duplicate edge keys are dropped (first writer wins). A slug generated twice
    with differing content raises DuplicateSkillSlugError.
    """
    builder = _SkillTreeBuilder()
    for config in configs:
        builder.add_track(config)
    return SkillTree(builder.definitions.values(), builder.relationships.values())


__all__ = [
    "DuplicateSkillSlugError",
    "MASTERY_UNLOCK_VALUE",
    "PROFESSIONAL_UNLOCK_VALUE",
    "SKILL_TIER_ORDER",
    "SkillTree",
    "TIER_DEFAULTS",
    "build_skill_tree",
    "create_slug",
    "default_required_value",
    "sanitize_slug",
]
