"""Performance modifiers: base skill score combined with gear."""
from __future__ import annotations

from dataclasses import dataclass

from encore.core.rounding import round_half_up

# Neutral baseline: "unknown" is scored as an average performer.
NEUTRAL_SKILL_LEVEL = 50
MAX_EFFECTIVE_LEVEL = 100


@dataclass(frozen=True, slots=True)
class ModifierBreakdown:
    base_skill: int
    gear_bonus: int
    total_bonus: int


@dataclass(frozen=True, slots=True)
class PerformanceModifiers:
    skill_level: int
    gear_multiplier: float
    effective_level: int
    breakdown: ModifierBreakdown


def compute_modifiers(skill_level: int, gear_multiplier: float) -> PerformanceModifiers:
    """Apply the gear multiplier to a 0-100 skill score, capping at 100."""
    effective_level = min(MAX_EFFECTIVE_LEVEL, round_half_up(skill_level * gear_multiplier))
    return PerformanceModifiers(
        skill_level=skill_level,
        gear_multiplier=gear_multiplier,
        effective_level=effective_level,
        breakdown=ModifierBreakdown(
            base_skill=skill_level,
            gear_bonus=effective_level - skill_level,
            total_bonus=effective_level - NEUTRAL_SKILL_LEVEL,
        ),
    )


def neutral_modifiers() -> PerformanceModifiers:
    """Result used when skill or gear data could not be fetched."""
    return compute_modifiers(NEUTRAL_SKILL_LEVEL, 1.0)
