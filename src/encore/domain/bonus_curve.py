"""Tiered skill bonus curve shared by every derived calculation.

Level 0-20 maps to a 0-28% bonus. Each band pays more per level than the one
before it, and reaching level 20 adds a flat mastery bonus on top.
"""
from __future__ import annotations

from typing import Iterable

from encore.core.rounding import round_half_up
from encore.domain.entities import SkillProgressEntry

MIN_LEVEL = 0
MAX_LEVEL = 20
MASTERY_BONUS = 5.0
MAX_TIERED_BONUS = 28.0

# (highest level in band, percent per level, label)
LEVEL_BANDS: tuple[tuple[int, float, str], ...] = (
    (5, 0.5, "Beginner"),
    (10, 1.0, "Intermediate"),
    (15, 1.5, "Advanced"),
    (19, 2.0, "Expert"),
)
UNTRAINED_LABEL = "Untrained"
MASTERED_LABEL = "Mastered"

SKILL_MODIFIER_MIN = 0.8
SKILL_MODIFIER_MAX = 1.3
NEUTRAL_SKILL_MODIFIER = 1.0


def clamp_level(level: float) -> int:
    """Round to the nearest whole level and clamp into [0, 20]."""
    return max(MIN_LEVEL, min(MAX_LEVEL, round_half_up(level)))


def raw_bonus_percent(level: float) -> float:
    lvl = clamp_level(level)
    percent = 0.0
    band_floor = MIN_LEVEL
    for band_ceiling, rate, _label in LEVEL_BANDS:
        if lvl <= band_floor:
            break
        percent += (min(lvl, band_ceiling) - band_floor) * rate
        band_floor = band_ceiling
    if lvl >= MAX_LEVEL:
        percent += MASTERY_BONUS
    return percent


def scaled_bonus_percent(level: float, max_bonus_percent: float) -> float:
    """Re-map the 0-28% curve onto a 0-`max_bonus_percent` ceiling."""
    return raw_bonus_percent(level) / MAX_TIERED_BONUS * max_bonus_percent


def multiplier(level: float) -> float:
    return 1 + raw_bonus_percent(level) / 100


def scaled_multiplier(level: float, max_bonus_percent: float) -> float:
    return 1 + scaled_bonus_percent(level, max_bonus_percent) / 100


def level_tier_name(level: float) -> str:
    """Return the curve band label a level falls in."""
    lvl = clamp_level(level)
    if lvl == MIN_LEVEL:
        return UNTRAINED_LABEL
    if lvl >= MAX_LEVEL:
        return MASTERED_LABEL
    for band_ceiling, _rate, label in LEVEL_BANDS:
        if lvl <= band_ceiling:
            return label
    return MASTERED_LABEL


def skill_modifier(progress: Iterable[SkillProgressEntry] | None) -> float:
    """Quick 0.8-1.3 modifier from the average level across all entries."""
    levels = [entry.current_level for entry in progress or ()]
    if not levels:
        return NEUTRAL_SKILL_MODIFIER
    average = sum(levels) / len(levels)
    percent = raw_bonus_percent(min(MAX_LEVEL, average))
    modifier = SKILL_MODIFIER_MIN + (percent / MAX_TIERED_BONUS) * (SKILL_MODIFIER_MAX - SKILL_MODIFIER_MIN)
    return round(min(SKILL_MODIFIER_MAX, max(SKILL_MODIFIER_MIN, modifier)), 2)


__all__ = [
    "MAX_LEVEL",
    "MAX_TIERED_BONUS",
    "clamp_level",
    "level_tier_name",
    "multiplier",
    "raw_bonus_percent",
    "scaled_bonus_percent",
    "scaled_multiplier",
    "skill_modifier",
]
