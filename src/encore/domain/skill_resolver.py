"""Blend a member's per-skill progress into one 0-100 ability score."""
from __future__ import annotations

from typing import Dict, Iterable

from encore.core.rounding import round_half_up
from encore.domain.bonus_curve import MAX_LEVEL, MAX_TIERED_BONUS, MIN_LEVEL, raw_bonus_percent
from encore.domain.entities import SkillProgressEntry

# Linear max/average blend, inconsistent with the tiered curve used for the
# final score. Kept as is: every gig score depends on it.
MAX_LEVEL_WEIGHT = 0.6
AVERAGE_LEVEL_WEIGHT = 0.4
MAX_SCORE = 100


def progress_levels(progress: Iterable[SkillProgressEntry]) -> Dict[str, int]:
    """Index progress by slug, clamped to the level domain. First entry wins."""
    levels: Dict[str, int] = {}
    for entry in progress:
        if entry.skill_slug in levels:
            continue
        levels[entry.skill_slug] = max(MIN_LEVEL, min(MAX_LEVEL, entry.current_level))
    return levels


def max_level_for(progress: Iterable[SkillProgressEntry], slugs: Iterable[str]) -> int:
    """Highest trained level among `slugs`; 0 when none are trained."""
    levels = progress_levels(progress)
    return max((levels[slug] for slug in slugs if slug in levels), default=MIN_LEVEL)


def blended_level(progress: Iterable[SkillProgressEntry], relevant_slugs: Iterable[str]) -> int | None:
    """Blend of the best and the mean level over matching slugs.

    Absent slugs are left out of the mean rather than counted as zero.
    Returns None when no slug matches.
    """
    levels = progress_levels(progress)
    matched = [levels[slug] for slug in dict.fromkeys(relevant_slugs) if slug in levels]
    if not matched:
        return None
    average = sum(matched) / len(matched)
    return round_half_up(max(matched) * MAX_LEVEL_WEIGHT + average * AVERAGE_LEVEL_WEIGHT)


def resolve_skill_level(progress: Iterable[SkillProgressEntry], relevant_slugs: Iterable[str]) -> int:
    """Return the 0-100 ability score for a role's skill set.

    The blended level goes through the tiered curve, so the score follows the
    curve's increasing-returns shape and a mastered skill set scores 100.
    """
    blended = blended_level(progress, relevant_slugs)
    if blended is None:
        return 0
    score = raw_bonus_percent(blended) / MAX_TIERED_BONUS * MAX_SCORE
    return min(MAX_SCORE, round_half_up(score))
