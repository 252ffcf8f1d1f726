"""Rehearsal efficiency from instrument and theory levels."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from encore.domain.bonus_curve import MAX_LEVEL
from encore.domain.entities import SkillProgressEntry
from encore.domain.recording_bonus import THEORY_SKILL_SLUGS
from encore.domain.skill_resolver import max_level_for

# Linear level/40, inconsistent with the tiered bonus curve. Kept as is to
# preserve rehearsal balance.
INSTRUMENT_LEVEL_DIVISOR = 40
MAX_INSTRUMENT_BONUS = 0.5
MAX_THEORY_BONUS = 0.1


@dataclass(frozen=True, slots=True)
class RehearsalEfficiency:
    multiplier: float
    instrument_bonus: float
    theory_bonus: float


def calculate_rehearsal_efficiency(
    progress: Iterable[SkillProgressEntry],
    role_skill_slugs: Sequence[Sequence[str]],
) -> RehearsalEfficiency:
    """Return a 1.0-1.6 multiplier.

    `role_skill_slugs` holds one slug list per rehearsed role; each role
    contributes its best instrument level to the average.
    """
    entries = list(progress)
    role_levels = [max_level_for(entries, slugs) for slugs in role_skill_slugs]
    average_level = sum(role_levels) / len(role_levels) if role_levels else 0.0
    instrument_bonus = min(MAX_INSTRUMENT_BONUS, average_level / INSTRUMENT_LEVEL_DIVISOR)
    theory_level = max_level_for(entries, THEORY_SKILL_SLUGS)
    theory_bonus = min(MAX_THEORY_BONUS, (theory_level / MAX_LEVEL) * MAX_THEORY_BONUS)
    return RehearsalEfficiency(
        multiplier=1.0 + instrument_bonus + theory_bonus,
        instrument_bonus=instrument_bonus,
        theory_bonus=theory_bonus,
    )
