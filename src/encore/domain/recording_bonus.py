"""Recording quality bonus from five production skill categories."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping

from encore.domain.bonus_curve import scaled_bonus_percent
from encore.domain.entities import SkillProgressEntry
from encore.domain.skill_resolver import max_level_for


@dataclass(frozen=True, slots=True)
class RecordingCategory:
    skill_slugs: tuple[str, ...]
    max_bonus_percent: float


# Ceilings sum to a 30% theoretical maximum.
RECORDING_CATEGORIES: Dict[str, RecordingCategory] = {
    "mixing": RecordingCategory(
        skill_slugs=(
            "songwriting_basic_mixing",
            "songwriting_professional_mixing",
            "songwriting_mastery_mixing",
        ),
        max_bonus_percent=8.0,
    ),
    "daw": RecordingCategory(
        skill_slugs=(
            "songwriting_basic_daw",
            "songwriting_professional_daw",
            "songwriting_mastery_daw",
        ),
        max_bonus_percent=5.0,
    ),
    "production": RecordingCategory(
        skill_slugs=(
            "songwriting_basic_record_production",
            "songwriting_professional_record_production",
            "songwriting_mastery_record_production",
        ),
        max_bonus_percent=7.0,
    ),
    "vocal_production": RecordingCategory(
        skill_slugs=(
            "songwriting_basic_vocal_processing",
            "songwriting_professional_vocal_production",
            "songwriting_mastery_vocal_processing",
        ),
        max_bonus_percent=5.0,
    ),
    "theory": RecordingCategory(
        skill_slugs=(
            "songwriting_basic_composing",
            "songwriting_professional_composing",
            "songwriting_mastery_composing_anthems",
        ),
        max_bonus_percent=5.0,
    ),
}
THEORY_SKILL_SLUGS = RECORDING_CATEGORIES["theory"].skill_slugs


@dataclass(frozen=True, slots=True)
class RecordingSkillBonus:
    multiplier: float
    total_bonus_percent: float
    breakdown: Mapping[str, float]


def calculate_recording_skill_bonus(progress: Iterable[SkillProgressEntry]) -> RecordingSkillBonus:
    entries = list(progress)
    breakdown = {
        name: scaled_bonus_percent(max_level_for(entries, category.skill_slugs), category.max_bonus_percent)
        for name, category in RECORDING_CATEGORIES.items()
    }
    total = sum(breakdown.values())
    return RecordingSkillBonus(
        multiplier=1 + total / 100,
        total_bonus_percent=total,
        breakdown=breakdown,
    )
