"""Genre affinity bonus from a genre track's trained level."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from encore.domain.bonus_curve import raw_bonus_percent
from encore.domain.entities import SkillProgressEntry
from encore.domain.skill_resolver import max_level_for
from encore.domain.skill_tree import SKILL_TIER_ORDER, create_slug

GENRE_PREFIX = "genres"


@dataclass(frozen=True, slots=True)
class GenreSkillBonus:
    multiplier: float
    bonus_percent: float
    genre: str
    genre_skill_level: int


@dataclass(frozen=True, slots=True)
class BandGenreSkillBonus:
    multiplier: float
    bonus_percent: float
    genre: str
    max_member_level: int
    member_count: int


def genre_skill_slugs(genre: str) -> tuple[str, ...]:
    """Slugs of every tier of a genre track, e.g. "Hip Hop" -> genres_*_hip_hop."""
    return tuple(create_slug(GENRE_PREFIX, tier, genre) for tier in SKILL_TIER_ORDER)


def calculate_genre_skill_bonus(progress: Iterable[SkillProgressEntry], genre: str | None) -> GenreSkillBonus:
    """Apply the unscaled curve (ceiling 28%) to the best tier level of `genre`."""
    if not genre or not genre.strip():
        return GenreSkillBonus(multiplier=1.0, bonus_percent=0.0, genre=genre or "", genre_skill_level=0)
    level = max_level_for(progress, genre_skill_slugs(genre))
    percent = raw_bonus_percent(level)
    return GenreSkillBonus(
        multiplier=1 + percent / 100,
        bonus_percent=percent,
        genre=genre,
        genre_skill_level=level,
    )


def calculate_band_genre_skill_bonus(
    member_progress: Sequence[Iterable[SkillProgressEntry]],
    genre: str | None,
) -> BandGenreSkillBonus:
    """Average the genre bonus percent across eligible members.

    Callers pass only eligible (non-touring) members. The best single member
    level is reported for display.
    """
    bonuses = [calculate_genre_skill_bonus(progress, genre) for progress in member_progress]
    if not bonuses:
        return BandGenreSkillBonus(
            multiplier=1.0, bonus_percent=0.0, genre=genre or "", max_member_level=0, member_count=0
        )
    average_percent = sum(bonus.bonus_percent for bonus in bonuses) / len(bonuses)
    return BandGenreSkillBonus(
        multiplier=1 + average_percent / 100,
        bonus_percent=average_percent,
        genre=genre or "",
        max_member_level=max(bonus.genre_skill_level for bonus in bonuses),
        member_count=len(bonuses),
    )
