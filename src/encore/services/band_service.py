"""Band-wide ratings over a roster."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from encore.core.rng import RNG
from encore.core.rounding import round_half_up
from encore.domain.band_rating import aggregate_band_skill, empty_band_rating, touring_member_skill
from encore.domain.entities import BandMember, SkillProgressEntry
from encore.domain.genre_bonus import BandGenreSkillBonus, calculate_band_genre_skill_bonus
from encore.domain.performance import NEUTRAL_SKILL_LEVEL
from encore.services.errors import STORE_FAILURES
from encore.services.performance_service import PerformanceService
from encore.services.stores import BandRosterStore, ProfileDirectory, SkillProgressStore

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "Vocals"


@dataclass(frozen=True, slots=True)
class MemberContribution:
    member_id: str
    role: str
    effective_level: int


@dataclass(frozen=True, slots=True)
class BandSkillAverage:
    avg_skill: int
    avg_gear_bonus: int
    member_breakdown: Tuple[MemberContribution, ...]


class BandService:
    """Aggregates member performance into band ratings."""

    def __init__(
        self,
        performance_service: PerformanceService,
        roster_store: BandRosterStore,
        profile_directory: ProfileDirectory,
        progress_store: SkillProgressStore,
        rng: RNG | None = None,
    ) -> None:
        self._performance_service = performance_service
        self._roster_store = roster_store
        self._profile_directory = profile_directory
        self._progress_store = progress_store
        self._rng = rng or RNG.from_entropy()

    def calculate_band_skill_rating(self, band_id: str, chemistry_level: int) -> int:
        """Average every member's ability, then apply band chemistry.

        Touring members draw from their tier's range. Each member's figure is
        written back to `skill_contribution` as a display cache.
        """
        members = self._list_members(band_id)
        if not members:
            return empty_band_rating()

        contributions: List[int] = []
        for member in members:
            if member.is_touring_member:
                value = touring_member_skill(member.touring_member_tier, self._rng)
            else:
                profile_id = self._resolve_profile(member)
                if profile_id is None:
                    continue
                modifiers = self._performance_service.calculate_performance_modifiers(
                    profile_id, member.instrument_role or DEFAULT_ROLE
                )
                value = modifiers.effective_level
            contributions.append(value)
            self._store_contribution(member, value)

        return aggregate_band_skill(contributions, chemistry_level)

    def calculate_band_skill_average(self, band_id: str) -> BandSkillAverage:
        """Average effective level and gear bonus over non-touring members."""
        neutral = BandSkillAverage(avg_skill=NEUTRAL_SKILL_LEVEL, avg_gear_bonus=0, member_breakdown=())
        members = self._list_members(band_id)
        if not members:
            return neutral

        breakdown: List[MemberContribution] = []
        total_skill = 0
        total_gear_bonus = 0
        for member in members:
            if member.is_touring_member:
                continue
            profile_id = self._resolve_profile(member)
            if profile_id is None:
                continue
            role = member.instrument_role or DEFAULT_ROLE
            modifiers = self._performance_service.calculate_performance_modifiers(profile_id, role)
            total_skill += modifiers.effective_level
            total_gear_bonus += modifiers.breakdown.gear_bonus
            breakdown.append(
                MemberContribution(member_id=member.id, role=role, effective_level=modifiers.effective_level)
            )

        if not breakdown:
            return neutral
        count = len(breakdown)
        return BandSkillAverage(
            avg_skill=round_half_up(total_skill / count),
            avg_gear_bonus=round_half_up(total_gear_bonus / count),
            member_breakdown=tuple(breakdown),
        )

    def calculate_band_genre_skill_bonus(self, band_id: str, genre: str) -> BandGenreSkillBonus:
        """Band-wide genre bonus over non-touring members with readable progress."""
        members = self._list_members(band_id) or []
        member_progress: List[List[SkillProgressEntry]] = []
        for member in members:
            if member.is_touring_member:
                continue
            profile_id = self._resolve_profile(member)
            if profile_id is None:
                continue
            try:
                member_progress.append(self._progress_store.list_progress(profile_id))
            except STORE_FAILURES as exc:
                logger.warning("Skill progress unavailable for profile %s (%s); skipping member.", profile_id, exc)
        return calculate_band_genre_skill_bonus(member_progress, genre)

    def _list_members(self, band_id: str) -> List[BandMember] | None:
        try:
            return self._roster_store.list_members(band_id)
        except STORE_FAILURES as exc:
            logger.warning("Roster unavailable for band %s (%s); using neutral rating.", band_id, exc)
            return None

    def _resolve_profile(self, member: BandMember) -> str | None:
        if not member.user_id:
            logger.info("Band member %s has no user; skipping.", member.id)
            return None
        try:
            profile_id = self._profile_directory.profile_id_for_user(member.user_id)
        except STORE_FAILURES as exc:
            logger.warning("Profile lookup failed for user %s (%s); skipping member.", member.user_id, exc)
            return None
        if profile_id is None:
            logger.info("No profile for user %s (member %s); skipping.", member.user_id, member.id)
        return profile_id

    def _store_contribution(self, member: BandMember, value: int) -> None:
        member.skill_contribution = value
        try:
            self._roster_store.save_skill_contribution(member.id, value)
        except STORE_FAILURES as exc:
            logger.warning("Could not cache skill contribution for member %s (%s).", member.id, exc)
