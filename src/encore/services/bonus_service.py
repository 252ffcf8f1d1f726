"""Genre, recording and rehearsal bonuses for callers holding ids or role names."""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from encore.data.repositories import RolesRepository
from encore.domain.entities import SkillProgressEntry
from encore.domain.genre_bonus import GenreSkillBonus, calculate_genre_skill_bonus
from encore.domain.recording_bonus import RecordingSkillBonus, calculate_recording_skill_bonus
from encore.domain.rehearsal_bonus import RehearsalEfficiency, calculate_rehearsal_efficiency
from encore.services.errors import STORE_FAILURES
from encore.services.stores import SkillProgressStore

logger = logging.getLogger(__name__)


class BonusService:
    def __init__(self, roles_repo: RolesRepository, progress_store: SkillProgressStore) -> None:
        self._roles_repo = roles_repo
        self._progress_store = progress_store

    def calculate_genre_skill_bonus_for_profile(self, profile_id: str, genre: str) -> GenreSkillBonus:
        return calculate_genre_skill_bonus(self._fetch_progress(profile_id, "genre bonus"), genre)

    def calculate_recording_skill_bonus_for_profile(self, profile_id: str) -> RecordingSkillBonus:
        return calculate_recording_skill_bonus(self._fetch_progress(profile_id, "recording bonus"))

    def calculate_rehearsal_efficiency(
        self,
        progress: Iterable[SkillProgressEntry],
        roles: Sequence[str],
    ) -> RehearsalEfficiency:
        """Rehearsal multiplier for the rehearsed roles; unknown roles count as level 0."""
        role_slugs = []
        for role in roles:
            role_def = self._roles_repo.resolve(role)
            role_slugs.append(role_def.skill_slugs if role_def is not None else ())
        return calculate_rehearsal_efficiency(progress, role_slugs)

    def _fetch_progress(self, profile_id: str, purpose: str) -> list[SkillProgressEntry]:
        # Empty progress scores every bonus as neutral (multiplier 1.0).
        try:
            return self._progress_store.list_progress(profile_id)
        except STORE_FAILURES as exc:
            logger.warning(
                "Skill progress unavailable for profile %s (%s); neutral %s.", profile_id, exc, purpose
            )
            return []
