"""Per-member performance modifiers backed by the progress and inventory stores."""
from __future__ import annotations

import logging

from encore.data.repositories import RolesRepository
from encore.domain.gear_bonus import NEUTRAL_GEAR_MULTIPLIER, equipped_items, gear_multiplier
from encore.domain.performance import PerformanceModifiers, compute_modifiers, neutral_modifiers
from encore.domain.skill_resolver import resolve_skill_level
from encore.services.errors import STORE_FAILURES
from encore.services.stores import InventoryStore, SkillProgressStore

logger = logging.getLogger(__name__)


class PerformanceService:
    """Turns a profile's trained skills and equipped gear into role modifiers."""

    def __init__(
        self,
        roles_repo: RolesRepository,
        progress_store: SkillProgressStore,
        inventory_store: InventoryStore,
    ) -> None:
        self._roles_repo = roles_repo
        self._progress_store = progress_store
        self._inventory_store = inventory_store

    def calculate_performance_modifiers(self, profile_id: str, role: str) -> PerformanceModifiers:
        """Return modifiers for `profile_id` playing `role`.

        Skill slugs come from the role table with substring fallback; gear
        keywords need an exact role name. An unreadable progress store yields
        the neutral result, an unreadable inventory store only drops gear.
        """
        role_def = self._roles_repo.resolve(role)
        relevant_slugs = role_def.skill_slugs if role_def is not None else ()

        try:
            progress = self._progress_store.list_progress(profile_id)
        except STORE_FAILURES as exc:
            logger.warning(
                "Skill progress unavailable for profile %s (%s); using neutral modifiers.", profile_id, exc
            )
            return neutral_modifiers()

        skill_level = resolve_skill_level(progress, relevant_slugs)
        multiplier = self._gear_multiplier(profile_id, role)
        return compute_modifiers(skill_level, multiplier)

    def _gear_multiplier(self, profile_id: str, role: str) -> float:
        gear_role = self._roles_repo.find(role)
        if gear_role is None:
            return NEUTRAL_GEAR_MULTIPLIER
        try:
            records = self._inventory_store.list_inventory(profile_id)
        except STORE_FAILURES as exc:
            logger.warning("Equipment unavailable for profile %s (%s); ignoring gear.", profile_id, exc)
            return NEUTRAL_GEAR_MULTIPLIER
        return gear_multiplier(equipped_items(records), gear_role.gear_categories)
