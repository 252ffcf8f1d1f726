"""Skill track configuration repository."""
from __future__ import annotations

from typing import Dict, Iterator, Tuple

from encore.data.errors import DataValidationError
from encore.data.repositories.base import RepositoryBase
from encore.domain.defs import PrerequisiteConfig, TierEntry, TrackConfig
from encore.domain.skill_tree import SKILL_TIER_ORDER

TrackGroup = Tuple[TrackConfig, ...]


class SkillTracksRepository(RepositoryBase[TrackGroup]):
    """Loads track configurations grouped by discipline family.

    The file maps a group id (e.g. ``"genres"``) to a list of track configs.
    """

    def __init__(self, base_path=None) -> None:
        super().__init__("skill_tracks.json", base_path)

    def iter_configs(self) -> Iterator[TrackConfig]:
        """Yield every track config, groups and tracks in file order."""
        for group in self.iter_in_file_order():
            yield from group

    def _build(self, raw: dict[str, object]) -> Dict[str, TrackGroup]:
        groups: Dict[str, TrackGroup] = {}
        for group_id, payload in raw.items():
            if not isinstance(payload, list):
                raise DataValidationError(f"track group '{group_id}' must be a list.")
            groups[group_id] = tuple(
                self._build_track(track_payload, f"track group '{group_id}'[{index}]")
                for index, track_payload in enumerate(payload)
            )
        return groups

    def _build_track(self, payload: object, context: str) -> TrackConfig:
        track_data = self._require_mapping(payload, context)
        self._assert_allowed_fields(
            track_data,
            required={"prefix", "category", "track", "icon", "tiers"},
            optional={"chain_prerequisites"},
            context=context,
        )
        track_name = self._require_str(track_data["track"], f"{context} track")
        track_context = f"track '{track_name}'"
        tiers_data = self._require_mapping(track_data["tiers"], f"{track_context} tiers")
        if not tiers_data:
            raise DataValidationError(f"{track_context} must define at least one tier.")

        tiers: Dict[str, TierEntry] = {}
        for tier_name, tier_payload in tiers_data.items():
            if tier_name not in SKILL_TIER_ORDER:
                raise DataValidationError(
                    f"{track_context} has unknown tier '{tier_name}'; expected one of {list(SKILL_TIER_ORDER)}."
                )
            tiers[tier_name] = self._build_tier(tier_payload, f"{track_context} tier '{tier_name}'")

        chain = True
        if "chain_prerequisites" in track_data:
            chain = self._require_bool(track_data["chain_prerequisites"], f"{track_context} chain_prerequisites")

        return TrackConfig(
            prefix=self._require_str(track_data["prefix"], f"{track_context} prefix"),
            category=self._require_str(track_data["category"], f"{track_context} category"),
            track=track_name,
            icon=self._require_str(track_data["icon"], f"{track_context} icon"),
            tiers=tiers,
            chain_prerequisites=chain,
        )

    def _build_tier(self, payload: object, context: str) -> TierEntry:
        entry = self._require_mapping(payload, context)
        self._assert_allowed_fields(
            entry,
            required={"name", "description"},
            optional={"slug", "xp", "duration", "icon", "required_value", "prerequisites"},
            context=context,
        )
        prerequisites: Tuple[PrerequisiteConfig, ...] = ()
        if "prerequisites" in entry:
            raw_prereqs = self._require_type(entry["prerequisites"], list, f"{context} prerequisites")
            prerequisites = tuple(
                self._build_prerequisite(item, f"{context} prerequisites[{index}]")
                for index, item in enumerate(raw_prereqs)
            )
        return TierEntry(
            name=self._require_str(entry["name"], f"{context} name"),
            description=self._require_str(entry["description"], f"{context} description"),
            slug=self._optional_str(entry, "slug", context),
            xp=self._optional_int(entry, "xp", context),
            duration=self._optional_int(entry, "duration", context),
            icon=self._optional_str(entry, "icon", context),
            required_value=self._optional_int(entry, "required_value", context),
            prerequisites=prerequisites,
        )

    def _build_prerequisite(self, payload: object, context: str) -> PrerequisiteConfig:
        prereq = self._require_mapping(payload, context)
        self._assert_allowed_fields(
            prereq,
            required={"slug"},
            optional={"required_value"},
            context=context,
        )
        return PrerequisiteConfig(
            slug=self._require_str(prereq["slug"], f"{context} slug"),
            required_value=self._optional_int(prereq, "required_value", context),
        )

    def _optional_str(self, payload: dict[str, object], key: str, context: str) -> str | None:
        if key not in payload:
            return None
        return self._require_str(payload[key], f"{context} {key}")

    def _optional_int(self, payload: dict[str, object], key: str, context: str) -> int | None:
        if key not in payload:
            return None
        return self._require_int(payload[key], f"{context} {key}")
