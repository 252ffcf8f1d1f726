"""Load profile, inventory and roster records from a JSON snapshot.

Snapshot layout::

    {
      "profiles": {"<user_id>": "<profile_id>"},
      "skill_progress": {"<profile_id>": {"<skill_slug>": <level>}},
      "inventory": {"<profile_id>": [{"id": ..., "name": ..., "category": ...,
                                      "subcategory": ..., "rarity": ...,
                                      "stat_boosts": {...}, "equipped": true}]},
      "bands": {"<band_id>": [{"id": ..., "user_id": ..., "instrument_role": ...,
                               "is_touring_member": false, "touring_member_tier": null}]}
    }

Every section is optional.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping

from encore.data.errors import DataLoadError
from encore.data.json_loader import load_json
from encore.domain.entities import BandMember, GearItem, InventoryRecord, SkillProgressEntry
from encore.services.errors import SnapshotLoadError
from encore.services.memory_stores import (
    InMemoryBandRosterStore,
    InMemoryInventoryStore,
    InMemoryProfileDirectory,
    InMemorySkillProgressStore,
)


@dataclass(slots=True)
class StoreSnapshot:
    profiles: InMemoryProfileDirectory
    progress: InMemorySkillProgressStore
    inventory: InMemoryInventoryStore
    roster: InMemoryBandRosterStore


def load_snapshot(path: Path | str) -> StoreSnapshot:
    """Read a snapshot file into in-memory stores."""
    try:
        payload = load_json(Path(path))
    except DataLoadError as exc:
        raise SnapshotLoadError(str(exc)) from exc
    return parse_snapshot(payload)


def parse_snapshot(payload: object) -> StoreSnapshot:
    if not isinstance(payload, Mapping):
        raise SnapshotLoadError("Snapshot must be a JSON object.")
    return StoreSnapshot(
        profiles=InMemoryProfileDirectory(_parse_profiles(payload.get("profiles", {}))),
        progress=InMemorySkillProgressStore(_parse_progress(payload.get("skill_progress", {}))),
        inventory=InMemoryInventoryStore(_parse_inventory(payload.get("inventory", {}))),
        roster=InMemoryBandRosterStore(_parse_bands(payload.get("bands", {}))),
    )


def _parse_profiles(section: object) -> Dict[str, str]:
    mapping = _require_mapping(section, "profiles")
    return {
        _require_str(user_id, "profiles key"): _require_str(profile_id, f"profiles.{user_id}")
        for user_id, profile_id in mapping.items()
    }


def _parse_progress(section: object) -> Dict[str, List[SkillProgressEntry]]:
    progress: Dict[str, List[SkillProgressEntry]] = {}
    for profile_id, levels in _require_mapping(section, "skill_progress").items():
        context = f"skill_progress.{profile_id}"
        progress[profile_id] = [
            SkillProgressEntry(skill_slug=slug, current_level=_require_int(level, f"{context}.{slug}"))
            for slug, level in _require_mapping(levels, context).items()
        ]
    return progress


def _parse_inventory(section: object) -> Dict[str, List[InventoryRecord]]:
    inventory: Dict[str, List[InventoryRecord]] = {}
    for profile_id, items in _require_mapping(section, "inventory").items():
        context = f"inventory.{profile_id}"
        if not isinstance(items, list):
            raise SnapshotLoadError(f"{context} must be a list.")
        inventory[profile_id] = [
            _parse_inventory_record(item, f"{context}[{index}]") for index, item in enumerate(items)
        ]
    return inventory


def _parse_inventory_record(raw: object, context: str) -> InventoryRecord:
    data = _require_mapping(raw, context)
    stat_boosts = {
        stat: _require_int(value, f"{context}.stat_boosts.{stat}")
        for stat, value in _require_mapping(data.get("stat_boosts") or {}, f"{context}.stat_boosts").items()
    }
    item = GearItem(
        id=_require_str(data.get("id"), f"{context}.id"),
        name=_require_str(data.get("name", data.get("id")), f"{context}.name"),
        category=_require_str(data.get("category"), f"{context}.category"),
        subcategory=_optional_str(data.get("subcategory"), f"{context}.subcategory"),
        rarity=_optional_str(data.get("rarity"), f"{context}.rarity"),
        stat_boosts=stat_boosts,
    )
    return InventoryRecord(item=item, is_equipped=bool(data.get("equipped", False)))


def _parse_bands(section: object) -> List[BandMember]:
    members: List[BandMember] = []
    for band_id, roster in _require_mapping(section, "bands").items():
        context = f"bands.{band_id}"
        if not isinstance(roster, list):
            raise SnapshotLoadError(f"{context} must be a list.")
        for index, raw in enumerate(roster):
            member_context = f"{context}[{index}]"
            data = _require_mapping(raw, member_context)
            tier = data.get("touring_member_tier")
            members.append(
                BandMember(
                    id=_require_str(data.get("id"), f"{member_context}.id"),
                    band_id=band_id,
                    user_id=_optional_str(data.get("user_id"), f"{member_context}.user_id"),
                    instrument_role=_optional_str(data.get("instrument_role"), f"{member_context}.instrument_role"),
                    is_touring_member=bool(data.get("is_touring_member", False)),
                    touring_member_tier=None if tier is None else _require_int(tier, f"{member_context}.touring_member_tier"),
                )
            )
    return members


def _require_mapping(value: object, context: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SnapshotLoadError(f"{context} must be an object.")
    return value


def _require_str(value: object, context: str) -> str:
    if not isinstance(value, str) or not value:
        raise SnapshotLoadError(f"{context} must be a non-empty string.")
    return value


def _optional_str(value: object, context: str) -> str | None:
    if value is None:
        return None
    return _require_str(value, context)


def _require_int(value: object, context: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SnapshotLoadError(f"{context} must be an integer.")
    return value
