"""In-memory store implementations."""
from __future__ import annotations

from typing import Dict, Iterable, List

from encore.domain.entities import BandMember, InventoryRecord, SkillProgressEntry
from encore.services.errors import StoreUnavailableError


class InMemorySkillProgressStore:
    def __init__(self, progress: Dict[str, List[SkillProgressEntry]] | None = None) -> None:
        self._progress: Dict[str, List[SkillProgressEntry]] = dict(progress or {})

    def set_level(self, profile_id: str, skill_slug: str, level: int) -> None:
        entries = [entry for entry in self._progress.get(profile_id, []) if entry.skill_slug != skill_slug]
        entries.append(SkillProgressEntry(skill_slug=skill_slug, current_level=level))
        self._progress[profile_id] = entries

    def list_progress(self, profile_id: str) -> List[SkillProgressEntry]:
        return list(self._progress.get(profile_id, []))


class InMemoryInventoryStore:
    def __init__(self, inventory: Dict[str, List[InventoryRecord]] | None = None) -> None:
        self._inventory: Dict[str, List[InventoryRecord]] = dict(inventory or {})

    def add(self, profile_id: str, record: InventoryRecord) -> None:
        self._inventory.setdefault(profile_id, []).append(record)

    def list_inventory(self, profile_id: str) -> List[InventoryRecord]:
        return list(self._inventory.get(profile_id, []))


class InMemoryBandRosterStore:
    def __init__(self, members: Iterable[BandMember] = ()) -> None:
        self._members: Dict[str, BandMember] = {}
        for member in members:
            self.add(member)

    def add(self, member: BandMember) -> None:
        self._members[member.id] = member

    def get(self, member_id: str) -> BandMember:
        return self._members[member_id]

    def list_members(self, band_id: str) -> List[BandMember]:
        return [member for member in self._members.values() if member.band_id == band_id]

    def save_skill_contribution(self, member_id: str, value: int) -> None:
        member = self._members.get(member_id)
        if member is None:
            raise StoreUnavailableError(f"Unknown band member '{member_id}'.")
        member.skill_contribution = value


class InMemoryProfileDirectory:
    def __init__(self, profiles_by_user: Dict[str, str] | None = None) -> None:
        self._profiles_by_user: Dict[str, str] = dict(profiles_by_user or {})

    def register(self, user_id: str, profile_id: str) -> None:
        self._profiles_by_user[user_id] = profile_id

    def profile_id_for_user(self, user_id: str) -> str | None:
        return self._profiles_by_user.get(user_id)
