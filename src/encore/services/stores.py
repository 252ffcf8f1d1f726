"""Ports for the externally owned records this engine reads.

Implementations raise StoreUnavailableError when the backing store cannot be
reached. Services treat that, and any OSError a driver leaks, as "unknown" and
fall back to neutral results.
"""
from __future__ import annotations

from typing import List, Protocol

from encore.domain.entities import BandMember, InventoryRecord, SkillProgressEntry


class SkillProgressStore(Protocol):
    def list_progress(self, profile_id: str) -> List[SkillProgressEntry]: ...


class InventoryStore(Protocol):
    def list_inventory(self, profile_id: str) -> List[InventoryRecord]: ...


class BandRosterStore(Protocol):
    def list_members(self, band_id: str) -> List[BandMember]: ...

    def save_skill_contribution(self, member_id: str, value: int) -> None: ...


class ProfileDirectory(Protocol):
    def profile_id_for_user(self, user_id: str) -> str | None: ...
