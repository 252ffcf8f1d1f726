"""Band roster runtime models."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class BandMember:
    """One roster slot of a band.

    `skill_contribution` is a cache written by the band aggregation pass and
    is never read back as an input.
    """

    id: str
    band_id: str
    user_id: str | None = None
    instrument_role: str | None = None
    is_touring_member: bool = False
    touring_member_tier: int | None = None
    skill_contribution: int | None = None
