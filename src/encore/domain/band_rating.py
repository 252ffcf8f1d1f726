"""Band-wide skill rating: member average with a chemistry multiplier."""
from __future__ import annotations

from typing import Dict, Sequence

from encore.core.rng import RNG
from encore.core.rounding import round_half_up
from encore.domain.performance import NEUTRAL_SKILL_LEVEL

# Tiers 4-5 exceed the 0-100 player scale: hired elite talent.
TOURING_TIER_RANGES: Dict[int, tuple[int, int]] = {
    1: (20, 40),
    2: (41, 60),
    3: (61, 80),
    4: (81, 100),
    5: (101, 150),
}
MIN_TOURING_TIER = 1
MAX_TOURING_TIER = 5
CHEMISTRY_DIVISOR = 200


def touring_member_skill(tier: int | None, rng: RNG) -> int:
    """Draw a touring member's ability uniformly from their tier's range."""
    clamped = max(MIN_TOURING_TIER, min(MAX_TOURING_TIER, tier or MIN_TOURING_TIER))
    low, high = TOURING_TIER_RANGES[clamped]
    return rng.randint(low, high)


def chemistry_multiplier(chemistry_level: int) -> float:
    return 1 + chemistry_level / CHEMISTRY_DIVISOR


def aggregate_band_skill(contributions: Sequence[int], chemistry_level: int) -> int:
    """Average member contributions and apply band chemistry.

    An empty sequence means nobody could be scored; the divisor never drops
    below one, so the result is 0 rather than a division error.
    """
    average = sum(contributions) / max(1, len(contributions))
    return round_half_up(average * chemistry_multiplier(chemistry_level))


def empty_band_rating() -> int:
    """Rating reported for a band without any roster entries."""
    return NEUTRAL_SKILL_LEVEL
