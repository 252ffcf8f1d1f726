import pytest

from encore.core.rng import RNG
from encore.domain.band_rating import (
    TOURING_TIER_RANGES,
    aggregate_band_skill,
    chemistry_multiplier,
    empty_band_rating,
    touring_member_skill,
)


@pytest.mark.parametrize("tier", [1, 2, 3, 4, 5])
def test_touring_member_skill_within_tier_range(tier: int) -> None:
    rng = RNG(7)
    low, high = TOURING_TIER_RANGES[tier]

    draws = [touring_member_skill(tier, rng) for _ in range(50)]
    assert all(low <= value <= high for value in draws)


def test_touring_tier_five_exceeds_player_scale() -> None:
    rng = RNG(99)

    assert all(101 <= touring_member_skill(5, rng) <= 150 for _ in range(20))


@pytest.mark.parametrize(("tier", "expected_tier"), [(None, 1), (0, 1), (-2, 1), (9, 5)])
def test_touring_tier_is_clamped(tier: int | None, expected_tier: int) -> None:
    low, high = TOURING_TIER_RANGES[expected_tier]

    assert low <= touring_member_skill(tier, RNG(3)) <= high


def test_touring_draws_are_reproducible() -> None:
    first = [touring_member_skill(3, RNG(1234)) for _ in range(3)]
    second = [touring_member_skill(3, RNG(1234)) for _ in range(3)]

    assert first == second


def test_chemistry_multiplier() -> None:
    assert chemistry_multiplier(0) == 1.0
    assert chemistry_multiplier(100) == pytest.approx(1.5)


def test_aggregate_band_skill() -> None:
    assert aggregate_band_skill([60, 80], 0) == 70
    assert aggregate_band_skill([60, 80], 20) == 77
    assert aggregate_band_skill([61, 62], 0) == 62


def test_aggregate_without_contributions_is_zero() -> None:
    assert aggregate_band_skill([], 50) == 0


def test_empty_band_rating_is_neutral() -> None:
    assert empty_band_rating() == 50
