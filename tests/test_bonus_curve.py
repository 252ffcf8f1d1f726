import pytest

from encore.domain.bonus_curve import (
    MAX_TIERED_BONUS,
    level_tier_name,
    multiplier,
    raw_bonus_percent,
    scaled_bonus_percent,
    scaled_multiplier,
    skill_modifier,
)
from encore.domain.entities import SkillProgressEntry


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (0, 0.0),
        (1, 0.5),
        (5, 2.5),
        (6, 3.5),
        (10, 7.5),
        (15, 15.0),
        (19, 23.0),
        (20, 28.0),
    ],
)
def test_raw_bonus_percent_band_boundaries(level: int, expected: float) -> None:
    assert raw_bonus_percent(level) == pytest.approx(expected)


def test_raw_bonus_percent_is_monotonic() -> None:
    values = [raw_bonus_percent(level) for level in range(0, 21)]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_raw_bonus_percent_clamps_out_of_range_levels() -> None:
    assert raw_bonus_percent(-4) == 0.0
    assert raw_bonus_percent(35) == pytest.approx(MAX_TIERED_BONUS)


def test_fractional_levels_round_half_up() -> None:
    assert raw_bonus_percent(4.5) == raw_bonus_percent(5)
    assert raw_bonus_percent(4.4) == raw_bonus_percent(4)


def test_scaled_bonus_percent_maps_to_ceiling() -> None:
    assert scaled_bonus_percent(0, 8.0) == 0.0
    assert scaled_bonus_percent(20, 8.0) == pytest.approx(8.0)
    assert scaled_bonus_percent(10, 5.0) == pytest.approx(7.5 / 28 * 5)


def test_multipliers() -> None:
    assert multiplier(0) == 1.0
    assert multiplier(20) == pytest.approx(1.28)
    assert scaled_multiplier(20, 5.0) == pytest.approx(1.05)


@pytest.mark.parametrize(
    ("level", "label"),
    [
        (-3, "Untrained"),
        (0, "Untrained"),
        (1, "Beginner"),
        (5, "Beginner"),
        (6, "Intermediate"),
        (10, "Intermediate"),
        (11, "Advanced"),
        (15, "Advanced"),
        (16, "Expert"),
        (19, "Expert"),
        (20, "Mastered"),
        (25, "Mastered"),
    ],
)
def test_level_tier_name(level: int, label: str) -> None:
    assert level_tier_name(level) == label


def test_skill_modifier_neutral_without_progress() -> None:
    assert skill_modifier([]) == 1.0
    assert skill_modifier(None) == 1.0


def test_skill_modifier_range() -> None:
    untrained = [SkillProgressEntry("a", 0), SkillProgressEntry("b", 0)]
    mastered = [SkillProgressEntry("a", 20), SkillProgressEntry("b", 20)]

    assert skill_modifier(untrained) == 0.8
    assert skill_modifier(mastered) == 1.3
    assert skill_modifier([SkillProgressEntry("a", 10)]) == 0.93
