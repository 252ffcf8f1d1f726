import pytest

from encore.domain.performance import NEUTRAL_SKILL_LEVEL, compute_modifiers, neutral_modifiers


def test_compute_modifiers_applies_gear() -> None:
    modifiers = compute_modifiers(27, 1.1)

    assert modifiers.effective_level == 30
    assert modifiers.breakdown.base_skill == 27
    assert modifiers.breakdown.gear_bonus == 3
    assert modifiers.breakdown.total_bonus == -20


def test_compute_modifiers_caps_effective_level() -> None:
    modifiers = compute_modifiers(90, 1.5)

    assert modifiers.effective_level == 100
    assert modifiers.gear_multiplier == 1.5
    assert modifiers.breakdown.gear_bonus == 10
    assert modifiers.breakdown.total_bonus == 50


def test_compute_modifiers_rounds_half_up() -> None:
    assert compute_modifiers(25, 1.1).effective_level == 28
    assert compute_modifiers(45, 1.1).effective_level == 50


def test_neutral_modifiers() -> None:
    modifiers = neutral_modifiers()

    assert modifiers.skill_level == NEUTRAL_SKILL_LEVEL
    assert modifiers.gear_multiplier == pytest.approx(1.0)
    assert modifiers.effective_level == 50
    assert modifiers.breakdown.total_bonus == 0
