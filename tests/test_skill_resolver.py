import pytest

from encore.domain.entities import SkillProgressEntry
from encore.domain.skill_resolver import blended_level, max_level_for, progress_levels, resolve_skill_level

GUITAR = (
    "instruments_basic_electric_guitar",
    "instruments_professional_electric_guitar",
    "instruments_mastery_electric_guitar",
)


def test_single_trained_skill() -> None:
    progress = [SkillProgressEntry("instruments_basic_electric_guitar", 10)]

    assert blended_level(progress, GUITAR) == 10
    assert resolve_skill_level(progress, GUITAR) == 27


def test_untrained_role_scores_zero() -> None:
    progress = [SkillProgressEntry("genres_basic_rock", 20)]

    assert blended_level(progress, GUITAR) is None
    assert resolve_skill_level(progress, GUITAR) == 0
    assert resolve_skill_level([], ()) == 0


def test_mastered_role_scores_one_hundred() -> None:
    progress = [SkillProgressEntry(slug, 20) for slug in GUITAR]

    assert resolve_skill_level(progress, GUITAR) == 100


def test_blend_uses_max_and_mean_of_trained_skills_only() -> None:
    progress = [
        SkillProgressEntry("instruments_basic_electric_guitar", 20),
        SkillProgressEntry("instruments_professional_electric_guitar", 10),
    ]

    # 20 * 0.6 + 15 * 0.4 = 18
    assert blended_level(progress, GUITAR) == 18
    # level 18 is 21% on the curve, 75% of the 28% ceiling
    assert resolve_skill_level(progress, GUITAR) == 75


def test_blend_rounds_half_up() -> None:
    progress = [
        SkillProgressEntry("instruments_basic_electric_guitar", 3),
        SkillProgressEntry("instruments_professional_electric_guitar", 1),
    ]

    # 3 * 0.6 + 2 * 0.4 = 2.6
    assert blended_level(progress, GUITAR) == 3


def test_levels_are_clamped_and_first_entry_wins() -> None:
    progress = [
        SkillProgressEntry("a", 45),
        SkillProgressEntry("b", -2),
        SkillProgressEntry("a", 1),
    ]

    assert progress_levels(progress) == {"a": 20, "b": 0}
    assert max_level_for(progress, ("a", "b")) == 20
    assert max_level_for(progress, ("c",)) == 0


def test_repeated_relevant_slugs_count_once() -> None:
    progress = [
        SkillProgressEntry("a", 20),
        SkillProgressEntry("b", 0),
    ]

    assert blended_level(progress, ("a", "b", "b", "b")) == blended_level(progress, ("a", "b"))


@pytest.mark.parametrize("level", range(0, 21))
def test_resolved_level_stays_in_range(level: int) -> None:
    assert 0 <= resolve_skill_level([SkillProgressEntry("a", level)], ("a",)) <= 100
