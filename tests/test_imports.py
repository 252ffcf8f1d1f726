def test_import_encore_package() -> None:
    import importlib

    module = importlib.import_module("encore")
    assert module.__version__


def test_import_domain_has_no_side_effects() -> None:
    from encore.domain.bonus_curve import raw_bonus_percent
    from encore.domain.skill_tree import build_skill_tree

    assert raw_bonus_percent(5) == 2.5
    assert len(build_skill_tree([])) == 0
