import pytest

from encore.core.rounding import round_half_up


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (-0.5, 0), (-1.5, -1), (36.45, 36), (40.5, 41)],
)
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected
