"""Rounding helpers shared by the scoring modules."""
from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding toward +infinity (2.5 -> 3)."""
    return int(math.floor(value + 0.5))
