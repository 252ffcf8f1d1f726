"""Skill progress records owned by player profiles."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SkillProgressEntry:
    """Trained level (0 = untrained, 20 = mastered) of one skill for one profile."""

    skill_slug: str
    current_level: int
