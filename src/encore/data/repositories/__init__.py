"""Repository exports."""

from .roles_repo import RolesRepository
from .skill_tracks_repo import SkillTracksRepository

__all__ = [
    "RolesRepository",
    "SkillTracksRepository",
]
