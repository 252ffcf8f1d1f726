"""Runtime entity exports."""

from .band import BandMember
from .gear import GearItem, InventoryRecord
from .progress import SkillProgressEntry

__all__ = [
    "BandMember",
    "GearItem",
    "InventoryRecord",
    "SkillProgressEntry",
]
