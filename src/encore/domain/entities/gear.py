"""Gear and inventory runtime models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True, slots=True)
class GearItem:
    """Equipment item as listed in the shop catalogue."""

    id: str
    name: str
    category: str
    subcategory: str | None = None
    rarity: str | None = None
    stat_boosts: Dict[str, int] = field(default_factory=dict)


@dataclass(slots=True)
class InventoryRecord:
    """A gear item owned by a profile, with its equipped flag."""

    item: GearItem
    is_equipped: bool = False
