"""Gear bonus calculator: equipped items matched to a role by category keyword."""
from __future__ import annotations

from typing import Dict, Iterable, Sequence

from encore.domain.entities import GearItem, InventoryRecord

RARITY_BONUSES: Dict[str, float] = {
    "common": 0.05,
    "uncommon": 0.10,
    "rare": 0.18,
    "epic": 0.25,
    "legendary": 0.35,
}
DEFAULT_RARITY_BONUS = RARITY_BONUSES["common"]
PERFORMANCE_STAT = "performance"
MAX_GEAR_BONUS = 0.5
NEUTRAL_GEAR_MULTIPLIER = 1.0


def equipped_items(records: Iterable[InventoryRecord]) -> list[GearItem]:
    return [record.item for record in records if record.is_equipped]


def category_matches_role(category: str, subcategory: str | None, role_categories: Sequence[str]) -> bool:
    """True when the item's category or subcategory matches a role keyword.

    Inclusion is checked both ways, case-insensitively: "electric_guitar"
    matches the keyword "guitar", and the category "bass" matches "bass".
    """
    category_lower = (category or "").lower()
    subcategory_lower = (subcategory or "").lower()
    for keyword in role_categories:
        keyword = keyword.lower()
        if keyword in category_lower or (subcategory_lower and keyword in subcategory_lower):
            return True
        if category_lower and category_lower in keyword:
            return True
    return False


def item_bonus(item: GearItem) -> float:
    """Rarity bonus plus the item's performance stat boost, as a fraction."""
    rarity_bonus = RARITY_BONUSES.get((item.rarity or "common").lower(), DEFAULT_RARITY_BONUS)
    return rarity_bonus + item.stat_boosts.get(PERFORMANCE_STAT, 0) / 100


def gear_multiplier(items: Iterable[GearItem], role_categories: Sequence[str]) -> float:
    """Return 1.0-1.5: the summed bonus of role-matching items, capped at +0.5."""
    total = sum(
        item_bonus(item)
        for item in items
        if category_matches_role(item.category, item.subcategory, role_categories)
    )
    return round(NEUTRAL_GEAR_MULTIPLIER + max(0.0, min(MAX_GEAR_BONUS, total)), 2)
