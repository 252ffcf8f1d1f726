"""Shared type aliases for the core and domain layers."""
from typing import Literal

TierName = Literal["Basic", "Professional", "Mastery"]
RelationshipType = Literal["tier_prerequisite", "cross_prerequisite"]

__all__ = ["RelationshipType", "TierName"]
