"""Domain definition exports."""

from .relationship_def import RelationshipMetadata, SkillRelationship
from .role_def import RoleDef
from .skill_def import SkillDefinition, SkillMetadata
from .track_def import PrerequisiteConfig, TierEntry, TrackConfig

__all__ = [
    "PrerequisiteConfig",
    "RelationshipMetadata",
    "RoleDef",
    "SkillDefinition",
    "SkillMetadata",
    "SkillRelationship",
    "TierEntry",
    "TrackConfig",
]
