"""Process-wide skill tree reference tables.

The tree is generated from ``skill_tracks.json`` once, on first import, and
treated as read-only for the life of the process. Configuration errors such as
two tracks generating one slug surface here at startup.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from encore.data.errors import DataReferenceError
from encore.data.repositories import RolesRepository, SkillTracksRepository
from encore.domain.defs import SkillDefinition, SkillRelationship
from encore.domain.skill_tree import SkillTree, build_skill_tree

logger = logging.getLogger(__name__)


def load_skill_tree(base_path: Path | str | None = None) -> SkillTree:
    """Build a skill tree from the track configs under `base_path`."""
    repo = SkillTracksRepository(base_path=base_path)
    tree = build_skill_tree(repo.iter_configs())
    logger.debug(
        "Built skill tree: %d definitions, %d relationships.",
        len(tree.definitions),
        len(tree.relationships),
    )
    return tree


def load_roles(tree: SkillTree, base_path: Path | str | None = None) -> RolesRepository:
    """Load the role table, rejecting roles that list skills absent from `tree`."""
    repo = RolesRepository(base_path=base_path)
    for role in repo.iter_in_file_order():
        missing = [slug for slug in role.skill_slugs if slug not in tree]
        if missing:
            raise DataReferenceError(f"role '{role.name}'", missing)
    return repo


SKILL_TREE: SkillTree = load_skill_tree()
SKILL_TREE_DEFINITIONS: Tuple[SkillDefinition, ...] = SKILL_TREE.definitions
SKILL_TREE_RELATIONSHIPS: Tuple[SkillRelationship, ...] = SKILL_TREE.relationships

__all__ = [
    "SKILL_TREE",
    "SKILL_TREE_DEFINITIONS",
    "SKILL_TREE_RELATIONSHIPS",
    "load_roles",
    "load_skill_tree",
]
