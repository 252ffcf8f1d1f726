"""Band role repository."""
from __future__ import annotations

import logging
from typing import Dict

from encore.data.repositories.base import RepositoryBase
from encore.domain.defs import RoleDef

logger = logging.getLogger(__name__)


class RolesRepository(RepositoryBase[RoleDef]):
    """Loads the role -> skill slugs and role -> gear category tables."""

    def __init__(self, base_path=None) -> None:
        super().__init__("roles.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, RoleDef]:
        roles: Dict[str, RoleDef] = {}
        for role_name, payload in raw.items():
            context = f"role '{role_name}'"
            role_data = self._require_mapping(payload, context)
            self._assert_allowed_fields(
                role_data,
                required={"skills", "gear_categories"},
                optional=set(),
                context=context,
            )
            roles[role_name] = RoleDef(
                name=role_name,
                skill_slugs=tuple(self._require_str_list(role_data["skills"], f"{context} skills")),
                gear_categories=tuple(
                    category.lower()
                    for category in self._require_str_list(role_data["gear_categories"], f"{context} gear_categories")
                ),
            )
        return roles

    def find(self, role: str | None) -> RoleDef | None:
        """Return the exact (case-sensitive) role entry, if any."""
        if not role:
            return None
        return self._ensure_loaded().get(role)

    def resolve(self, role: str | None) -> RoleDef | None:
        """Return the role entry for `role`, falling back to a substring match.

        The fallback compares case-insensitively in both directions and picks
        the first table entry that matches, so "lead vocals" resolves to
        "Vocals" and "Bass Guitar" resolves to "Bass".
        """
        exact = self.find(role)
        if exact is not None:
            return exact
        if not role or not role.strip():
            return None
        needle = role.strip().lower()
        for name, role_def in self._ensure_loaded().items():
            key = name.lower()
            if key in needle or needle in key:
                logger.debug("Role '%s' resolved to '%s' by substring match.", role, name)
                return role_def
        logger.debug("Role '%s' has no skill mapping.", role)
        return None
