"""Static skill tree validation utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from encore.domain.defs import RoleDef
from encore.domain.skill_tree import SKILL_TIER_ORDER, SkillTree

Severity = str

_TIER_RANK = {tier: index for index, tier in enumerate(SKILL_TIER_ORDER)}


@dataclass(frozen=True, slots=True)
class Issue:
    severity: Severity
    code: str
    message: str
    context: dict[str, str]


def format_issue(issue: Issue) -> str:
    context = " ".join(f"{key}={value}" for key, value in issue.context.items())
    suffix = f" ({context})" if context else ""
    return f"[{issue.severity}] {issue.code}: {issue.message}{suffix}"


def has_errors(issues: Iterable[Issue]) -> bool:
    return any(issue.severity == "ERROR" for issue in issues)


def validate_skill_tree(tree: SkillTree) -> list[Issue]:
    """Check edge targets, tier ordering and acyclicity of the prerequisite graph."""
    issues: list[Issue] = []
    for relationship in tree.relationships:
        context = {
            "skill": relationship.skill_slug,
            "requires": relationship.required_skill_slug,
        }
        if relationship.skill_slug == relationship.required_skill_slug:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="SELF_PREREQUISITE",
                    message="Skill lists itself as a prerequisite.",
                    context=context,
                )
            )
            continue
        if relationship.required_skill_slug not in tree:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="MISSING_REQUIRED_SKILL",
                    message="Prerequisite references a skill that is not defined.",
                    context=context,
                )
            )
            continue
        skill_tier = tree.definition(relationship.skill_slug).metadata.tier
        required_tier = tree.definition(relationship.required_skill_slug).metadata.tier
        if _TIER_RANK[required_tier] > _TIER_RANK[skill_tier]:
            issues.append(
                Issue(
                    severity="WARN",
                    code="TIER_ORDER_INVERSION",
                    message="Skill requires a skill from a higher tier.",
                    context={**context, "tier": skill_tier, "required_tier": required_tier},
                )
            )
    _validate_cycles(tree, issues)
    return issues


def validate_role_skills(roles: Iterable[RoleDef], tree: SkillTree) -> list[Issue]:
    """Report role table entries that name skills missing from the tree."""
    issues: list[Issue] = []
    for role in roles:
        for slug in role.skill_slugs:
            if slug not in tree:
                issues.append(
                    Issue(
                        severity="ERROR",
                        code="UNKNOWN_ROLE_SKILL",
                        message="Role references a skill that is not defined.",
                        context={"role": role.name, "skill": slug},
                    )
                )
    return issues


def _validate_cycles(tree: SkillTree, issues: list[Issue]) -> None:
    adjacency: Mapping[str, list[str]] = {
        definition.slug: [
            edge.required_skill_slug
            for edge in tree.requirements_for(definition.slug)
            if edge.required_skill_slug in tree and edge.required_skill_slug != definition.slug
        ]
        for definition in tree.definitions
    }

    visited: set[str] = set()
    stack: list[str] = []
    stack_set: set[str] = set()
    cycles: list[list[str]] = []

    def dfs(current: str) -> None:
        visited.add(current)
        stack.append(current)
        stack_set.add(current)
        for next_slug in adjacency.get(current, ()):
            if next_slug not in visited:
                dfs(next_slug)
            elif next_slug in stack_set:
                cycles.append(stack[stack.index(next_slug) :])
        stack.pop()
        stack_set.remove(current)

    for slug in sorted(adjacency):
        if slug not in visited:
            dfs(slug)

    for cycle in cycles:
        issues.append(
            Issue(
                severity="ERROR",
                code="PREREQUISITE_CYCLE",
                message="Prerequisite cycle detected.",
                context={"cycle": " -> ".join(cycle + [cycle[0]])},
            )
        )
