"""Command-line front end for inspecting the skill tree and scoring snapshots."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

from encore.core.logger import VALID_LEVELS, init_logging
from encore.core.rng import RNG
from encore.data.errors import DataError
from encore.data.repositories import RolesRepository
from encore.domain.bonus_curve import (
    MAX_LEVEL,
    MIN_LEVEL,
    level_tier_name,
    multiplier,
    raw_bonus_percent,
)
from encore.domain.skill_tree import DuplicateSkillSlugError, SkillTree
from encore.presentation.cli.config import load_config
from encore.presentation.cli.render import format_modifiers, render_heading, render_table
from encore.services import BandService, PerformanceService, SnapshotLoadError
from encore.services.reference_data import load_roles, load_skill_tree
from encore.services.skill_tree_validator import (
    format_issue,
    has_errors,
    validate_role_skills,
    validate_skill_tree,
)
from encore.services.snapshot_loader import StoreSnapshot, load_snapshot

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="encore", description="Skill tree and performance tools.")
    parser.add_argument("--config", type=Path, help="Path to a config file.")
    parser.add_argument("--log-level", choices=VALID_LEVELS, help="Override the configured log level.")
    parser.add_argument("--definitions", type=Path, help="Directory holding the definition JSON files.")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("tree", help="Summarise and validate the skill tree.")

    skill = commands.add_parser("skill", help="Show one skill and its prerequisites.")
    skill.add_argument("slug")

    commands.add_parser("curve", help="Print the level bonus curve.")

    score = commands.add_parser("score", help="Performance modifiers for one profile.")
    score.add_argument("--snapshot", type=Path, required=True)
    score.add_argument("--profile", required=True)
    score.add_argument("--role", required=True)

    band = commands.add_parser("band", help="Band skill rating for one band.")
    band.add_argument("--snapshot", type=Path, required=True)
    band.add_argument("--band", required=True)
    band.add_argument("--chemistry", type=int, default=0)
    band.add_argument("--seed", type=int)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run one command and return its exit code."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    init_logging(args.log_level or config["log_level"])
    definitions_path = args.definitions or config["definitions_path"]

    try:
        if args.command == "curve":
            return _run_curve()
        if args.command in ("tree", "skill"):
            tree = load_skill_tree(definitions_path)
            if args.command == "tree":
                return _run_tree(tree, RolesRepository(base_path=definitions_path))
            return _run_skill(tree, args.slug)
        roles_repo = load_roles(load_skill_tree(definitions_path), definitions_path)
        snapshot = load_snapshot(args.snapshot)
        if args.command == "score":
            return _run_score(snapshot, roles_repo, args.profile, args.role)
        seed = args.seed if args.seed is not None else config["rng_seed"]
        return _run_band(snapshot, roles_repo, args.band, args.chemistry, seed)
    except (DataError, DuplicateSkillSlugError, SnapshotLoadError) as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}")
        return EXIT_INVALID


def _run_tree(tree: SkillTree, roles_repo: RolesRepository) -> int:
    render_heading("Skill Tree")
    counts: Dict[str, int] = {}
    for definition in tree.definitions:
        category = definition.metadata.category
        counts[category] = counts.get(category, 0) + 1
    render_table(("Category", "Skills"), sorted(counts.items()))
    print(f"\n{len(tree)} skills, {len(tree.relationships)} prerequisites.")

    issues = validate_skill_tree(tree) + validate_role_skills(roles_repo.all(), tree)
    if issues:
        render_heading("Issues")
        for issue in issues:
            print(format_issue(issue))
    return EXIT_INVALID if has_errors(issues) else EXIT_OK


def _run_skill(tree: SkillTree, slug: str) -> int:
    if slug not in tree:
        print(f"Unknown skill '{slug}'.")
        return EXIT_USAGE
    definition = tree.definition(slug)
    metadata = definition.metadata
    render_heading(definition.display_name)
    print(f"Slug:     {definition.slug}")
    print(f"Category: {metadata.category} / {metadata.track}")
    print(f"Tier:     {metadata.tier}")
    print(f"Base XP:  {definition.base_xp_gain}")
    print(f"Training: {definition.training_duration_minutes} min")
    if definition.description:
        print(definition.description)

    requirements = tree.requirements_for(slug)
    if requirements:
        render_heading("Requires")
        render_table(
            ("Skill", "Value"),
            [(edge.required_skill_slug, edge.required_value) for edge in requirements],
        )
    dependents = tree.dependents_of(slug)
    if dependents:
        render_heading("Unlocks")
        render_table(("Skill", "Value"), [(edge.skill_slug, edge.required_value) for edge in dependents])
    return EXIT_OK


def _run_curve() -> int:
    render_heading("Level Bonus Curve")
    rows: List[Sequence[Any]] = []
    for level in range(MIN_LEVEL, MAX_LEVEL + 1):
        rows.append(
            (
                level,
                level_tier_name(level),
                f"{raw_bonus_percent(level):.1f}%",
                f"x{multiplier(level):.3f}",
            )
        )
    render_table(("Level", "Tier", "Bonus", "Multiplier"), rows)
    return EXIT_OK


def _run_score(snapshot: StoreSnapshot, roles_repo: RolesRepository, profile_id: str, role: str) -> int:
    service = PerformanceService(roles_repo, snapshot.progress, snapshot.inventory)
    modifiers = service.calculate_performance_modifiers(profile_id, role)
    render_heading(f"{profile_id} as {role}")
    for line in format_modifiers(modifiers):
        print(line)
    return EXIT_OK


def _run_band(
    snapshot: StoreSnapshot,
    roles_repo: RolesRepository,
    band_id: str,
    chemistry: int,
    seed: int | None,
) -> int:
    performance = PerformanceService(roles_repo, snapshot.progress, snapshot.inventory)
    rng = RNG(seed) if seed is not None else RNG.from_entropy()
    service = BandService(performance, snapshot.roster, snapshot.profiles, snapshot.progress, rng=rng)
    rating = service.calculate_band_skill_rating(band_id, chemistry)
    render_heading(f"Band {band_id}")
    members = snapshot.roster.list_members(band_id)
    if members:
        render_table(
            ("Member", "Role", "Touring", "Contribution"),
            [
                (
                    member.id,
                    member.instrument_role or "-",
                    "yes" if member.is_touring_member else "no",
                    "-" if member.skill_contribution is None else member.skill_contribution,
                )
                for member in members
            ],
        )
    print(f"\nBand skill rating: {rating} (chemistry {chemistry}, seed {rng.seed})")
    return EXIT_OK
