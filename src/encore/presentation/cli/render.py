"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Sequence

from encore.domain.performance import PerformanceModifiers


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def format_table(headers: Sequence[str], rows: Sequence[Sequence[object]]) -> list[str]:
    """Left-align columns to the widest cell."""
    cells = [[str(value) for value in row] for row in rows]
    widths = [len(header) for header in headers]
    for row in cells:
        for index, value in enumerate(row):
            widths[index] = max(widths[index], len(value))
    lines = ["  ".join(header.ljust(widths[index]) for index, header in enumerate(headers)).rstrip()]
    lines.append("  ".join("-" * width for width in widths))
    for row in cells:
        lines.append("  ".join(value.ljust(widths[index]) for index, value in enumerate(row)).rstrip())
    return lines


def render_table(headers: Sequence[str], rows: Sequence[Sequence[object]]) -> None:
    for line in format_table(headers, rows):
        print(line)


def format_modifiers(modifiers: PerformanceModifiers) -> list[str]:
    breakdown = modifiers.breakdown
    return [
        f"Skill level:     {modifiers.skill_level}",
        f"Gear multiplier: x{modifiers.gear_multiplier:.2f}",
        f"Effective level: {modifiers.effective_level}",
        f"  base {breakdown.base_skill}, gear {breakdown.gear_bonus:+d}, vs baseline {breakdown.total_bonus:+d}",
    ]
