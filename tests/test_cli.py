import json
from pathlib import Path

import pytest

from encore.presentation.cli.app import main


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("ENCORE_CONFIG", str(tmp_path / "config.json"))
    monkeypatch.delenv("ENCORE_DEFINITIONS_PATH", raising=False)


def test_curve_command(capsys) -> None:
    assert main(["curve"]) == 0

    out = capsys.readouterr().out
    assert "Level Bonus Curve" in out
    assert "28.0%" in out
    assert "Mastered" in out


def test_tree_command_validates_bundled_data(capsys) -> None:
    assert main(["tree"]) == 0

    out = capsys.readouterr().out
    assert "472 skills, 331 prerequisites." in out
    assert "Genres" in out


def test_tree_command_fails_on_broken_definitions(tmp_path: Path, capsys) -> None:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    _write_json(
        definitions_dir / "skill_tracks.json",
        {
            "genres": [
                {
                    "prefix": "genres",
                    "category": "Genres",
                    "track": "Rock",
                    "icon": "genre",
                    "tiers": {
                        "Basic": {
                            "name": "Rock Basics",
                            "description": "Power chords.",
                            "prerequisites": [{"slug": "genres_basic_polka"}],
                        }
                    },
                }
            ]
        },
    )
    _write_json(definitions_dir / "roles.json", {})

    assert main(["--definitions", str(definitions_dir), "tree"]) == 1
    assert "MISSING_REQUIRED_SKILL" in capsys.readouterr().out


def test_skill_command(capsys) -> None:
    assert main(["skill", "genres_mastery_rock"]) == 0

    out = capsys.readouterr().out
    assert "Tier:     Mastery" in out
    assert "genres_professional_rock" in out
    assert "650" in out


def test_skill_command_unknown_slug(capsys) -> None:
    assert main(["skill", "genres_mastery_polka"]) == 2
    assert "Unknown skill" in capsys.readouterr().out


def test_score_command(tmp_path: Path, capsys) -> None:
    snapshot = _write_snapshot(tmp_path)

    assert main(["score", "--snapshot", str(snapshot), "--profile", "p1", "--role", "Lead Guitar"]) == 0

    out = capsys.readouterr().out
    assert "Skill level:     27" in out
    assert "Gear multiplier: x1.18" in out
    assert "Effective level: 32" in out


def test_band_command_is_reproducible_with_seed(tmp_path: Path, capsys) -> None:
    snapshot = _write_snapshot(tmp_path)
    args = ["band", "--snapshot", str(snapshot), "--band", "b1", "--chemistry", "20", "--seed", "5"]

    assert main(args) == 0
    first = capsys.readouterr().out
    assert main(args) == 0
    assert capsys.readouterr().out == first
    assert "Band skill rating:" in first
    assert "seed 5" in first


def test_missing_snapshot_reports_error(tmp_path: Path, capsys) -> None:
    args = ["score", "--snapshot", str(tmp_path / "nope.json"), "--profile", "p1", "--role", "Bass"]

    assert main(args) == 1
    assert "Error:" in capsys.readouterr().out


def _write_snapshot(tmp_path: Path) -> Path:
    path = tmp_path / "snapshot.json"
    _write_json(
        path,
        {
            "profiles": {"u1": "p1"},
            "skill_progress": {"p1": {"instruments_basic_electric_guitar": 10}},
            "inventory": {
                "p1": [{"id": "strat", "category": "electric_guitar", "rarity": "rare", "equipped": True}]
            },
            "bands": {
                "b1": [
                    {"id": "m1", "user_id": "u1", "instrument_role": "Lead Guitar"},
                    {"id": "m2", "is_touring_member": True, "touring_member_tier": 2},
                ]
            },
        },
    )
    return path


def _write_json(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")
