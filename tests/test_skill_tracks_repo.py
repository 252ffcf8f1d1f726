import json
from pathlib import Path

import pytest

from encore.data.errors import DataLoadError, DataValidationError
from encore.data.repositories import SkillTracksRepository


def test_skill_tracks_repo_loads_groups_in_file_order(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "skill_tracks.json",
        {
            "genres": [_track("genres", "Genres", "Rock"), _track("genres", "Genres", "Jazz")],
            "keyboards": [_track("instruments", "Instruments & Performance", "Piano")],
        },
    )
    repo = SkillTracksRepository(base_path=definitions_dir)

    tracks = [config.track for config in repo.iter_configs()]
    assert tracks == ["Rock", "Jazz", "Piano"]
    rock = repo.get("genres")[0]
    assert rock.chain_prerequisites is True
    assert list(rock.tiers) == ["Basic", "Professional"]
    assert rock.tiers["Professional"].prerequisites[0].slug == "genres_basic_blues"
    assert rock.tiers["Professional"].prerequisites[0].required_value is None


def test_skill_tracks_repo_reads_chain_flag_and_overrides(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    capstone = {
        "prefix": "instruments",
        "category": "Instruments & Performance",
        "track": "Bandleader",
        "icon": "performance",
        "chain_prerequisites": False,
        "tiers": {
            "Mastery": {
                "name": "Bandleader Mastery",
                "description": "Run the room.",
                "slug": "instruments_mastery_bandleader",
                "xp": 20,
                "duration": 90,
                "required_value": 700,
                "prerequisites": [{"slug": "instruments_professional_piano", "required_value": 600}],
            }
        },
    }
    _write_json(definitions_dir / "skill_tracks.json", {"instrument_mastery": [capstone]})
    repo = SkillTracksRepository(base_path=definitions_dir)

    (config,) = repo.iter_configs()
    entry = config.tiers["Mastery"]
    assert config.chain_prerequisites is False
    assert (entry.slug, entry.xp, entry.duration, entry.required_value) == (
        "instruments_mastery_bandleader",
        20,
        90,
        700,
    )
    assert entry.prerequisites[0].required_value == 600


@pytest.mark.parametrize(
    "mutate",
    [
        lambda track: track.update({"extra": True}),
        lambda track: track.pop("icon"),
        lambda track: track["tiers"].update({"Legendary": {"name": "x", "description": "y"}}),
        lambda track: track["tiers"]["Basic"].update({"xp": "lots"}),
        lambda track: track["tiers"]["Basic"].update({"xp": True}),
        lambda track: track.update({"chain_prerequisites": "no"}),
        lambda track: track["tiers"]["Professional"].update({"prerequisites": [{"slug": "a", "bonus": 1}]}),
        lambda track: track.update({"tiers": {}}),
        lambda track: track.update({"track": "  "}),
    ],
)
def test_skill_tracks_repo_rejects_malformed_tracks(tmp_path: Path, mutate) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    track = _track("genres", "Genres", "Rock")
    mutate(track)
    _write_json(definitions_dir / "skill_tracks.json", {"genres": [track]})
    repo = SkillTracksRepository(base_path=definitions_dir)

    with pytest.raises(DataValidationError):
        repo.all()


def test_skill_tracks_repo_requires_group_lists(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "skill_tracks.json", {"genres": _track("genres", "Genres", "Rock")})
    repo = SkillTracksRepository(base_path=definitions_dir)

    with pytest.raises(DataValidationError):
        list(repo.iter_configs())


def test_skill_tracks_repo_reports_missing_file(tmp_path: Path) -> None:
    repo = SkillTracksRepository(base_path=_make_definitions_dir(tmp_path))

    with pytest.raises(DataLoadError) as excinfo:
        repo.all()
    assert excinfo.value.path.name == "skill_tracks.json"


def test_skill_tracks_repo_reports_invalid_json(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    (definitions_dir / "skill_tracks.json").write_text("{not json", encoding="utf-8")
    repo = SkillTracksRepository(base_path=definitions_dir)

    with pytest.raises(DataLoadError, match="Invalid JSON"):
        repo.all()


def _track(prefix: str, category: str, name: str) -> dict:
    return {
        "prefix": prefix,
        "category": category,
        "track": name,
        "icon": "music",
        "tiers": {
            "Basic": {"name": f"{name} Basics", "description": "Start here."},
            "Professional": {
                "name": f"{name} Professional",
                "description": "Keep going.",
                "prerequisites": [{"slug": "genres_basic_blues"}],
            },
        },
    }


def _make_definitions_dir(tmp_path: Path) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    return definitions_dir


def _write_json(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")
