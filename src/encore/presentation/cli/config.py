"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

from encore.core.logger import VALID_LEVELS

CONFIG_ENV_VAR = "ENCORE_CONFIG"
_DEFAULT_LOG_LEVEL = "WARNING"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Encore"
        return Path.home() / "Encore"
    return Path.home() / ".config" / "encore"


def get_default_config_path() -> Path:
    """Return the config path, honouring the ENCORE_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return get_user_data_dir() / "config.json"


def default_config() -> Dict[str, Any]:
    return {"log_level": _DEFAULT_LOG_LEVEL, "definitions_path": None, "rng_seed": None}


def _normalize_config(raw: object) -> Dict[str, Any]:
    config = default_config()
    if not isinstance(raw, dict):
        return config
    level = raw.get("log_level")
    if isinstance(level, str) and level.strip().upper() in VALID_LEVELS:
        config["log_level"] = level.strip().upper()
    definitions_path = raw.get("definitions_path")
    if isinstance(definitions_path, str) and definitions_path.strip():
        config["definitions_path"] = definitions_path
    seed = raw.get("rng_seed")
    if isinstance(seed, int) and not isinstance(seed, bool):
        config["rng_seed"] = seed
    return config


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return default_config()
    return _normalize_config(raw)


def save_config(config: Dict[str, Any], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = _normalize_config(config)
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
