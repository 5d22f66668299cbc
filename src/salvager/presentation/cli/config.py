"""CLI configuration helpers."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

_DEFAULT_HIGHSCORE_FILE = "highscores.txt"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "SpaceSalvager"
        return Path.home() / "SpaceSalvager"
    return Path.home() / ".config" / "space_salvager"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _defaults() -> Dict[str, Any]:
    return {"highscore_file": _DEFAULT_HIGHSCORE_FILE, "cap_beacon_data": False}


def _normalize_highscore_file(value: object) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return _DEFAULT_HIGHSCORE_FILE


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return _defaults()
    except (OSError, ValueError):
        return _defaults()
    if not isinstance(raw, dict):
        return _defaults()
    return {
        "highscore_file": _normalize_highscore_file(raw.get("highscore_file")),
        "cap_beacon_data": raw.get("cap_beacon_data") is True,
    }
