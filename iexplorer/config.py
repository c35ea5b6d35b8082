"""Persistent JSON preferences.

Reads theme, viewer style, prompt defaults and the optional log file.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .ui_theme import normalize_theme_name

APP_NAME = "iexplorer"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_STYLE = "monokai"
DEFAULT_UNKNOWN_SEQUENCE_PAUSE = 0.4


@dataclass(frozen=True)
class Settings:
    """Preferences read once at startup."""

    theme: str = "default"
    no_color: bool = False
    style: str = DEFAULT_STYLE
    confirm_delete_default: bool = True
    unknown_sequence_pause_seconds: float = DEFAULT_UNKNOWN_SEQUENCE_PAUSE
    log_file: Path | None = None


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    value = data.get(key)
    return value if isinstance(value, bool) else default


def _load_pause(data: dict[str, object]) -> float:
    value = data.get("unknown_sequence_pause_seconds")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_UNKNOWN_SEQUENCE_PAUSE
    return max(0.0, min(5.0, float(value)))


def _load_str(data: dict[str, object], key: str) -> str | None:
    value = data.get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_settings() -> Settings:
    """Build ``Settings`` from the config file, ignoring invalid values."""
    data = load_config()
    log_file = _load_str(data, "log_file")
    return Settings(
        theme=normalize_theme_name(_load_str(data, "theme")),
        no_color=_load_bool(data, "no_color", False),
        style=_load_str(data, "style") or DEFAULT_STYLE,
        confirm_delete_default=_load_bool(data, "confirm_delete_default", True),
        unknown_sequence_pause_seconds=_load_pause(data),
        log_file=Path(log_file).expanduser() if log_file else None,
    )

