from __future__ import annotations

"""Utility functions for loading and saving editor preferences.

The settings are stored as a list of dictionaries to preserve order.
Each dictionary contains ``key``, ``value`` and ``type`` entries.
"""

from dataclasses import dataclass
from pathlib import Path
import copy
import json
import logging
from typing import Any, List, Dict

from backend import DATA_DIR
from backend import themes
from backend.line_endings import LineEndingMode

# Path to the JSON file where settings are persisted. The app replaces it with
# a file in its user data directory via :func:`set_settings_path`.
SETTINGS_PATH = DATA_DIR / "settings.json"

# Default settings to initialize the file on first run.
DEFAULT_SETTINGS: List[Dict[str, Any]] = [
    {"key": "line_ending", "value": LineEndingMode.LF.name, "type": "choice"},
    {"key": "theme", "value": themes.DEFAULT_THEME, "type": "choice"},
    {"key": "font", "value": themes.DEFAULT_FONT, "type": "choice"},
    {"key": "font_size", "value": themes.DEFAULT_FONT_SIZE, "type": "int"},
    {"key": "license_accepted", "value": False, "type": "bool"},
]

# Internal cache so settings are only read from disk once.
_settings_cache: List[Dict[str, Any]] | None = None


@dataclass(frozen=True)
class EditorPreferences:
    """Configuration passed explicitly to save and UI setup calls."""

    line_ending: LineEndingMode = LineEndingMode.LF
    theme: str = themes.DEFAULT_THEME
    font: str = themes.DEFAULT_FONT
    font_size: int = themes.DEFAULT_FONT_SIZE


def set_settings_path(path: Path) -> None:
    """Store settings at ``path`` from now on and drop the cache."""
    global SETTINGS_PATH, _settings_cache
    SETTINGS_PATH = Path(path)
    _settings_cache = None


def _with_defaults(data: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Append any default entries missing from ``data``."""
    present = {item.get("key") for item in data if isinstance(item, dict)}
    merged = [item for item in data if isinstance(item, dict)]
    for item in DEFAULT_SETTINGS:
        if item["key"] not in present:
            merged.append(dict(item))
    return merged


def load_settings() -> List[Dict[str, Any]]:
    """Load settings from :data:`SETTINGS_PATH` or create defaults."""
    if SETTINGS_PATH.exists():
        try:
            with SETTINGS_PATH.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
            if isinstance(data, list):
                return _with_defaults(data)
            logging.warning("Ignoring malformed settings file %s", SETTINGS_PATH)
        except (OSError, ValueError):
            logging.exception("Could not read settings from %s", SETTINGS_PATH)
    defaults = copy.deepcopy(DEFAULT_SETTINGS)
    save_settings(defaults)
    return defaults


def save_settings(settings: List[Dict[str, Any]]) -> None:
    """Persist ``settings`` to :data:`SETTINGS_PATH`."""
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    with SETTINGS_PATH.open("w", encoding="utf-8") as fh:
        json.dump(settings, fh)


def get_settings() -> List[Dict[str, Any]]:
    """Return the cached settings list, loading from disk if needed."""
    global _settings_cache
    if _settings_cache is None:
        _settings_cache = load_settings()
    return _settings_cache


def get_value(key: str) -> Any:
    """Fetch the value associated with ``key``."""
    for item in get_settings():
        if item.get("key") == key:
            return item.get("value")
    return None


def set_value(key: str, value: Any) -> None:
    """Update ``key`` with ``value`` and persist the change."""
    settings = get_settings()
    for item in settings:
        if item.get("key") == key:
            item["value"] = value
            break
    else:
        settings.append({"key": key, "value": value, "type": type(value).__name__})
    save_settings(settings)


def get_preferences() -> EditorPreferences:
    """Return the stored preferences, replacing unknown values with defaults."""
    defaults = EditorPreferences()

    try:
        line_ending = LineEndingMode.parse(get_value("line_ending"))
    except ValueError:
        logging.warning("Unknown line ending %r, using LF", get_value("line_ending"))
        line_ending = defaults.line_ending

    theme = get_value("theme")
    if theme not in themes.THEMES:
        logging.warning("Unknown theme %r, using %s", theme, defaults.theme)
        theme = defaults.theme

    font = get_value("font")
    if font not in themes.FONTS:
        logging.warning("Unknown font %r, using %s", font, defaults.font)
        font = defaults.font

    try:
        font_size = int(get_value("font_size"))
    except (TypeError, ValueError):
        font_size = 0
    if font_size <= 0:
        logging.warning("Invalid font size %r", get_value("font_size"))
        font_size = defaults.font_size

    return EditorPreferences(
        line_ending=line_ending, theme=theme, font=font, font_size=font_size
    )
