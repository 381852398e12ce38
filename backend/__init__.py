"""Shared constants for backend modules."""

from __future__ import annotations

from pathlib import Path

APP_NAME = "Qute"

# Root of the repository; the default data directory lives here.
BASE_DIR = Path(__file__).resolve().parent.parent

# Bundled with the package so installed copies find them too.
ASSETS_DIR = Path(__file__).resolve().parent / "assets"
DATA_DIR = BASE_DIR / "data"

# Opened in the browser from the help action.
HELP_URL = "http://www.inkcode.net/qute"

__all__ = [
    "APP_NAME",
    "BASE_DIR",
    "ASSETS_DIR",
    "DATA_DIR",
    "HELP_URL",
]
