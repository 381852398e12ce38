"""Access to the license shown before first use."""

from __future__ import annotations

from pathlib import Path

from backend import ASSETS_DIR

LICENSE_PATH = ASSETS_DIR / "license.txt"


def load_license_text(path: Path = LICENSE_PATH) -> str:
    """Return the license text.

    ``OSError`` propagates; the app cannot be used without showing it.
    """
    with Path(path).open("r", encoding="utf-8") as fh:
        return fh.read()
