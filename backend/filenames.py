"""Helpers for generating default note filenames."""
from __future__ import annotations

from datetime import datetime


def make_note_name(now: datetime | None = None) -> str:
    """Return an auto-generated note filename.

    The name follows the format ``YYYY-MM-DD-Note-HH-MM-SS.txt`` using the
    current local time unless ``now`` is given.
    """
    if now is None:
        now = datetime.now()
    return now.strftime("%Y-%m-%d-Note-%H-%M-%S.txt")
