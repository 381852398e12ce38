"""Line-ending conventions applied when saving documents."""

from __future__ import annotations

from enum import Enum


class LineEndingMode(Enum):
    """Terminator written in place of each ``\\n`` on save."""

    LF = "\n"
    CR = "\r"
    CRLF = "\r\n"

    @property
    def terminator(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Escaped terminator, e.g. ``\\r\\n``, for user-facing messages."""
        return self.value.replace("\r", "\\r").replace("\n", "\\n")

    @classmethod
    def parse(cls, value) -> "LineEndingMode":
        """Return the mode for ``value``.

        Accepts a member, a member name in any case, or the numeric values
        ``0`` (LF), ``1`` (CR) and ``2`` (CRLF) stored by older preference
        files. Raises :class:`ValueError` for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"unknown line ending: {value!r}")
        if isinstance(value, int) or (isinstance(value, str) and value.strip().isdigit()):
            index = int(value)
            members = list(cls)
            if 0 <= index < len(members):
                return members[index]
            raise ValueError(f"unknown line ending: {value!r}")
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"unknown line ending: {value!r}")


def apply_line_ending(content: str, mode: LineEndingMode) -> str:
    """Replace every ``\\n`` in ``content`` with the terminator of ``mode``.

    Existing ``\\r`` characters are not touched.
    """
    if mode is LineEndingMode.LF:
        return content
    return content.replace("\n", mode.terminator)
