"""File locations handed to the document I/O service.

A :class:`Location` is an immutable reference made of a URI scheme, a
directory and a filename. Only *sane* locations (``file`` scheme and a
non-empty path) may be loaded or saved.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from urllib.parse import unquote, urlsplit
import logging
import os

from backend.filenames import make_note_name

FILE_SCHEME = "file"


def default_save_dir() -> Path:
    """Return the directory new notes are created in.

    On Android this is the application's private storage directory. On other
    platforms, or if the Android lookup fails, the user's home directory is
    used instead.
    """

    try:  # pragma: no cover - imports require Android
        from android.storage import app_storage_path
    except ImportError:
        return Path.home()

    try:  # pragma: no cover - Android only
        return Path(app_storage_path())
    except Exception:  # pragma: no cover - Android only
        logging.exception("Android storage lookup failed, using home directory")
        return Path.home()


@dataclass(frozen=True)
class Location:
    """Reference to a readable/writable file."""

    scheme: str
    directory: str
    filename: str

    @classmethod
    def from_path(cls, path: str | os.PathLike) -> "Location":
        """Build a ``file`` location from a filesystem path."""
        text = os.path.expanduser(os.fspath(path))
        if not text:
            return cls(FILE_SCHEME, "", "")
        directory, filename = os.path.split(text)
        return cls(FILE_SCHEME, directory, filename)

    @classmethod
    def from_entries(cls, directory: str, filename: str) -> "Location":
        """Build a location from the directory and filename typed by the user."""
        return cls(
            FILE_SCHEME,
            os.path.expanduser(directory.strip()),
            filename.strip(),
        )

    @classmethod
    def from_uri(cls, uri: str) -> "Location":
        """Parse ``uri``.

        ``file://`` URIs become regular locations. Any other scheme is kept as
        is so the result fails :meth:`is_sane`.
        """
        parts = urlsplit(uri)
        path = unquote(parts.path)
        directory, filename = os.path.split(path) if path else ("", "")
        return cls(parts.scheme.lower(), directory, filename)

    @classmethod
    def from_argument(cls, value: str) -> "Location":
        """Parse a command line argument: a ``scheme://`` URI or a path."""
        if "://" in value:
            return cls.from_uri(value)
        return cls.from_path(os.path.abspath(os.path.expanduser(value)))

    @classmethod
    def default(
        cls, directory: str | os.PathLike | None = None, now: datetime | None = None
    ) -> "Location":
        """Location of a new note with a generated, timestamped filename."""
        if directory is None:
            directory = default_save_dir()
        return cls(FILE_SCHEME, os.fspath(directory), make_note_name(now))

    @property
    def path(self) -> str:
        if self.directory and self.filename:
            return os.path.join(self.directory, self.filename)
        return self.directory or self.filename

    @property
    def uri(self) -> str:
        return f"{self.scheme}://{self.path}"

    def is_sane(self) -> bool:
        """Return ``True`` if the location may be passed to load/save."""
        return self.scheme.lower() == FILE_SCHEME and self.path != ""

    def __str__(self) -> str:
        return self.path
