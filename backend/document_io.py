"""Load and save plain-text documents.

Both operations are synchronous and keep no state between calls. Text is
always UTF-8. ``load`` normalises every line terminator to ``\\n``; ``save``
converts ``\\n`` to the requested :class:`~backend.line_endings.LineEndingMode`
and replaces the target file atomically.
"""
from __future__ import annotations

from pathlib import Path
from typing import NamedTuple
import logging
import os
import shutil
import stat
import tempfile

from backend.errors import InvalidLocationError, ReadError, WriteError
from backend.line_endings import LineEndingMode, apply_line_ending
from backend.location import Location


class LoadResult(NamedTuple):
    content: str
    existed: bool


def _require_sane(location: Location) -> Path:
    """Return the filesystem path of ``location`` or raise ``InvalidLocationError``."""

    if location is None or not location.is_sane():
        logging.error("Refusing I/O on invalid location %r", location)
        raise InvalidLocationError(location)
    return Path(location.path)


def load(location: Location) -> LoadResult:
    """Read the document at ``location``.

    A missing file is not an error: ``LoadResult("", False)`` is returned and
    nothing is created. ``\\r\\n`` and ``\\r`` are read back as ``\\n``. A file
    that exists but cannot be read or decoded raises :class:`ReadError`.
    """

    path = _require_sane(location)
    try:
        if not path.exists():
            logging.info("No file at %s, starting a new document", path)
            return LoadResult("", False)
        # newline=None turns every terminator into "\n" on read
        with path.open("r", encoding="utf-8", newline=None) as fh:
            content = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        logging.exception("Failed to read %s", path)
        raise ReadError(location, exc) from exc
    logging.info("Loaded %s (%d characters)", path, len(content))
    return LoadResult(content, True)


def _resolve_target(path: Path) -> Path:
    """Follow a symlinked target so the link itself is not replaced."""

    if path.is_symlink():
        return Path(os.path.realpath(path))
    return path


def _is_writable(path: Path) -> bool:
    """``False`` for files the user may not write or with no write bit at all.

    The rename in :func:`save` only needs directory permissions, so the
    target's own protection is checked here.
    """

    if not os.access(path, os.W_OK):
        return False
    return bool(path.stat().st_mode & (stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH))


def _new_file_mode() -> int:
    """Permission bits a plain ``open(path, "w")`` would give a new file."""

    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def save(
    location: Location,
    content: str,
    line_ending: LineEndingMode = LineEndingMode.LF,
) -> None:
    """Write ``content`` to ``location``.

    Each ``\\n`` is replaced by the terminator of ``line_ending`` and the
    result is encoded as UTF-8. The bytes go to a uniquely named temporary
    file next to the target which is flushed, synced and renamed over it, so
    readers never observe a partially written document. A target without
    write permission is refused. Any failure raises :class:`WriteError` and
    leaves no temporary file behind.
    """

    path = _require_sane(location)
    target = _resolve_target(path)
    tmp: Path | None = None
    try:
        data = apply_line_ending(content, line_ending).encode("utf-8")
        exists = target.exists()
        if exists and not _is_writable(target):
            raise PermissionError(f"{target} is not writable")
        fd, tmp_name = tempfile.mkstemp(
            dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
        )
        tmp = Path(tmp_name)
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
            fh.flush()
            os.fsync(fh.fileno())
        if exists:
            shutil.copymode(target, tmp)
        else:
            os.chmod(tmp, _new_file_mode())
        os.replace(tmp, target)
    except (OSError, UnicodeEncodeError) as exc:
        logging.exception("Failed to write %s", target)
        if tmp is not None:
            try:
                tmp.unlink()
            except FileNotFoundError:
                pass
            except OSError:
                logging.exception("Could not remove temporary file %s", tmp)
        raise WriteError(location, exc) from exc
    logging.info(
        "Saved %s (%d bytes, line ending %s)", target, len(data), line_ending.label
    )
