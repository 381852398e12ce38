"""Exceptions raised by the document I/O service."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backend.location import Location


class DocumentError(Exception):
    """Base class for load/save failures.

    ``location`` is the :class:`~backend.location.Location` the operation was
    given and ``cause`` the underlying exception, if any.
    """

    default_message = "document operation failed"

    def __init__(
        self,
        location: "Location | None",
        cause: BaseException | None = None,
        message: str | None = None,
    ):
        self.location = location
        self.cause = cause
        if message is None:
            message = f"{self.default_message}: {location}"
            if cause is not None:
                message = f"{message} ({cause})"
        super().__init__(message)


class InvalidLocationError(DocumentError):
    """The location is not a usable ``file`` location."""

    default_message = "not a valid file location"


class ReadError(DocumentError):
    """An existing file could not be read."""

    default_message = "could not read file"


class WriteError(DocumentError):
    """A file could not be created or written."""

    default_message = "could not write file"
