"""Editor workflow independent of the UI toolkit.

The editor moves through a short, fixed sequence of states::

    UNACCEPTED -> AWAITING_LOCATION -> LOADED
         |                ^              |
         v                +--------------+
       CLOSED

The UI reacts to the state after each call: it shows the license dialog in
``UNACCEPTED``, the open dialog in ``AWAITING_LOCATION`` and the text returned
by the call in ``LOADED``. Document content itself stays with the caller.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable
import logging

from backend import document_io
from backend.errors import DocumentError, InvalidLocationError
from backend.line_endings import LineEndingMode
from backend.location import Location


class EditorState(Enum):
    UNACCEPTED = "unaccepted"
    AWAITING_LOCATION = "awaiting_location"
    LOADED = "loaded"
    CLOSED = "closed"


class EditorSession:
    """Track which document is open and drive load/save for the UI.

    Parameters
    ----------
    license_accepted:
        Whether the license gate was already passed on a previous run.
    location:
        Optional location to open on start, e.g. from the command line.
    notify:
        Callable receiving short user-facing messages.
    """

    def __init__(
        self,
        license_accepted: bool = False,
        location: Location | None = None,
        notify: Callable[[str], None] | None = None,
    ):
        self.license_accepted = license_accepted
        self.location = location
        self.state = EditorState.UNACCEPTED
        # Set when the autosave on pause failed; resume then keeps the editor text
        self._pause_save_failed = False
        self._notify = notify or (lambda message: logging.info("%s", message))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> str | None:
        """Enter the first state. Returns document text if one was loaded."""
        if not self.license_accepted:
            self.state = EditorState.UNACCEPTED
            return None
        return self._open_or_load()

    def accept_license(self) -> str | None:
        self.license_accepted = True
        return self._open_or_load()

    def refuse_license(self) -> None:
        self.state = EditorState.CLOSED

    def resume(self) -> str | None:
        """Reload the current document when the app comes back.

        Returns ``None`` without touching the disk if the document is loaded
        but could not be saved on pause, so the unsaved text is kept.
        """
        if self.state in (EditorState.UNACCEPTED, EditorState.CLOSED):
            return None
        if self.state is EditorState.LOADED and self._pause_save_failed:
            logging.warning("Not reloading %s, the last save failed", self.location)
            return None
        return self._open_or_load()

    def pause(self, content: str, line_ending: LineEndingMode) -> bool:
        """Save the open document before the app goes to the background."""
        if self.state is not EditorState.LOADED or not self.has_sane_location():
            return False
        saved = self.save(content, line_ending)
        self._pause_save_failed = not saved
        return saved

    # ------------------------------------------------------------------
    # Document handling
    # ------------------------------------------------------------------
    def has_sane_location(self) -> bool:
        return self.location is not None and self.location.is_sane()

    def _open_or_load(self) -> str | None:
        if not self.has_sane_location():
            self.state = EditorState.AWAITING_LOCATION
            return None
        return self.open_location(self.location)

    def open_location(self, location: Location) -> str | None:
        """Load ``location`` and make it the current document.

        If the file cannot be read the location is forgotten and the session
        waits for another one, so a later save cannot overwrite it.
        """
        try:
            content, existed = document_io.load(location)
        except InvalidLocationError:
            self._notify(f"URI {location.uri} is not a valid file URI.")
            self.location = None
            self.state = EditorState.AWAITING_LOCATION
            return None
        except DocumentError:
            self._notify(f"There was an error opening file {location}")
            self.location = None
            self.state = EditorState.AWAITING_LOCATION
            return None

        self.location = location
        self.state = EditorState.LOADED
        self._pause_save_failed = False
        if existed:
            self._notify(f"Loaded file {location}.")
        else:
            self._notify(f"New file {location}.")
        return content

    def pick_cancelled(self) -> None:
        self.state = EditorState.AWAITING_LOCATION

    def save(self, content: str, line_ending: LineEndingMode) -> bool:
        """Write ``content`` to the current location.

        Failures are reported through ``notify``; the session state is left
        unchanged and ``False`` is returned.
        """
        location = self.location
        if location is None:
            self._notify("No file is open.")
            return False
        try:
            document_io.save(location, content, line_ending)
        except InvalidLocationError:
            self._notify(f"URI {location.uri} is not a valid file URI.")
            return False
        except DocumentError:
            self._notify(f"There was an error writing to file {location}")
            return False
        self._pause_save_failed = False
        self._notify(f"Saved file {location} with line ending {line_ending.label}.")
        return True

    def request_open(self, content: str, line_ending: LineEndingMode) -> bool:
        """Save the current document and wait for a new location.

        Returns ``False`` and keeps the current document open if it could not
        be saved; :meth:`discard` drops it instead.
        """
        if self.state is EditorState.LOADED and self.has_sane_location():
            if not self.save(content, line_ending):
                return False
        self._forget_document()
        return True

    def discard(self) -> None:
        """Drop the current document without saving it."""
        self._forget_document()

    def _forget_document(self) -> None:
        self.location = None
        self._pause_save_failed = False
        self.state = EditorState.AWAITING_LOCATION
