import os

# Kivy would otherwise try to parse our command line arguments.
os.environ.setdefault("KIVY_NO_ARGS", "1")

from kivymd.app import MDApp
from kivymd.toast import toast
from kivy.core.window import Window
from kivy.lang import Builder
from kivy.uix.screenmanager import ScreenManager, NoTransition
from pathlib import Path
import argparse
import logging
import sys
import webbrowser

from backend import HELP_URL
from backend import settings as app_settings
from backend.licensing import load_license_text
from backend.location import Location
from backend.session import EditorSession, EditorState
from ui import KV_FILE
from ui.dialogs import DiscardDialog, LicenseDialog, OpenFileDialog
from ui.screens import EditorScreen, SettingsScreen


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Qute text editor")
    parser.add_argument(
        "path",
        nargs="?",
        help="file to open; file:// URIs are accepted as well",
    )
    return parser.parse_args(argv)


class QuteApp(MDApp):
    """Single-screen editor wiring Kivy lifecycle events to :class:`EditorSession`."""

    session: EditorSession | None = None
    fullscreen = False

    def __init__(self, location: Location | None = None, **kwargs):
        super().__init__(**kwargs)
        self._initial_location = location
        self._open_dialog: OpenFileDialog | None = None
        # True while the open dialog or its file manager is on screen
        self._choosing_location = False

    def build(self):
        self.title = "Qute"
        app_settings.set_settings_path(Path(self.user_data_dir) / "settings.json")
        Builder.load_file(str(KV_FILE))

        manager = ScreenManager(transition=NoTransition())
        manager.add_widget(EditorScreen(name="editor"))
        manager.add_widget(SettingsScreen(name="settings"))
        self.session = EditorSession(
            license_accepted=bool(app_settings.get_value("license_accepted")),
            location=self._initial_location,
            notify=self.show_message,
        )
        return manager

    @property
    def editor(self) -> EditorScreen:
        return self.root.get_screen("editor")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def on_start(self):
        self.apply_preferences()
        self._show(self.session.start())

    def on_pause(self):
        self.session.pause(self.editor.text, self._line_ending())
        return True

    def on_resume(self):
        if self._choosing_location or self.session.state in (
            EditorState.UNACCEPTED,
            EditorState.CLOSED,
        ):
            return
        self._show(self.session.resume())

    def on_stop(self):
        self.session.pause(self.editor.text, self._line_ending())

    def _line_ending(self):
        return app_settings.get_preferences().line_ending

    def _show(self, content: str | None) -> None:
        """Update the UI for the session's current state."""
        state = self.session.state
        if state is EditorState.UNACCEPTED:
            self.show_license()
        elif state is EditorState.AWAITING_LOCATION:
            self.show_open_dialog()
        elif state is EditorState.LOADED:
            if content is not None:
                self.editor.text = content
            self.editor.set_document_name(self.session.location.filename)
        elif state is EditorState.CLOSED:
            self.stop()

    def show_message(self, message: str) -> None:
        logging.info("%s", message)
        toast(message)

    # ------------------------------------------------------------------
    # Dialogs
    # ------------------------------------------------------------------
    def show_license(self) -> None:
        try:
            text = load_license_text()
        except OSError:
            logging.exception("License text unavailable")
            self.show_message("There was an error opening the license file.")
            self.stop()
            return
        LicenseDialog(
            text, on_accept=self._license_accepted, on_refuse=self._license_refused
        ).open()

    def _license_accepted(self) -> None:
        app_settings.set_value("license_accepted", True)
        self._show(self.session.accept_license())

    def _license_refused(self) -> None:
        self.session.refuse_license()
        self._show(None)

    def show_open_dialog(self) -> None:
        if self._choosing_location:
            return
        self._choosing_location = True
        self.editor.set_document_name(None)
        self._open_dialog = OpenFileDialog(
            on_open=self._location_chosen, on_cancel=self._pick_cancelled
        )
        self._open_dialog.open()

    def _location_chosen(self, location: Location) -> None:
        self._choosing_location = False
        self._open_dialog = None
        self._show(self.session.open_location(location))

    def _pick_cancelled(self) -> None:
        self.session.pick_cancelled()
        self._open_dialog.open()

    # ------------------------------------------------------------------
    # Toolbar actions
    # ------------------------------------------------------------------
    def menu_open(self) -> None:
        if self.session.request_open(self.editor.text, self._line_ending()):
            self._show(None)

    def menu_save(self) -> None:
        self.session.save(self.editor.text, self._line_ending())

    def menu_discard(self) -> None:
        def confirm():
            self.session.discard()
            self._show(None)

        DiscardDialog(on_confirm=confirm).open()

    def toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen
        Window.fullscreen = "auto" if self.fullscreen else False

    def open_help(self) -> None:
        try:
            webbrowser.open(HELP_URL)
        except webbrowser.Error:
            logging.exception("Could not open %s", HELP_URL)
            self.show_message("No browser available.")

    def open_preferences(self) -> None:
        self.root.current = "settings"

    def apply_preferences(self) -> None:
        self.editor.apply_preferences(app_settings.get_preferences())


if __name__ == "__main__":
    args = parse_args(sys.argv[1:])
    location = Location.from_argument(args.path) if args.path else None
    QuteApp(location=location).run()
