"""Dialogs gating the editor: license, open file and discard confirmation.

Each dialog only collects the user's choice and hands it to callbacks; the
decisions themselves live in :class:`backend.session.EditorSession`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable
import logging

from kivy.metrics import dp
from kivy.uix.scrollview import ScrollView
from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.button import MDFlatButton, MDRaisedButton
from kivymd.uix.dialog import MDDialog
from kivymd.uix.filemanager import MDFileManager
from kivymd.uix.label import MDLabel
from kivymd.uix.textfield import MDTextField

from backend.location import Location, default_save_dir


class LicenseDialog(MDDialog):
    """Show the license text with Accept / Refuse buttons.

    Dismissing the dialog any other way counts as refusing.
    """

    def __init__(
        self,
        license_text: str,
        on_accept: Callable[[], None],
        on_refuse: Callable[[], None],
        **kwargs,
    ):
        self._on_accept = on_accept
        self._on_refuse = on_refuse
        self._answered = False

        label = MDLabel(text=license_text, adaptive_height=True)
        scroll = ScrollView(do_scroll_x=False, size_hint_y=None, height=dp(360))
        scroll.add_widget(label)

        super().__init__(
            title="License",
            type="custom",
            content_cls=scroll,
            buttons=[
                MDFlatButton(text="Refuse", on_release=self.refuse),
                MDRaisedButton(text="Accept", on_release=self.accept),
            ],
            **kwargs,
        )
        self.bind(on_dismiss=self._dismissed)

    def accept(self, *_) -> None:
        self._answered = True
        self.dismiss()
        self._on_accept()

    def refuse(self, *_) -> None:
        self._answered = True
        self.dismiss()
        self._on_refuse()

    def _dismissed(self, *_) -> None:
        if not self._answered:
            self._answered = True
            self._on_refuse()


class OpenFileDialog(MDDialog):
    """Ask for the document to open or create.

    The directory and filename entries are pre-filled from
    :meth:`Location.default`. "Browse" hands over to
    :class:`MDFileManager`; cancelling the file manager calls ``on_cancel`` so
    the caller can show this dialog again.
    """

    def __init__(
        self,
        on_open: Callable[[Location], None],
        on_cancel: Callable[[], None],
        directory: str | None = None,
        filename: str | None = None,
        **kwargs,
    ):
        self._on_open = on_open
        self._on_cancel = on_cancel
        self.file_manager: MDFileManager | None = None
        suggested = Location.default()

        content = MDBoxLayout(
            orientation="vertical",
            spacing=dp(8),
            size_hint_y=None,
            height=dp(140),
        )
        self.directory_field = MDTextField(
            hint_text="Directory",
            text=directory if directory is not None else suggested.directory,
        )
        self.filename_field = MDTextField(
            hint_text="File",
            text=filename if filename is not None else suggested.filename,
        )
        content.add_widget(self.directory_field)
        content.add_widget(self.filename_field)

        super().__init__(
            title="Open File",
            type="custom",
            content_cls=content,
            auto_dismiss=False,
            buttons=[
                MDFlatButton(text="Browse", on_release=self.browse),
                MDRaisedButton(text="Open", on_release=self.open_typed),
            ],
            **kwargs,
        )

    def typed_location(self) -> Location:
        return Location.from_entries(
            self.directory_field.text, self.filename_field.text
        )

    def open_typed(self, *_) -> None:
        self.dismiss()
        self._on_open(self.typed_location())

    # ------------------------------------------------------------------
    # File manager
    # ------------------------------------------------------------------
    def browse(self, *_) -> None:
        start = Path(self.directory_field.text.strip() or default_save_dir()).expanduser()
        if not start.is_dir():
            logging.info("Directory %s missing, browsing default directory", start)
            start = default_save_dir()
        if self.file_manager is None:
            self.file_manager = MDFileManager(
                exit_manager=self._file_manager_closed,
                select_path=self._file_selected,
            )
        self.dismiss()
        self.file_manager.show(str(start))

    def _file_selected(self, path: str) -> None:
        self.file_manager.close()
        if Path(path).is_dir():
            # Directories only navigate; keep the typed filename.
            self.directory_field.text = path
            self._on_cancel()
            return
        self._on_open(Location.from_path(path))

    def _file_manager_closed(self, *_) -> None:
        self.file_manager.close()
        self._on_cancel()


class DiscardDialog(MDDialog):
    """Confirm dropping unsaved changes."""

    def __init__(self, on_confirm: Callable[[], None], **kwargs):
        self._on_confirm = on_confirm
        super().__init__(
            text=(
                "Do you want to discard the changes to the current file "
                "and open a different one?"
            ),
            auto_dismiss=False,
            buttons=[
                MDFlatButton(text="No", on_release=lambda *_: self.dismiss()),
                MDRaisedButton(text="Yes", on_release=self.confirm),
            ],
            **kwargs,
        )

    def confirm(self, *_) -> None:
        self.dismiss()
        self._on_confirm()
