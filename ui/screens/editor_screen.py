"""The single editing screen."""

from __future__ import annotations

import logging

from kivy.metrics import sp
from kivy.properties import StringProperty
from kivymd.uix.screen import MDScreen

from backend import APP_NAME
from backend import themes
from backend.settings import EditorPreferences


class EditorScreen(MDScreen):
    """Hosts the text view; toolbar actions are forwarded to the app."""

    title = StringProperty(APP_NAME)

    @property
    def text(self) -> str:
        return self.ids.editor.text

    @text.setter
    def text(self, value: str) -> None:
        editor = self.ids.editor
        if editor.text == value:
            return
        editor.text = value
        editor.cursor = (0, 0)

    def set_document_name(self, name: str | None) -> None:
        self.title = f"{APP_NAME} - {name}" if name else APP_NAME

    def apply_preferences(self, prefs: EditorPreferences) -> None:
        """Apply theme, font and font size to the text view."""
        editor = self.ids.editor

        theme = themes.get_theme(prefs.theme)
        editor.background_color = theme.background
        editor.foreground_color = theme.foreground
        editor.cursor_color = theme.cursor

        editor.font_size = sp(prefs.font_size)
        font = themes.get_font(prefs.font)
        if font.path.exists():
            editor.font_name = str(font.path)
        else:
            logging.warning("Font file %s not found, keeping default font", font.path)
