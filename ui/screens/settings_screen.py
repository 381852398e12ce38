from __future__ import annotations

"""Screen for modifying editor preferences."""

from kivymd.app import MDApp
from kivymd.uix.screen import MDScreen
from kivy.properties import StringProperty

from backend import settings as app_settings
from backend import themes
from backend.line_endings import LineEndingMode

LINE_ENDING_LABELS = {
    LineEndingMode.LF: "Unix (\\n)",
    LineEndingMode.CR: "Classic Mac (\\r)",
    LineEndingMode.CRLF: "Windows (\\r\\n)",
}


class SettingsScreen(MDScreen):
    """Display and persist user-configurable preferences."""

    return_to = StringProperty("editor")
    """Name of the screen to return to when leaving settings."""

    _populating = False

    def on_pre_enter(self, *args) -> None:
        """Populate controls from stored settings."""
        prefs = app_settings.get_preferences()
        self._populating = True
        try:
            self.ids.theme_spinner.values = [t.name for t in themes.THEMES.values()]
            self.ids.theme_spinner.text = themes.get_theme(prefs.theme).name
            self.ids.font_spinner.values = [f.name for f in themes.FONTS.values()]
            self.ids.font_spinner.text = themes.get_font(prefs.font).name
            self.ids.font_size_spinner.values = [str(s) for s in themes.FONT_SIZES]
            self.ids.font_size_spinner.text = str(prefs.font_size)
            self.ids.line_ending_spinner.values = list(LINE_ENDING_LABELS.values())
            self.ids.line_ending_spinner.text = LINE_ENDING_LABELS[prefs.line_ending]
        finally:
            self._populating = False

    def on_theme_selected(self, name: str) -> None:
        if self._populating:
            return
        for theme_id, theme in themes.THEMES.items():
            if theme.name == name:
                app_settings.set_value("theme", theme_id)

    def on_font_selected(self, name: str) -> None:
        if self._populating:
            return
        for font_id, font in themes.FONTS.items():
            if font.name == name:
                app_settings.set_value("font", font_id)

    def on_font_size_selected(self, value: str) -> None:
        if self._populating or not value.isdigit():
            return
        app_settings.set_value("font_size", int(value))

    def on_line_ending_selected(self, label: str) -> None:
        if self._populating:
            return
        for mode, mode_label in LINE_ENDING_LABELS.items():
            if mode_label == label:
                app_settings.set_value("line_ending", mode.name)

    def go_back(self) -> None:
        """Leave settings and apply the changes to the editor."""
        app = MDApp.get_running_app()
        app.apply_preferences()
        app.root.current = self.return_to
