"""UI screen modules for the editor."""

from .editor_screen import EditorScreen
from .settings_screen import SettingsScreen

__all__ = [
    "EditorScreen",
    "SettingsScreen",
]
