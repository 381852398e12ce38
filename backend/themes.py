"""Themes, fonts and font sizes offered in the preferences screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from backend import ASSETS_DIR

Color = Tuple[float, float, float, float]

FONTS_DIR = ASSETS_DIR / "fonts"


@dataclass(frozen=True)
class Theme:
    name: str
    background: Color
    foreground: Color
    cursor: Color


@dataclass(frozen=True)
class Font:
    name: str
    filename: str

    @property
    def path(self):
        return FONTS_DIR / self.filename


THEMES: Dict[str, Theme] = {
    "black": Theme("Black", (0.05, 0.05, 0.05, 1), (1, 1, 1, 1), (1, 1, 1, 1)),
    "wood": Theme("Wood", (0.36, 0.23, 0.13, 1), (1, 1, 1, 1), (1, 0.9, 0.7, 1)),
    "paper": Theme("Paper", (0.96, 0.94, 0.87, 1), (0, 0, 0, 1), (0.2, 0.2, 0.2, 1)),
    "cute": Theme("Cute", (0.35, 0.1, 0.3, 1), (1, 1, 1, 1), (1, 0.47, 1, 1)),
}

FONTS: Dict[str, Font] = {
    "cosmetica": Font("Cosmetica", "mgopencosmeticaregular.ttf"),
    "junicode": Font("Junicode", "junicoderegular.ttf"),
    "ubuntu": Font("Ubuntu", "ubunturegular.ttf"),
    "gentium": Font("Gentium", "genbkbasr.ttf"),
}

FONT_SIZES: List[int] = [10, 12, 14, 16, 18, 20, 24, 28, 32]

DEFAULT_THEME = "black"
DEFAULT_FONT = "cosmetica"
DEFAULT_FONT_SIZE = 16


def get_theme(theme_id: str) -> Theme:
    """Return the theme for ``theme_id`` or the default theme."""
    return THEMES.get(theme_id, THEMES[DEFAULT_THEME])


def get_font(font_id: str) -> Font:
    """Return the font for ``font_id`` or the default font."""
    return FONTS.get(font_id, FONTS[DEFAULT_FONT])
