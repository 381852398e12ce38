from backend import themes


def test_unknown_ids_fall_back_to_defaults():
    assert themes.get_theme("neon") == themes.THEMES[themes.DEFAULT_THEME]
    assert themes.get_font("comic") == themes.FONTS[themes.DEFAULT_FONT]


def test_catalogue_contents():
    assert list(themes.THEMES) == ["black", "wood", "paper", "cute"]
    assert list(themes.FONTS) == ["cosmetica", "junicode", "ubuntu", "gentium"]
    assert themes.DEFAULT_FONT_SIZE in themes.FONT_SIZES


def test_font_path_points_into_assets():
    font = themes.get_font("ubuntu")
    assert font.path == themes.FONTS_DIR / "ubunturegular.ttf"
