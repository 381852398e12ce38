import json

from backend import settings as app_settings
from backend.line_endings import LineEndingMode
from backend.settings import EditorPreferences


def test_defaults_written_on_first_load(isolated_settings):
    assert app_settings.get_value("line_ending") == "LF"
    assert app_settings.get_value("license_accepted") is False
    assert isolated_settings.exists()
    with isolated_settings.open() as fh:
        keys = [item["key"] for item in json.load(fh)]
    assert keys == ["line_ending", "theme", "font", "font_size", "license_accepted"]


def test_set_value_persists(isolated_settings):
    app_settings.set_value("theme", "paper")
    app_settings.set_settings_path(isolated_settings)  # drop the cache
    assert app_settings.get_value("theme") == "paper"


def test_set_value_adds_unknown_key():
    app_settings.set_value("extra", 3)
    assert app_settings.get_value("extra") == 3


def test_missing_keys_filled_from_defaults(isolated_settings):
    isolated_settings.parent.mkdir(parents=True)
    isolated_settings.write_text(json.dumps([{"key": "theme", "value": "wood", "type": "choice"}]))
    assert app_settings.get_value("theme") == "wood"
    assert app_settings.get_value("font_size") == 16


def test_corrupt_file_replaced_with_defaults(isolated_settings):
    isolated_settings.parent.mkdir(parents=True)
    isolated_settings.write_text("{not json")
    assert app_settings.get_value("theme") == "black"
    with isolated_settings.open() as fh:
        assert isinstance(json.load(fh), list)


def test_default_preferences():
    assert app_settings.get_preferences() == EditorPreferences()


def test_preferences_from_stored_values():
    app_settings.set_value("line_ending", "CRLF")
    app_settings.set_value("theme", "cute")
    app_settings.set_value("font", "gentium")
    app_settings.set_value("font_size", "20")
    assert app_settings.get_preferences() == EditorPreferences(
        line_ending=LineEndingMode.CRLF, theme="cute", font="gentium", font_size=20
    )


def test_legacy_numeric_line_ending():
    app_settings.set_value("line_ending", "1")
    assert app_settings.get_preferences().line_ending is LineEndingMode.CR


def test_invalid_values_fall_back():
    app_settings.set_value("line_ending", "EBCDIC")
    app_settings.set_value("theme", "neon")
    app_settings.set_value("font", "comic")
    app_settings.set_value("font_size", "huge")
    assert app_settings.get_preferences() == EditorPreferences()
