from pathlib import Path
import sys
import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from backend import settings as app_settings
from backend.location import Location


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path):
    """Point the settings store at a throwaway file for every test."""
    original = app_settings.SETTINGS_PATH
    path = tmp_path / "data" / "settings.json"
    app_settings.set_settings_path(path)
    yield path
    app_settings.set_settings_path(original)


@pytest.fixture
def note(tmp_path: Path) -> Location:
    """Location of a not-yet-existing note inside ``tmp_path``."""
    return Location.from_path(tmp_path / "note.txt")
