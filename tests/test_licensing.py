import pytest

from backend.licensing import load_license_text


def test_bundled_license_text():
    text = load_license_text()
    assert "GNU General Public License" in text


def test_missing_license_raises(tmp_path):
    with pytest.raises(OSError):
        load_license_text(tmp_path / "missing.txt")
