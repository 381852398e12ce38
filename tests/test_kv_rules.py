from pathlib import Path

import ui

SCREENS_DIR = Path(ui.__file__).resolve().parent / "screens"


def test_editor_padding_only_set_in_kv_rules():
    rules = ui.KV_FILE.read_text(encoding="utf-8")
    assert "padding: [dp(15), dp(15), dp(15), dp(15)]" in rules
    for module in SCREENS_DIR.glob("*.py"):
        assert "padding" not in module.read_text(encoding="utf-8"), module.name
