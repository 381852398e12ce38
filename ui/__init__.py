from pathlib import Path

# Kivy language rules for every screen, shipped inside the package.
KV_FILE = Path(__file__).resolve().parent / "main.kv"
