"""Persistent JSON config helpers.

Stores the default notes directory, UI theme, and file-list pane width.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazynotes"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_NOTES_SUBDIR = "data"
DEFAULT_LEFT_PANE_PERCENT = 30.0


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_left_pane_percent() -> float:
    """Read the file-list width percentage, constrained to (0, 100)."""
    value = load_config().get("left_pane_percent")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_LEFT_PANE_PERCENT
    if value <= 0 or value >= 100:
        return DEFAULT_LEFT_PANE_PERCENT
    return float(value)


def save_left_pane_percent(percent: float) -> None:
    config = load_config()
    config["left_pane_percent"] = round(max(1.0, min(99.0, float(percent))), 2)
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_notes_dir() -> Path | None:
    """Return the configured notes directory, expanded, or ``None``."""
    value = load_config().get("notes_dir")
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value.strip()).expanduser()


def save_notes_dir(notes_dir: Path) -> None:
    config = load_config()
    config["notes_dir"] = str(notes_dir)
    save_config(config)


def resolve_notes_dir(cli_path: str | None, cwd: Path | None = None) -> Path:
    """Pick the notes directory: CLI argument, then config, then ``./data``."""
    if cli_path:
        return Path(cli_path).expanduser()
    configured = load_notes_dir()
    if configured is not None:
        return configured
    base = cwd if cwd is not None else Path.cwd()
    return base / DEFAULT_NOTES_SUBDIR
