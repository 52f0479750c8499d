"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/Countdown/settings.json

Usage::

    settings = load_settings()
    settings.always_on_top = True
    save_settings(settings)

The countdown duration is fixed and is not a setting.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .timer.engine import TICK_INTERVAL_MS


logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "Countdown"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    tick_interval_ms: int = TICK_INTERVAL_MS

    # ── logging ───────────────────────────────────────────────────────
    log_level: str = "INFO"

    # ── window ────────────────────────────────────────────────────────
    always_on_top: bool = False
    window_width: int = 360
    window_height: int = 240


def load_settings(path: Path = SETTINGS_PATH) -> Settings:
    """Load settings from disk, falling back to defaults."""
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        defaults = {f.name: f.default for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in defaults}
    except (OSError, ValueError, AttributeError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return Settings()

    valid = {}
    for key, value in filtered.items():
        # Exact type match: bool is not accepted where an int is expected
        if type(value) is not type(defaults[key]):
            logger.warning(
                "Ignoring setting %s=%r in %s: expected %s",
                key, value, path, type(defaults[key]).__name__,
            )
            continue
        valid[key] = value
    return Settings(**valid)


def save_settings(settings: Settings, path: Path = SETTINGS_PATH) -> None:
    """Write settings to disk as JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
