"""Style settings: load ~/.config/gradientring/style.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

from gradientring.services.config import RingConfig

log = logging.getLogger(__name__)

_SETTINGS_FILE = Path.home() / ".config" / "gradientring" / "style.json"

# Keyed by style attribute name, see config.ATTRIBUTE_ALIASES
DEFAULTS: dict[str, Any] = {
    # Colors
    "progressColor": "#FF0000FF",
    "progressBackgroundColor": "#FFFFFFFF",
    "gradientStartColor": "#FF0000FF",
    "gradientEndColor": "#FF00FF00",

    # Geometry
    "progressWidth": 50.0,
    "startAngel": 270.0,

    # Animation
    "progressAnimDuration": 1500,
    "progressAnimInterpolator": "linear",
}


def load_style(path: Union[str, Path]) -> dict[str, Any]:
    """Read a JSON style file; returns an empty dict if it is unusable."""
    path = Path(path)
    try:
        data = json.loads(path.read_text("utf-8"))
    except (OSError, ValueError) as exc:
        log.warning("Could not read style file %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        log.warning("Style file %s does not contain an object", path)
        return {}
    return data


class Settings:
    """Ring style backed by a JSON file."""

    _instance: Settings | None = None

    def __init__(self):
        self._data: dict[str, Any] = dict(DEFAULTS)
        self._load()

    @classmethod
    def get(cls) -> Settings:
        if cls._instance is None:
            cls._instance = Settings()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        cls._instance = None

    # ── Public API ────────────────────────────────────────────────

    def update(self, values: dict[str, Any]):
        self._data.update(values)

    def to_config(self) -> RingConfig:
        return RingConfig.from_mapping(self._data)

    # ── Private ───────────────────────────────────────────────────

    def _load(self):
        if _SETTINGS_FILE.exists():
            self._data.update(load_style(_SETTINGS_FILE))
