"""Ring configuration as an immutable value updated by patches."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

from gradientring.services.colors import parse_color
from gradientring.services.interpolators import Interpolator, get_interpolator, linear

log = logging.getLogger(__name__)

# Style attribute names → config fields
ATTRIBUTE_ALIASES: dict[str, str] = {
    "progressColor": "progress_color",
    "progressBackgroundColor": "track_color",
    "progressWidth": "progress_width",
    "startAngel": "start_angle",
    "startAngle": "start_angle",
    "gradientStartColor": "gradient_start_color",
    "gradientEndColor": "gradient_end_color",
    "progressAnimDuration": "animation_duration_ms",
    "progressAnimInterpolator": "interpolator",
}

_COLOR_FIELDS = ("progress_color", "track_color", "gradient_start_color", "gradient_end_color")


@dataclass(frozen=True)
class RingConfig:
    """Everything the renderer and the animation need besides the progress value."""
    progress_width: float = 50.0
    start_angle: float = 270.0  # degrees, 0 = 3 o'clock, clockwise
    progress_color: str = "#FF0000FF"
    track_color: str = "#FFFFFFFF"
    gradient_start_color: str = "#FF0000FF"
    gradient_end_color: str = "#FF00FF00"
    animation_duration_ms: int = 1500
    interpolator: Interpolator = field(default=linear, compare=False)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> RingConfig:
        config, _ = cls().updated(**mapping)
        return config

    def updated(self, **patch: Any) -> tuple[RingConfig, frozenset[str]]:
        """Apply *patch* and return ``(new_config, changed_field_names)``.

        Keys may be field names or style attribute names.  Invalid values
        are logged and skipped; the rest of the patch still applies.
        """
        known = {f.name for f in fields(self)}
        clean: dict[str, Any] = {}
        for key, value in patch.items():
            name = ATTRIBUTE_ALIASES.get(key, key)
            if name not in known:
                log.warning("Ignoring unknown ring option %r", key)
                continue
            try:
                clean[name] = _sanitize(name, value)
            except (ValueError, TypeError, KeyError, OverflowError) as exc:
                log.warning("Ignoring %s=%r: %s", key, value, exc)

        changed = frozenset(
            name for name, value in clean.items()
            if _differs(getattr(self, name), value)
        )
        if not changed:
            return self, changed
        return replace(self, **{name: clean[name] for name in changed}), changed


def _sanitize(name: str, value: Any) -> Any:
    if name in _COLOR_FIELDS:
        return parse_color(value)
    if name == "progress_width":
        width = float(value)
        if not math.isfinite(width) or width <= 0:
            raise ValueError("progress width must be a positive number")
        return width
    if name == "start_angle":
        angle = float(value)
        if not math.isfinite(angle):
            raise ValueError("start angle must be finite")
        return angle
    if name == "animation_duration_ms":
        return max(0, int(value))
    if name == "interpolator":
        return get_interpolator(value)
    return value


def _differs(old: Any, new: Any) -> bool:
    if callable(old) or callable(new):
        return old is not new
    return old != new
