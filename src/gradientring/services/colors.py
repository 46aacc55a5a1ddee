"""Color parsing: normalize config colors to ``#AARRGGBB`` strings."""

from __future__ import annotations

import re
from typing import Union

ColorLike = Union[str, int, tuple]

# Named colors understood by Android's Color.parseColor()
NAMED_COLORS: dict[str, int] = {
    "black": 0xFF000000,
    "darkgray": 0xFF444444,
    "darkgrey": 0xFF444444,
    "gray": 0xFF888888,
    "grey": 0xFF888888,
    "lightgray": 0xFFCCCCCC,
    "lightgrey": 0xFFCCCCCC,
    "white": 0xFFFFFFFF,
    "red": 0xFFFF0000,
    "green": 0xFF00FF00,
    "blue": 0xFF0000FF,
    "yellow": 0xFFFFFF00,
    "cyan": 0xFF00FFFF,
    "magenta": 0xFFFF00FF,
    "aqua": 0xFF00FFFF,
    "fuchsia": 0xFFFF00FF,
    "lime": 0xFF00FF00,
    "maroon": 0xFF800000,
    "navy": 0xFF000080,
    "olive": 0xFF808000,
    "purple": 0xFF800080,
    "silver": 0xFFC0C0C0,
    "teal": 0xFF008080,
    "transparent": 0x00000000,
}

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def _format_argb(argb: int) -> str:
    return f"#{argb & 0xFFFFFFFF:08X}"


def parse_color(value: ColorLike) -> str:
    """Return *value* as a canonical ``#AARRGGBB`` string.

    Accepts ``#RGB``, ``#RRGGBB``, ``#AARRGGBB``, a named color, an
    ``(r, g, b)`` or ``(r, g, b, a)`` tuple, or a 32-bit ARGB integer.
    Raises ValueError for anything else.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a color: {value!r}")

    if isinstance(value, int):
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"ARGB integer out of range: {value:#x}")
        return _format_argb(value)

    if isinstance(value, (tuple, list)):
        if len(value) not in (3, 4):
            raise ValueError(f"Color tuple needs 3 or 4 components: {value!r}")
        parts = [int(c) for c in value]
        if any(not 0 <= c <= 255 for c in parts):
            raise ValueError(f"Color component out of range: {value!r}")
        r, g, b = parts[:3]
        a = parts[3] if len(parts) == 4 else 255
        return _format_argb((a << 24) | (r << 16) | (g << 8) | b)

    if isinstance(value, str):
        text = value.strip()
        named = NAMED_COLORS.get(text.lower())
        if named is not None:
            return _format_argb(named)
        m = _HEX_RE.match(text)
        if not m:
            raise ValueError(f"Unknown color: {value!r}")
        digits = m.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) == 6:
            digits = "FF" + digits
        return "#" + digits.upper()

    raise ValueError(f"Not a color: {value!r}")


def argb_components(color: str) -> tuple[int, int, int, int]:
    """Split a canonical color into ``(a, r, g, b)``."""
    argb = int(parse_color(color)[1:], 16)
    return (argb >> 24) & 0xFF, (argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF
