"""Easing functions mapping elapsed fraction to progress fraction.

Every interpolator takes ``t`` in [0, 1].  All of them return 0 at 0 and
1 at 1; ``overshoot`` and ``anticipate`` leave [0, 1] in between.
"""

from __future__ import annotations

import math
from typing import Callable, Union

Interpolator = Callable[[float], float]


def linear(t: float) -> float:
    return t


def accelerate(t: float) -> float:
    return t * t


def decelerate(t: float) -> float:
    return 1.0 - (1.0 - t) * (1.0 - t)


def accelerate_decelerate(t: float) -> float:
    """Slow start and end, fastest in the middle (cosine curve)."""
    return math.cos((t + 1.0) * math.pi) / 2.0 + 0.5


def overshoot(t: float, tension: float = 2.0) -> float:
    """Flings past 1 and settles back."""
    t -= 1.0
    return t * t * ((tension + 1.0) * t + tension) + 1.0


def anticipate(t: float, tension: float = 2.0) -> float:
    """Pulls back below 0 before moving forward."""
    return t * t * ((tension + 1.0) * t - tension)


INTERPOLATORS: dict[str, Interpolator] = {
    "linear": linear,
    "accelerate": accelerate,
    "decelerate": decelerate,
    "accelerate_decelerate": accelerate_decelerate,
    "overshoot": overshoot,
    "anticipate": anticipate,
}


def get_interpolator(value: Union[str, Interpolator]) -> Interpolator:
    """Resolve an interpolator name, or pass a callable through.

    Names are matched case-insensitively and may use ``-`` or ``_``.
    Raises KeyError for an unknown name.
    """
    if callable(value):
        return value
    key = str(value).strip().lower().replace("-", "_")
    if key not in INTERPOLATORS:
        raise KeyError(f"Unknown interpolator: {value!r}")
    return INTERPOLATORS[key]
