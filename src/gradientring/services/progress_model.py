"""Progress value with clock-driven, cancellable animation."""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

from gradientring.services.interpolators import Interpolator, linear

log = logging.getLogger(__name__)

MIN_PROGRESS = 0.0
MAX_PROGRESS = 100.0

ProgressListener = Callable[[float], None]
Clock = Callable[[], float]


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


def clamp_progress(value: float) -> float:
    return max(MIN_PROGRESS, min(MAX_PROGRESS, value))


@dataclass(frozen=True)
class Animation:
    """An in-flight transition.  The model is idle when it holds none."""
    from_value: float
    to_value: float
    start_time: float
    duration_ms: float
    interpolator: Interpolator

    def value_at(self, now: float) -> tuple[float, bool]:
        """Return ``(value, finished)`` at clock time *now*."""
        t = (now - self.start_time) / self.duration_ms
        t = max(0.0, min(1.0, t))
        if t >= 1.0:
            return self.to_value, True
        fraction = self.interpolator(t)
        # Overshooting easings must not leave [0, 100]
        value = self.from_value + (self.to_value - self.from_value) * fraction
        return clamp_progress(value), False


class ProgressModel:
    """Owns the current/target progress and the animation state machine.

    The host pumps :meth:`tick` once per frame while :attr:`is_animating`
    is true.  Listeners receive the new current value after every change.
    """

    def __init__(self, duration_ms: int = 1500,
                 interpolator: Interpolator = linear,
                 clock: Optional[Clock] = None):
        self._clock = clock or monotonic_ms
        self._current = 0.0
        self._target = 0.0
        self._animation: Animation | None = None
        self._listeners: list[ProgressListener] = []
        self.duration_ms = duration_ms
        self.interpolator = interpolator

    # ── State ─────────────────────────────────────────────────────

    @property
    def current(self) -> float:
        return self._current

    @property
    def target(self) -> float:
        return self._target

    @property
    def is_animating(self) -> bool:
        return self._animation is not None

    @property
    def animation(self) -> Animation | None:
        return self._animation

    # ── Listeners ─────────────────────────────────────────────────

    def on_change(self, callback: ProgressListener) -> ProgressListener:
        self._listeners.append(callback)
        return callback

    def remove_listener(self, callback: ProgressListener):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self):
        for callback in list(self._listeners):
            callback(self._current)

    # ── Mutation ──────────────────────────────────────────────────

    def set_progress(self, value: float, animate: bool = False,
                     now: Optional[float] = None):
        """Jump to *value*, or start animating towards it.

        Values outside [0, 100] are clamped; NaN is ignored.  Starting an
        animation replaces any animation already running.
        """
        value = float(value)
        if math.isnan(value):
            log.warning("Ignoring NaN progress value")
            return
        value = clamp_progress(value)

        if not animate or self.duration_ms <= 0:
            self._animation = None
            self._current = self._target = value
            self._notify()
            return

        start = self._clock() if now is None else now
        self._animation = Animation(
            from_value=self._current,
            to_value=value,
            start_time=start,
            duration_ms=float(self.duration_ms),
            interpolator=self.interpolator,
        )
        self._target = value
        log.debug("Animating progress %.2f -> %.2f over %d ms",
                  self._current, value, self.duration_ms)

    def tick(self, now: Optional[float] = None) -> bool:
        """Advance the running animation to *now*.

        Returns False when idle, so repeated ticks after completion
        change nothing.
        """
        anim = self._animation
        if anim is None:
            return False
        value, finished = anim.value_at(self._clock() if now is None else now)
        if finished:
            self._animation = None
            self._current = self._target
        else:
            self._current = value
        self._notify()
        return True

    def cancel(self):
        """Stop the running animation where it stands."""
        if self._animation is None:
            return
        self._animation = None
        self._target = self._current
