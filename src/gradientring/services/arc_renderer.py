"""Arc geometry for the gradient progress ring.

Turns (bounds, progress, config) into three stroke-arc draw commands:

  track     full circle in the track color, slightly thinner
  progress  solid arc from the start angle, round caps
  gradient  a 60° window trailing the arc tip, painted with a sweep
            gradient whose rotation follows the tip

Angles are in degrees, 0 = 3 o'clock, clockwise positive.  Nothing in
here raises; degenerate bounds simply produce no commands.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Protocol

from gradientring.services.config import RingConfig
from gradientring.services.progress_model import MAX_PROGRESS, clamp_progress

log = logging.getLogger(__name__)

FULL_ANGLE = 360.0
FULL_PROGRESS = MAX_PROGRESS
GRADIENT_SPAN = 60.0
TRACK_INSET = 2.0


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> tuple[float, float]:
        return (self.left + self.right) / 2, (self.top + self.bottom) / 2


@dataclass(frozen=True)
class SweepShader:
    """Sweep gradient with evenly spaced stops, rotated about its center."""
    cx: float
    cy: float
    colors: tuple[str, ...]
    rotation: float = 0.0

    @property
    def positions(self) -> tuple[float, ...]:
        last = len(self.colors) - 1
        return tuple(i / last for i in range(len(self.colors)))

    def rotated(self, degrees: float) -> SweepShader:
        return replace(self, rotation=degrees % FULL_ANGLE)


@dataclass(frozen=True)
class Paint:
    stroke_width: float
    color: Optional[str] = None
    shader: Optional[SweepShader] = None
    round_cap: bool = False


@dataclass(frozen=True)
class ArcCommand:
    name: str  # "track", "progress", "gradient"
    oval: Rect
    start_angle: float
    sweep_angle: float
    paint: Paint


class Canvas(Protocol):
    def draw_arc(self, oval: Rect, start_angle: float, sweep_angle: float,
                 paint: Paint) -> None: ...


# ── Pure geometry ─────────────────────────────────────────────────

def sweep_angle(progress: float) -> float:
    return progress / FULL_PROGRESS * FULL_ANGLE


def gradient_ramp(start: str, end: str) -> tuple[str, ...]:
    """Seven stops: one start→end transition, then plateaus."""
    return (start, end, end, end, start, start, start)


def gradient_window(start_angle: float, sweep: float) -> tuple[float, float]:
    """Return ``(start, sweep)`` of the gradient head for a progress sweep."""
    if sweep <= GRADIENT_SPAN:
        head_start = start_angle
    else:
        head_start = start_angle + sweep - GRADIENT_SPAN
    return max(head_start, start_angle), min(sweep, GRADIENT_SPAN)


def shader_rotation(start_angle: float, sweep: float) -> float:
    """Rotation that lines the ramp's transition band up with the arc tip."""
    offset = start_angle + sweep
    if offset > GRADIENT_SPAN:
        return (offset - GRADIENT_SPAN) % FULL_ANGLE
    return 0.0


def ring_oval(width: float, height: float, progress_width: float) -> Optional[Rect]:
    """Square bounding box of the stroke centerline, or None if degenerate."""
    if width <= 0 or height <= 0:
        return None
    cx, cy = width / 2, height / 2
    radius = min(width, height) / 2 - progress_width / 2
    if radius <= 0:
        return None
    return Rect(cx - radius, cy - radius, cx + radius, cy + radius)


# ── Cache ─────────────────────────────────────────────────────────

class GeometryCache:
    """Oval and base shader, each keyed on the inputs it depends on."""

    INPUT_FIELDS = frozenset({"progress_width", "gradient_start_color", "gradient_end_color"})

    def __init__(self):
        self._oval_key: tuple | None = None
        self._oval: Rect | None = None
        self._shader_key: tuple | None = None
        self._shader: SweepShader | None = None

    def oval(self, width: float, height: float, config: RingConfig) -> Optional[Rect]:
        key = (width, height, config.progress_width)
        if key != self._oval_key:
            self._oval = ring_oval(width, height, config.progress_width)
            self._oval_key = key
            log.debug("Rebuilt ring oval for %sx%s: %s", width, height, self._oval)
        return self._oval

    def shader(self, width: float, height: float, config: RingConfig) -> SweepShader:
        key = (width, height, config.gradient_start_color, config.gradient_end_color)
        if key != self._shader_key:
            self._shader = SweepShader(
                width / 2, height / 2,
                gradient_ramp(config.gradient_start_color, config.gradient_end_color),
            )
            self._shader_key = key
            log.debug("Rebuilt sweep shader %s", self._shader.colors)
        return self._shader

    def invalidate(self):
        self._oval_key = self._shader_key = None
        self._oval = self._shader = None

    def invalidate_for(self, changed: Iterable[str]):
        """Drop everything if *changed* touches a cached input."""
        if self.INPUT_FIELDS.intersection(changed):
            self.invalidate()


# ── Renderer ──────────────────────────────────────────────────────

class ArcRenderer:
    """Builds and dispatches the ring's draw commands."""

    def __init__(self, cache: Optional[GeometryCache] = None):
        self.cache = cache or GeometryCache()

    def commands(self, width: float, height: float, progress: float,
                 config: RingConfig) -> list[ArcCommand]:
        oval = self.cache.oval(width, height, config)
        if oval is None:
            return []

        start = config.start_angle
        sweep = sweep_angle(clamp_progress(progress))
        head_start, head_sweep = gradient_window(start, sweep)
        shader = self.cache.shader(width, height, config).rotated(
            shader_rotation(start, sweep))

        track_paint = Paint(max(config.progress_width - TRACK_INSET, 0.0),
                            color=config.track_color)
        progress_paint = Paint(config.progress_width, color=config.progress_color,
                               round_cap=True)
        gradient_paint = Paint(config.progress_width, shader=shader, round_cap=True)

        return [
            ArcCommand("track", oval, start % FULL_ANGLE, FULL_ANGLE, track_paint),
            ArcCommand("progress", oval, start % FULL_ANGLE, sweep, progress_paint),
            ArcCommand("gradient", oval, head_start % FULL_ANGLE, head_sweep, gradient_paint),
        ]

    def render(self, canvas: Canvas, width: float, height: float,
               progress: float, config: RingConfig) -> int:
        """Draw the ring on *canvas*; returns the number of arcs drawn."""
        drawn = 0
        for cmd in self.commands(width, height, progress, config):
            if cmd.sweep_angle <= 0:
                continue
            canvas.draw_arc(cmd.oval, cmd.start_angle, cmd.sweep_angle, cmd.paint)
            drawn += 1
        return drawn
