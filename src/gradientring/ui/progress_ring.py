"""Circular progress ring with a rotating gradient head.

SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from PySide6.QtWidgets import QWidget
from PySide6.QtCore import Qt, QTimer, QRectF, QPointF, QSize, Signal
from PySide6.QtGui import QPainter, QConicalGradient, QPen, QBrush, QColor

from gradientring.services.arc_renderer import ArcRenderer, Paint, Rect, SweepShader
from gradientring.services.colors import ColorLike, argb_components
from gradientring.services.config import RingConfig
from gradientring.services.progress_model import Clock, ProgressModel

log = logging.getLogger(__name__)

FRAME_INTERVAL_MS = 16


def to_qcolor(color: str) -> QColor:
    a, r, g, b = argb_components(color)
    return QColor(r, g, b, a)


def to_conical_gradient(shader: SweepShader) -> QConicalGradient:
    """Qt sweeps counter-clockwise, so stops are mirrored and the angle negated."""
    grad = QConicalGradient(QPointF(shader.cx, shader.cy), -shader.rotation % 360)
    for pos, color in zip(shader.positions, shader.colors):
        grad.setColorAt(1.0 - pos, to_qcolor(color))
    return grad


class QtCanvas:
    """Executes arc draw commands on a QPainter."""

    def __init__(self, painter: QPainter):
        self._painter = painter

    def draw_arc(self, oval: Rect, start_angle: float, sweep_angle: float,
                 paint: Paint) -> None:
        if paint.shader is not None:
            brush = QBrush(to_conical_gradient(paint.shader))
        else:
            brush = QBrush(to_qcolor(paint.color or "#00000000"))
        cap = Qt.RoundCap if paint.round_cap else Qt.FlatCap
        self._painter.setPen(QPen(brush, paint.stroke_width, Qt.SolidLine, cap))
        self._painter.setBrush(Qt.NoBrush)
        # Qt: 1/16 degree units, counter-clockwise positive
        self._painter.drawArc(
            QRectF(oval.left, oval.top, oval.width, oval.height),
            round(-start_angle * 16), round(-sweep_angle * 16),
        )


class GradientProgressRing(QWidget):
    """Progress ring whose tip carries a sweep-gradient highlight."""

    progressChanged = Signal(float)

    def __init__(self, parent=None, config: Optional[RingConfig] = None,
                 clock: Optional[Clock] = None):
        super().__init__(parent)
        self._config = config or RingConfig()
        self._renderer = ArcRenderer()
        self._model = ProgressModel(
            duration_ms=self._config.animation_duration_ms,
            interpolator=self._config.interpolator,
            clock=clock,
        )
        self._model.on_change(self._on_progress_changed)

        self._timer = QTimer(self)
        self._timer.setInterval(FRAME_INTERVAL_MS)
        self._timer.timeout.connect(self._on_frame)

        self.setMinimumSize(48, 48)

    def sizeHint(self) -> QSize:  # noqa: N802
        return QSize(160, 160)

    # ── Public API ────────────────────────────────────────────────

    @property
    def config(self) -> RingConfig:
        return self._config

    @property
    def model(self) -> ProgressModel:
        return self._model

    @property
    def progress(self) -> float:
        return self._model.current

    def set_progress(self, value: float, animate: bool = False):
        """Set progress (0–100), optionally animating from the current value."""
        self._model.set_progress(value, animate)
        if self._model.is_animating:
            if not self._timer.isActive():
                self._timer.start()
        else:
            self._timer.stop()

    def cancel_animation(self):
        self._model.cancel()
        self._timer.stop()

    def on_change(self, callback: Callable[[float], None]):
        return self._model.on_change(callback)

    def update_configuration(self, **patch: Any) -> frozenset[str]:
        """Apply a config patch; returns the names of fields that changed."""
        self._config, changed = self._config.updated(**patch)
        if not changed:
            return changed
        log.debug("Ring config changed: %s", ", ".join(sorted(changed)))
        if "animation_duration_ms" in changed:
            self._model.duration_ms = self._config.animation_duration_ms
        if "interpolator" in changed:
            self._model.interpolator = self._config.interpolator
        self._renderer.cache.invalidate_for(changed)
        self.update()
        return changed

    def update_gradient_color(self, start: ColorLike, end: ColorLike) -> frozenset[str]:
        return self.update_configuration(gradient_start_color=start, gradient_end_color=end)

    # ── Internals ─────────────────────────────────────────────────

    def _on_frame(self):
        self._model.tick()
        if not self._model.is_animating:
            self._timer.stop()

    def _on_progress_changed(self, value: float):
        self.progressChanged.emit(value)
        self.update()

    # ── Paint ─────────────────────────────────────────────────────

    def paintEvent(self, event):  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        try:
            self._renderer.render(QtCanvas(painter), self.width(), self.height(),
                                  self._model.current, self._config)
        finally:
            painter.end()
