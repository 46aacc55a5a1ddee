"""Gradient progress ring demo application entry point."""

from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import (
    QApplication, QCheckBox, QHBoxLayout, QPushButton, QSlider, QVBoxLayout, QWidget,
)
from PySide6.QtCore import Qt

from gradientring import APP_ID
from gradientring.services.settings import Settings, load_style
from gradientring.ui.progress_ring import GradientProgressRing

log = logging.getLogger(__name__)


class DemoWindow(QWidget):
    """A ring driven by a slider, with an animate toggle."""

    def __init__(self, settings: Settings, parent=None):
        super().__init__(parent)
        self.setWindowTitle(self.tr("Gradient Progress Ring"))

        self.ring = GradientProgressRing(self, config=settings.to_config())
        self.ring.setMinimumSize(240, 240)

        self.slider = QSlider(Qt.Horizontal, self)
        self.slider.setRange(0, 100)
        self.slider.valueChanged.connect(self._on_slider)

        self.animate_check = QCheckBox(self.tr("Animate"), self)
        self.animate_check.setChecked(True)

        self.swap_button = QPushButton(self.tr("Swap gradient"), self)
        self.swap_button.clicked.connect(self._swap_gradient)

        controls = QHBoxLayout()
        controls.addWidget(self.slider, 1)
        controls.addWidget(self.animate_check)
        controls.addWidget(self.swap_button)

        layout = QVBoxLayout(self)
        layout.addWidget(self.ring, 1)
        layout.addLayout(controls)

    def _on_slider(self, value: int):
        self.ring.set_progress(float(value), animate=self.animate_check.isChecked())

    def _swap_gradient(self):
        cfg = self.ring.config
        self.ring.update_gradient_color(cfg.gradient_end_color, cfg.gradient_start_color)


class GradientRingApp:
    """Main application wrapper."""

    def __init__(self, argv: list[str]):
        self._argv = argv
        self._qt_app = QApplication(argv)
        self._qt_app.setApplicationName("Gradient Ring")
        self._qt_app.setDesktopFileName(APP_ID)

    def run(self) -> int:
        settings = Settings.get()

        # Optional style file overrides the stored style
        if len(self._argv) > 1:
            style_path = self._argv[1]
            log.info("Loading style from %s", style_path)
            settings.update(load_style(style_path))

        self._win = DemoWindow(settings)
        self._win.show()
        return self._qt_app.exec()


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    app = GradientRingApp(sys.argv)
    sys.exit(app.run())


if __name__ == "__main__":
    main()
