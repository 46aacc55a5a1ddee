"""Shared fixtures for gradient ring tests."""
import os
import sys
from pathlib import Path

import pytest

# Ensure src is on path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms
        return self.now


class RecordingCanvas:
    """Canvas that remembers every draw_arc call."""

    def __init__(self):
        self.arcs = []

    def draw_arc(self, oval, start_angle, sweep_angle, paint):
        self.arcs.append((oval, start_angle, sweep_angle, paint))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture(scope="session")
def qapp():
    pytest.importorskip("PySide6")
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
