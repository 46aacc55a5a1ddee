"""Gradient progress ring: a circular progress indicator with a sweeping gradient head.

SPDX-License-Identifier: GPL-3.0-or-later
"""

APP_ID = "io.github.gradientring.GradientRing"
__version__ = "0.1.0"
