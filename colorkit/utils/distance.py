# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Color distance metrics.

``color_distance`` is plain Euclidean distance over RGB channels.
``delta_e`` is Euclidean distance in approximate L*a*b* (CIE76-style),
where ~2.3 is a just-noticeable difference.
"""

from __future__ import annotations

import numpy as np

from colorkit.core import ColorInput, require_color
from colorkit.utils.colorspace import rgb255_to_lab


def color_distance(color1: ColorInput, color2: ColorInput) -> float:
    """Euclidean RGB distance (0 to ~441.67). Alpha is ignored."""
    c1 = require_color(color1)
    c2 = require_color(color2)
    delta = np.array([c1.r - c2.r, c1.g - c2.g, c1.b - c2.b], dtype=np.float64)
    return float(np.sqrt(np.sum(delta ** 2)))


def delta_e(color1: ColorInput, color2: ColorInput) -> float:
    """Approximate CIE76 Delta E between two colors. Alpha is ignored."""
    c1 = require_color(color1)
    c2 = require_color(color2)
    delta = rgb255_to_lab((c1.r, c1.g, c1.b)) - rgb255_to_lab((c2.r, c2.g, c2.b))
    return float(np.sqrt(np.sum(delta ** 2)))
