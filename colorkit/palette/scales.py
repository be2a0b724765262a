# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Ordered color sequences: tints, shades, tones and two-color scales.

Every sequence starts with the input color itself.
"""

from __future__ import annotations

from colorkit.core import Color, ColorInput, require_color
from colorkit.manipulation import darken, lighten
from colorkit.mixing import mix, tone


def generate_tints(color: ColorInput, count: int = 11) -> list[Color]:
    """
    ``count`` colors from the input up to white, by HSL lightening.

    The last entry is forced to exactly white (keeping the input's alpha)
    so that round-trip drift never leaves it off-white.
    """
    c = require_color(color)
    if count < 2:
        return [c]

    step = 100 / (count - 1)
    tints = [c] + [lighten(c, step * i) for i in range(1, count)]
    tints[-1] = Color(255, 255, 255, c.a)
    return tints


def generate_shades(color: ColorInput, count: int = 11) -> list[Color]:
    """``count`` colors from the input down to black, by HSL darkening."""
    c = require_color(color)
    if count < 2:
        return [c]

    step = 100 / (count - 1)
    return [c] + [darken(c, step * i) for i in range(1, count)]


def generate_tones(color: ColorInput, count: int) -> list[Color]:
    """The input plus ``count - 1`` steps of ``100 / count`` percent toward mid-gray."""
    c = require_color(color)
    if count < 2:
        return [c]

    step = 100 / count
    return [c] + [tone(c, step * i) for i in range(1, count)]


def generate_scale(start: ColorInput, end: ColorInput, count: int) -> list[Color]:
    """
    ``count`` colors evenly mixed from ``start`` to ``end`` inclusive.

    Fewer than two requested colors yields just ``[start]``.
    """
    c1 = require_color(start)
    c2 = require_color(end)
    if count < 2:
        return [c1]

    return [mix(c1, c2, i / (count - 1)) for i in range(count)]
