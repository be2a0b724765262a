# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Harmony generators.

Each derives related colors from fixed hue-wheel offsets. Complementary,
triadic and monochromatic work in HSL; tetradic, analogous and
split-complementary work in HSV. The input's alpha is carried through.
"""

from __future__ import annotations

import math

from colorkit.conversion import hsl_to_rgb, hsv_to_rgb
from colorkit.core import Color, ColorInput, require_color
from colorkit.schema import HslColor, HsvColor
from colorkit.utils.numbers import clamp0100


def _from_hsl(h: float, s: float, l: float, a: float) -> Color:
    rgb = hsl_to_rgb(HslColor(h, s, l, a))
    return Color(rgb.r, rgb.g, rgb.b, rgb.a)


def _from_hsv(h: float, s: float, v: float, a: float) -> Color:
    rgb = hsv_to_rgb(HsvColor(h, s, v, a))
    return Color(rgb.r, rgb.g, rgb.b, rgb.a)


def _hsv_offsets(c: Color, offsets: tuple[float, ...]) -> list[Color]:
    hsv = c.to_hsv()
    return [_from_hsv((hsv.h + offset) % 360, hsv.s, hsv.v, c.a) for offset in offsets]


def complementary(color: ColorInput) -> list[Color]:
    """The single color opposite on the wheel (HSL hue + 180)."""
    c = require_color(color)
    hsl = c.to_hsl()
    return [_from_hsl((hsl.h + 180) % 360, hsl.s, hsl.l, c.a)]


def triadic(color: ColorInput) -> list[Color]:
    """
    Three colors 120 degrees apart, starting at the input's hue.

    The first entry is rebuilt from HSL, so it may differ from the input
    by a unit of rounding.
    """
    c = require_color(color)
    hsl = c.to_hsl()
    return [_from_hsl((hsl.h + offset) % 360, hsl.s, hsl.l, c.a) for offset in (0, 120, 240)]


def tetradic(color: ColorInput) -> list[Color]:
    """The input plus three colors at +90, +180 and +270 degrees (HSV)."""
    c = require_color(color)
    return [c, *_hsv_offsets(c, (90, 180, 270))]


def split_complementary(color: ColorInput) -> list[Color]:
    """The input plus the two neighbours of its complement (+150, +210)."""
    c = require_color(color)
    return [c, *_hsv_offsets(c, (150, 210))]


def analogous(color: ColorInput, count: int = 3, angle: float = 30) -> list[Color]:
    """
    Neighbouring hues centered on the input.

    Offsets start at ``-floor(count/2)`` steps of ``angle`` and advance one
    step per color, so even counts reach one step further below the input
    hue than above it.

    Args:
        color: Base color
        count: Number of colors requested
        angle: Degrees between neighbours
    """
    c = require_color(color)
    hsv = c.to_hsv()
    half = math.floor(count / 2)
    return [
        _from_hsv((hsv.h + i * angle + 360) % 360, hsv.s, hsv.v, c.a)
        for i in range(-half, count - half)
    ]


def monochromatic(color: ColorInput, count: int) -> list[Color]:
    """
    The input plus ``count`` lightness variations.

    Step ``i`` moves lightness by ``i * 100 / (count + 1)``: down for odd
    ``i``, up for even ``i``, clamped to 0-100.
    """
    c = require_color(color)
    hsl = c.to_hsl()
    step = 100 / (count + 1)

    colors = [c]
    for i in range(1, count + 1):
        direction = 1 if i % 2 == 0 else -1
        lightness = clamp0100(hsl.l + step * i * direction)
        colors.append(_from_hsl(hsl.h, hsl.s, lightness, c.a))
    return colors
