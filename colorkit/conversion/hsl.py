# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
RGB <-> HSL codec.

Hue comes out rounded to an integer, saturation and lightness to one
decimal. The bucketed hue formula here is shared by the HSV and HWB
codecs.
"""

from __future__ import annotations

from colorkit.schema import HslColor, RgbColor
from colorkit.utils.numbers import clamp0100, clamp0360, round_to_1, round_to_byte


def hue_fraction(r: float, g: float, b: float, high: float, chroma: float) -> float:
    """
    Hue as a fraction of a full turn (0-1) for normalized channels.

    Args:
        r, g, b: Channels in 0-1
        high: The largest of the three channels
        chroma: ``high - low``; must be non-zero
    """
    if high == r:
        h = (g - b) / chroma + (6 if g < b else 0)
    elif high == g:
        h = (b - r) / chroma + 2
    else:
        h = (r - g) / chroma + 4
    return h / 6


def rgb_to_hsl(rgb: RgbColor) -> HslColor:
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2

    h = s = 0.0
    if high != low:
        d = high - low
        s = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
        h = hue_fraction(r, g, b, high, d)

    return HslColor(
        h=round_to_byte(clamp0360(h * 360)),
        s=round_to_1(clamp0100(s * 100)),
        l=round_to_1(clamp0100(lightness * 100)),
        a=rgb.a,
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HslColor) -> RgbColor:
    h = hsl.h / 360
    s = hsl.s / 100
    lightness = hsl.l / 100

    if s == 0:
        r = g = b = lightness
    else:
        q = lightness * (1 + s) if lightness < 0.5 else lightness + s - lightness * s
        p = 2 * lightness - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RgbColor(
        round_to_byte(r * 255),
        round_to_byte(g * 255),
        round_to_byte(b * 255),
        hsl.a,
    )
