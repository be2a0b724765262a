# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
RGB <-> HSV codec, plus the analytic HSV <-> HSL cross-conversions.

Unlike HSL, every HSV component (hue included) is rounded to one
decimal.
"""

from __future__ import annotations

import math

from colorkit.conversion.hsl import hue_fraction
from colorkit.schema import HslColor, HsvColor, RgbColor
from colorkit.utils.numbers import clamp0100, round_to_1, round_to_byte


def rgb_to_hsv(rgb: RgbColor) -> HsvColor:
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    high = max(r, g, b)
    low = min(r, g, b)
    d = high - low

    s = 0.0 if high == 0 else d / high
    h = 0.0 if high == low else hue_fraction(r, g, b, high, d)

    return HsvColor(
        h=round_to_1(h * 360),
        s=round_to_1(s * 100),
        v=round_to_1(high * 100),
        a=rgb.a,
    )


# Sector index -> which of (v, t, p, q) feeds r, g, b
_HSV_SECTORS = (
    ("v", "t", "p"),
    ("q", "v", "p"),
    ("p", "v", "t"),
    ("p", "q", "v"),
    ("t", "p", "v"),
    ("v", "p", "q"),
)


def hsv_to_rgb(hsv: HsvColor) -> RgbColor:
    h = hsv.h / 360
    s = hsv.s / 100
    v = hsv.v / 100

    i = math.floor(h * 6)
    f = h * 6 - i
    values = {
        "v": v,
        "p": v * (1 - s),
        "q": v * (1 - f * s),
        "t": v * (1 - (1 - f) * s),
    }
    r, g, b = (values[key] for key in _HSV_SECTORS[i % 6])

    return RgbColor(
        round_to_byte(r * 255),
        round_to_byte(g * 255),
        round_to_byte(b * 255),
        hsv.a,
    )


def hsv_to_hsl(hsv: HsvColor) -> HslColor:
    s = hsv.s / 100
    v = hsv.v / 100

    lightness = v * (1 - s / 2)
    s_hsl = 0.0 if lightness in (0, 1) else (v - lightness) / min(lightness, 1 - lightness)

    return HslColor(
        h=hsv.h,
        s=round_to_1(clamp0100(s_hsl * 100)),
        l=round_to_1(clamp0100(lightness * 100)),
        a=hsv.a,
    )


def hsl_to_hsv(hsl: HslColor) -> HsvColor:
    s = hsl.s / 100
    lightness = hsl.l / 100

    v = lightness + s * min(lightness, 1 - lightness)
    s_hsv = 0.0 if v == 0 else 2 * (1 - lightness / v)

    return HsvColor(
        h=hsl.h,
        s=round_to_1(clamp0100(s_hsv * 100)),
        v=round_to_1(clamp0100(v * 100)),
        a=hsl.a,
    )
