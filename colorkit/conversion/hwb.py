# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""RGB <-> HWB (hue, whiteness, blackness) codec."""

from __future__ import annotations

import math

from colorkit.conversion.hsl import hue_fraction
from colorkit.schema import HwbColor, RgbColor
from colorkit.utils.numbers import clamp0100, round_to_1, round_to_byte


def rgb_to_hwb(rgb: RgbColor) -> HwbColor:
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    whiteness = min(r, g, b)
    value = max(r, g, b)

    h = 0.0 if value == whiteness else hue_fraction(r, g, b, value, value - whiteness)

    return HwbColor(
        h=round_to_1(h * 360),
        w=round_to_1(clamp0100(whiteness * 100)),
        b=round_to_1(clamp0100((1 - value) * 100)),
        a=rgb.a,
    )


# Pure hue per 60 degree sector; "f" rises and "p" (1 - f) falls across it
_HWB_SECTORS = (
    (1, "f", 0),
    ("p", 1, 0),
    (0, 1, "f"),
    (0, "p", 1),
    ("f", 0, 1),
    (1, 0, "p"),
)


def hwb_to_rgb(hwb: HwbColor) -> RgbColor:
    """
    Convert HWB to RGB.

    Whiteness and blackness summing past 100% are scaled down
    proportionally so that ``w + b == 1`` (a gray).
    """
    h = hwb.h / 360
    w = hwb.w / 100
    bk = hwb.b / 100

    if w + bk > 1:
        scale = 1 / (w + bk)
        w *= scale
        bk *= scale

    i = math.floor(h * 6)
    f = h * 6 - i
    ramp = {"f": f, "p": 1 - f}
    pure = [ramp[part] if isinstance(part, str) else part for part in _HWB_SECTORS[i % 6]]

    r, g, b = (channel * (1 - w - bk) + w for channel in pure)
    return RgbColor(
        round_to_byte(r * 255),
        round_to_byte(g * 255),
        round_to_byte(b * 255),
        hwb.a,
    )
