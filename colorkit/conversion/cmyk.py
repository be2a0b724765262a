# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""RGB <-> CMYK codec. CMYK has no alpha; results are always opaque."""

from __future__ import annotations

from colorkit.schema import CmykColor, RgbColor
from colorkit.utils.numbers import clamp0100, round_to_1, round_to_byte


def rgb_to_cmyk(rgb: RgbColor) -> CmykColor:
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    k = 1 - max(r, g, b)

    if (r == 0 and g == 0 and b == 0) or k == 1:
        return CmykColor(c=0, m=0, y=0, k=100)

    def ink(channel: float) -> float:
        return round_to_1(clamp0100((1 - channel - k) / (1 - k) * 100))

    return CmykColor(c=ink(r), m=ink(g), y=ink(b), k=round_to_1(clamp0100(k * 100)))


def cmyk_to_rgb(cmyk: CmykColor) -> RgbColor:
    c, m, y, k = cmyk.c / 100, cmyk.m / 100, cmyk.y / 100, cmyk.k / 100
    return RgbColor(
        round_to_byte(255 * (1 - c) * (1 - k)),
        round_to_byte(255 * (1 - m) * (1 - k)),
        round_to_byte(255 * (1 - y) * (1 - k)),
        1.0,
    )
