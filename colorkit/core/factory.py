# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Strict constructors.

Unlike parse_color, these raise InvalidColorError instead of returning
None, so a bad literal fails at the call site.
"""

from __future__ import annotations

from colorkit.conversion import cmyk_to_rgb, hex_to_rgb, hsl_to_rgb, hsv_to_rgb, hwb_to_rgb
from colorkit.core.color import Color
from colorkit.core.parse import require_color
from colorkit.schema import CmykColor, HslColor, HsvColor, HwbColor, RgbColor


def _build(rgb: RgbColor) -> Color:
    return Color(rgb.r, rgb.g, rgb.b, rgb.a)


def color(value: object) -> Color:
    """Parse ``value`` or raise InvalidColorError."""
    return require_color(value)


def rgb(r: float, g: float, b: float, a: float = 1.0) -> Color:
    return Color(r, g, b, a)


def hsl(h: float, s: float, l: float, a: float = 1.0) -> Color:
    return _build(hsl_to_rgb(HslColor(h, s, l, a)))


def hsv(h: float, s: float, v: float, a: float = 1.0) -> Color:
    return _build(hsv_to_rgb(HsvColor(h, s, v, a)))


def hwb(h: float, w: float, b: float, a: float = 1.0) -> Color:
    return _build(hwb_to_rgb(HwbColor(h, w, b, a)))


def hex(value: str) -> Color:
    """Decode a HEX string; raises InvalidColorError when malformed."""
    return _build(hex_to_rgb(value))


def cmyk(c: float, m: float, y: float, k: float) -> Color:
    return _build(cmyk_to_rgb(CmykColor(c, m, y, k)))
