# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
HSL-based adjustments: lightness, saturation and hue rotation.

Each is an HSL round-trip, so results carry the codec's rounding (hue to
whole degrees, saturation/lightness to one decimal).
"""

from __future__ import annotations

from colorkit.conversion import hsl_to_rgb
from colorkit.core import Color, ColorInput, require_color
from colorkit.schema import HslColor
from colorkit.utils.numbers import clamp0100, round_to_byte


def _with_hsl(hsl: HslColor) -> Color:
    rgb = hsl_to_rgb(hsl)
    return Color(rgb.r, rgb.g, rgb.b, rgb.a)


def lighten(color: ColorInput, amount: float = 10) -> Color:
    """Raise HSL lightness by ``amount`` percentage points (clamped)."""
    hsl = require_color(color).to_hsl()
    return _with_hsl(HslColor(hsl.h, hsl.s, clamp0100(hsl.l + amount), hsl.a))


def darken(color: ColorInput, amount: float = 10) -> Color:
    return lighten(color, -amount)


def saturate(color: ColorInput, amount: float = 10) -> Color:
    """Raise HSL saturation by ``amount`` percentage points (clamped)."""
    hsl = require_color(color).to_hsl()
    return _with_hsl(HslColor(hsl.h, clamp0100(hsl.s + amount), hsl.l, hsl.a))


def desaturate(color: ColorInput, amount: float = 10) -> Color:
    return saturate(color, -amount)


def spin(color: ColorInput, degrees: float) -> Color:
    """Rotate the hue; the result wraps into [0, 360)."""
    hsl = require_color(color).to_hsl()
    hue = round_to_byte(hsl.h + degrees) % 360
    return _with_hsl(HslColor(hue, hsl.s, hsl.l, hsl.a))


def complement(color: ColorInput) -> Color:
    return spin(color, 180)
