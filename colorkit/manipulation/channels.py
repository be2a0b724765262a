# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""Adjustments applied directly to RGB channels."""

from __future__ import annotations

from colorkit.core import Color, ColorInput, require_color
from colorkit.utils.numbers import clamp0255


def brighten(color: ColorInput, amount: float = 10) -> Color:
    """
    Move every channel toward 255 by ``amount`` percent of the gap.

    This is not HSV brightness and not HSL lightness: hue may drift for
    saturated inputs.
    """
    c = require_color(color)
    factor = amount / 100
    return Color(
        clamp0255(c.r + (255 - c.r) * factor),
        clamp0255(c.g + (255 - c.g) * factor),
        clamp0255(c.b + (255 - c.b) * factor),
        c.a,
    )


def grayscale(color: ColorInput) -> Color:
    """Unweighted channel mean (not luminance-weighted)."""
    c = require_color(color)
    mean = (c.r + c.g + c.b) / 3
    return Color(mean, mean, mean, c.a)


def invert(color: ColorInput) -> Color:
    c = require_color(color)
    return Color(255 - c.r, 255 - c.g, 255 - c.b, c.a)
