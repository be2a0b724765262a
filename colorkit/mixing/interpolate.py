# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""Linear mixing, and tint/shade/tone as mixes with white/black/gray."""

from __future__ import annotations

from colorkit.core import Color, ColorInput, require_color
from colorkit.utils.numbers import clamp01, lerp, round_to_byte

WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
MID_GRAY = Color(128, 128, 128)


def mix(color1: ColorInput, color2: ColorInput, amount: float = 0.5) -> Color:
    """
    Interpolate from ``color1`` (0.0) to ``color2`` (1.0).

    RGB is rounded to whole channels; alpha is interpolated unrounded.
    ``amount`` is clamped to 0-1.
    """
    c1 = require_color(color1)
    c2 = require_color(color2)
    t = clamp01(amount)
    return Color(
        round_to_byte(lerp(c1.r, c2.r, t)),
        round_to_byte(lerp(c1.g, c2.g, t)),
        round_to_byte(lerp(c1.b, c2.b, t)),
        lerp(c1.a, c2.a, t),
    )


def _mix_toward(color: ColorInput, target: Color, amount: float) -> Color:
    # The result keeps the source alpha, whatever the target's was.
    c = require_color(color)
    return mix(c, target, clamp01(amount / 100)).set_alpha(c.a)


def tint(color: ColorInput, amount: float = 10) -> Color:
    """Mix with white by ``amount`` percent."""
    return _mix_toward(color, WHITE, amount)


def shade(color: ColorInput, amount: float = 10) -> Color:
    """Mix with black by ``amount`` percent."""
    return _mix_toward(color, BLACK, amount)


def tone(color: ColorInput, amount: float = 10) -> Color:
    """Mix with mid-gray (128, 128, 128) by ``amount`` percent."""
    return _mix_toward(color, MID_GRAY, amount)
