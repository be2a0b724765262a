# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Alpha compositing and per-channel blend modes.

``normal`` is Porter-Duff "over". Every other mode works on channels
normalized to 0-1 and attaches the top color's alpha to the result.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import Enum
from typing import Union

from colorkit.core import Color, ColorInput, require_color
from colorkit.utils.numbers import clamp0255, round_to_byte


class BlendMode(Enum):
    """Supported blend modes (CSS ``mix-blend-mode`` names)."""
    NORMAL = "normal"
    MULTIPLY = "multiply"
    SCREEN = "screen"
    OVERLAY = "overlay"
    DARKEN = "darken"
    LIGHTEN = "lighten"
    COLOR_DODGE = "color-dodge"
    COLOR_BURN = "color-burn"
    HARD_LIGHT = "hard-light"
    SOFT_LIGHT = "soft-light"
    DIFFERENCE = "difference"
    EXCLUSION = "exclusion"


# a = top channel, b = bottom channel, both 0-1
_CHANNEL_FORMULAS: dict[BlendMode, Callable[[float, float], float]] = {
    BlendMode.MULTIPLY: lambda a, b: a * b,
    BlendMode.SCREEN: lambda a, b: 1 - (1 - a) * (1 - b),
    BlendMode.OVERLAY: lambda a, b: 2 * a * b if a < 0.5 else 1 - 2 * (1 - a) * (1 - b),
    BlendMode.DARKEN: min,
    BlendMode.LIGHTEN: max,
    BlendMode.COLOR_DODGE: lambda a, b: 1 if b == 1 else min(1, a / (1 - b)),
    BlendMode.COLOR_BURN: lambda a, b: 0 if b == 0 else 1 - min(1, (1 - a) / b),
    BlendMode.HARD_LIGHT: lambda a, b: 2 * a * b if b < 0.5 else 1 - 2 * (1 - a) * (1 - b),
    BlendMode.SOFT_LIGHT: lambda a, b: (
        a - (1 - 2 * b) * a * (1 - a) if b < 0.5 else a + (2 * b - 1) * (math.sqrt(a) - a)
    ),
    BlendMode.DIFFERENCE: lambda a, b: abs(a - b),
    BlendMode.EXCLUSION: lambda a, b: a + b - 2 * a * b,
}


def _bottom(a: float, b: float) -> float:
    return b


def _resolve_formula(mode: Union[BlendMode, str]) -> Callable[[float, float], float]:
    try:
        return _CHANNEL_FORMULAS[BlendMode(mode)]
    except (KeyError, ValueError):
        # Unrecognized mode: keep the bottom layer.
        return _bottom


def blend(top: ColorInput, bottom: ColorInput, mode: Union[BlendMode, str] = BlendMode.NORMAL) -> Color:
    """
    Blend ``top`` over ``bottom``.

    Args:
        top: The upper layer (its alpha drives ``normal`` compositing)
        bottom: The lower layer
        mode: A BlendMode or its CSS name. Unknown names return the
            bottom channels with the top's alpha.

    Returns:
        A new Color.
    """
    c1 = require_color(top)
    c2 = require_color(bottom)

    if mode == BlendMode.NORMAL or mode == BlendMode.NORMAL.value:
        a = c1.a
        return Color(
            round_to_byte(c1.r * a + c2.r * (1 - a)),
            round_to_byte(c1.g * a + c2.g * (1 - a)),
            round_to_byte(c1.b * a + c2.b * (1 - a)),
            a + c2.a * (1 - a),
        )

    formula = _resolve_formula(mode)

    def channel(x: int, y: int) -> float:
        return clamp0255(round_to_byte(formula(x / 255, y / 255) * 255))

    return Color(channel(c1.r, c2.r), channel(c1.g, c2.g), channel(c1.b, c2.b), c1.a)
