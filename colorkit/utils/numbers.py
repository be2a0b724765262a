# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Numeric helpers: clamping, rounding, interpolation.

Rounding is half-up (``floor(x + 0.5)``), not Python's round-half-even.
Every conversion in the package goes through these so that results are
stable across platforms and match the published reference values.
"""

from __future__ import annotations

import math


def clamp(value: float, lo: float, hi: float) -> float:
    """Bound ``value`` to ``[lo, hi]``.

    NaN maps to ``lo``. Infinities land on the nearest bound.
    """
    if math.isnan(value):
        return lo
    return min(max(value, lo), hi)


def clamp01(value: float) -> float:
    return clamp(value, 0, 1)


def clamp0255(value: float) -> float:
    return clamp(value, 0, 255)


def clamp0100(value: float) -> float:
    return clamp(value, 0, 100)


def clamp0360(value: float) -> float:
    return clamp(value, 0, 360)


def round_to(value: float, precision: int = 0) -> float:
    """Round half-up to ``precision`` decimal places."""
    factor = 10 ** precision
    return math.floor(value * factor + 0.5) / factor


def round_to_byte(value: float) -> int:
    """Round half-up to an integer (used for 0-255 channels)."""
    return int(math.floor(value + 0.5))


def round_to_1(value: float) -> float:
    return round_to(value, 1)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation. ``t`` is not clamped."""
    return a + (b - a) * t


def format_number(value: float) -> str:
    """Render a number for CSS-style strings: ``50.0`` -> ``"50"``."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)
