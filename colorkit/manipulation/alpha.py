# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""Alpha adjustments. RGB is left unchanged; alpha is clamped to 0-1."""

from __future__ import annotations

from colorkit.core import Color, ColorInput, require_color


def fade(color: ColorInput, alpha: float) -> Color:
    """Set alpha absolutely."""
    return require_color(color).set_alpha(alpha)


def fade_in(color: ColorInput, amount: float) -> Color:
    c = require_color(color)
    return c.set_alpha(c.a + amount)


def fade_out(color: ColorInput, amount: float) -> Color:
    c = require_color(color)
    return c.set_alpha(c.a - amount)


def opaque(color: ColorInput) -> Color:
    return require_color(color).set_alpha(1.0)


def transparent(color: ColorInput) -> Color:
    return require_color(color).set_alpha(0.0)
