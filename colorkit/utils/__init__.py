# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Numeric helpers shared by every codec.

The color-level utilities (distance, random colors, gradients, named
helpers) live in their own modules and are imported from there; they
depend on colorkit.core, which in turn depends on this package.
"""

from colorkit.utils.numbers import (
    clamp,
    clamp01,
    clamp0100,
    clamp0255,
    clamp0360,
    format_number,
    lerp,
    round_to,
    round_to_1,
    round_to_byte,
)

__all__ = [
    "clamp",
    "clamp01",
    "clamp0255",
    "clamp0100",
    "clamp0360",
    "round_to",
    "round_to_byte",
    "round_to_1",
    "lerp",
    "format_number",
]
