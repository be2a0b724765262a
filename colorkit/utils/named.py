# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""Named-color helpers that work with Color values and any color input."""

from __future__ import annotations

from typing import Optional

from colorkit.conversion import find_closest_named_color, get_named_color
from colorkit.core import Color, parse_color


def named_color(name: str) -> Optional[Color]:
    """Look up a CSS color name (case-insensitive)."""
    rgb = get_named_color(name)
    if rgb is None:
        return None
    return Color(rgb.r, rgb.g, rgb.b, rgb.a)


def closest_named_color(color: object) -> Optional[str]:
    """Nearest CSS name to any color input, or None if it does not parse."""
    c = parse_color(color)
    if c is None:
        return None
    return find_closest_named_color(c.to_rgb())

