# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Manipulation operators.

Pure functions from (color, amount) to a new Color. Each accepts any
color input and raises InvalidColorError when it does not parse.
"""

from colorkit.manipulation.adjust import complement, darken, desaturate, lighten, saturate, spin
from colorkit.manipulation.alpha import fade, fade_in, fade_out, opaque, transparent
from colorkit.manipulation.channels import brighten, grayscale, invert

__all__ = [
    # HSL round-trips
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "spin",
    "complement",
    # RGB channels
    "brighten",
    "grayscale",
    "invert",
    # Alpha
    "fade",
    "fade_in",
    "fade_out",
    "opaque",
    "transparent",
]
