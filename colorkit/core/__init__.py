# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
The canonical Color value, the parser, and the strict constructors.
"""

from colorkit.core.color import Color
from colorkit.core.factory import cmyk, color, hex, hsl, hsv, hwb, rgb
from colorkit.core.parse import ColorInput, detect_format, require_color, parse_color
from colorkit.core.validate import ParseResult, is_valid_color, parse_color_typed

__all__ = [
    # Value type
    "Color",
    "ColorInput",
    # Lenient boundary
    "parse_color",
    "detect_format",
    "require_color",
    "is_valid_color",
    "parse_color_typed",
    "ParseResult",
    # Strict boundary
    "color",
    "rgb",
    "hsl",
    "hsv",
    "hwb",
    "hex",
    "cmyk",
]
