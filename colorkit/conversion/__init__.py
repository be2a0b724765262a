# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Format codecs.

Stateless conversions between RGB and HEX, HSL, HSV, HWB, CMYK and the
named color table. Each pair is self-contained and works on the records
in colorkit.schema.
"""

from colorkit.conversion.cmyk import cmyk_to_rgb, rgb_to_cmyk
from colorkit.conversion.hex import OPAQUE_THRESHOLD, hex_to_rgb, rgb_to_hex, rgb_to_hex8
from colorkit.conversion.hsl import hsl_to_rgb, rgb_to_hsl
from colorkit.conversion.hsv import hsl_to_hsv, hsv_to_hsl, hsv_to_rgb, rgb_to_hsv
from colorkit.conversion.hwb import hwb_to_rgb, rgb_to_hwb
from colorkit.conversion.named import (
    NAMED_COLOR_NAMES,
    NAMED_COLORS,
    find_closest_named_color,
    get_named_color,
    rgb_to_name,
)

__all__ = [
    # HEX
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hex8",
    "OPAQUE_THRESHOLD",
    # HSL / HSV
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "hsv_to_hsl",
    "hsl_to_hsv",
    # HWB
    "rgb_to_hwb",
    "hwb_to_rgb",
    # CMYK
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    # Named colors
    "NAMED_COLORS",
    "NAMED_COLOR_NAMES",
    "get_named_color",
    "rgb_to_name",
    "find_closest_named_color",
]
