# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Named color table and lookups.

The table is built once at import and exposed read-only. Iteration order
matters: reverse lookups and nearest-match ties resolve to the first
entry, so e.g. ``#00ffff`` names as "cyan", not "aqua".
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Optional

from colorkit.conversion.hex import OPAQUE_THRESHOLD
from colorkit.schema import RgbColor

TRANSPARENT = "transparent"

_NAMED_COLORS: dict[str, int] = {
    # Basic colors
    "black": 0x000000,
    "white": 0xFFFFFF,
    "red": 0xFF0000,
    "green": 0x008000,
    "blue": 0x0000FF,
    "yellow": 0xFFFF00,
    "cyan": 0x00FFFF,
    "magenta": 0xFF00FF,
    # Gray scale and HTML 4 colors
    "silver": 0xC0C0C0,
    "gray": 0x808080,
    "grey": 0x808080,
    "maroon": 0x800000,
    "olive": 0x808000,
    "purple": 0x800080,
    "teal": 0x008080,
    "navy": 0x000080,
    # Extended (CSS) colors
    "aliceblue": 0xF0F8FF,
    "antiquewhite": 0xFAEBD7,
    "aqua": 0x00FFFF,
    "aquamarine": 0x7FFFD4,
    "azure": 0xF0FFFF,
    "beige": 0xF5F5DC,
    "bisque": 0xFFE4C4,
    "blanchedalmond": 0xFFEBCD,
    "blueviolet": 0x8A2BE2,
    "brown": 0xA52A2A,
    "burlywood": 0xDEB887,
    "cadetblue": 0x5F9EA0,
    "chartreuse": 0x7FFF00,
    "chocolate": 0xD2691E,
    "coral": 0xFF7F50,
    "cornflowerblue": 0x6495ED,
    "cornsilk": 0xFFF8DC,
    "crimson": 0xDC143C,
    "darkblue": 0x00008B,
    "darkcyan": 0x008B8B,
    "darkgoldenrod": 0xB8860B,
    "darkgray": 0xA9A9A9,
    "darkgrey": 0xA9A9A9,
    "darkgreen": 0x006400,
    "darkkhaki": 0xBDB76B,
    "darkmagenta": 0x8B008B,
    "darkolivegreen": 0x556B2F,
    "darkorange": 0xFF8C00,
    "darkorchid": 0x9932CC,
    "darkred": 0x8B0000,
    "darksalmon": 0xE9967A,
    "darkseagreen": 0x8FBC8F,
    "darkslateblue": 0x483D8B,
    "darkslategray": 0x2F4F4F,
    "darkslategrey": 0x2F4F4F,
    "darkturquoise": 0x00CED1,
    "darkviolet": 0x9400D3,
    "deeppink": 0xFF1493,
    "deepskyblue": 0x00BFFF,
    "dimgray": 0x696969,
    "dimgrey": 0x696969,
    "dodgerblue": 0x1E90FF,
    "firebrick": 0xB22222,
    "floralwhite": 0xFFFAF0,
    "forestgreen": 0x228B22,
    "fuchsia": 0xFF00FF,
    "gainsboro": 0xDCDCDC,
    "ghostwhite": 0xF8F8FF,
    "goldenrod": 0xDAA520,
    "gold": 0xFFD700,
    "greenyellow": 0xADFF2F,
    "honeydew": 0xF0FFF0,
    "hotpink": 0xFF69B4,
    "indianred": 0xCD5C5C,
    "indigo": 0x4B0082,
    "ivory": 0xFFFFF0,
    "khaki": 0xF0E68C,
    "lavenderblush": 0xFFF0F5,
    "lavender": 0xE6E6FA,
    "lawngreen": 0x7CFC00,
    "lemonchiffon": 0xFFFACD,
    "lightblue": 0xADD8E6,
    "lightcoral": 0xF08080,
    "lightcyan": 0xE0FFFF,
    "lightgoldenrodyellow": 0xFAFAD2,
    "lightgray": 0xD3D3D3,
    "lightgrey": 0xD3D3D3,
    "lightgreen": 0x90EE90,
    "lightpink": 0xFFB6C1,
    "lightsalmon": 0xFFA07A,
    "lightseagreen": 0x20B2AA,
    "lightskyblue": 0x87CEFA,
    "lightslategray": 0x778899,
    "lightslategrey": 0x778899,
    "lightsteelblue": 0xB0C4DE,
    "lightyellow": 0xFFFFE0,
    "lime": 0x00FF00,
    "limegreen": 0x32CD32,
    "linen": 0xFAF0E6,
    "mediumaquamarine": 0x66CDAA,
    "mediumblue": 0x0000CD,
    "mediumorchid": 0xBA55D3,
    "mediumpurple": 0x9370DB,
    "mediumseagreen": 0x3CB371,
    "mediumslateblue": 0x7B68EE,
    "mediumspringgreen": 0x00FA9A,
    "mediumturquoise": 0x48D1CC,
    "mediumvioletred": 0xC71585,
    "midnightblue": 0x191970,
    "mintcream": 0xF5FFFA,
    "mistyrose": 0xFFE4E1,
    "moccasin": 0xFFE4B5,
    "navajowhite": 0xFFDEAD,
    "oldlace": 0xFDF5E6,
    "olivedrab": 0x6B8E23,
    "orange": 0xFFA500,
    "orangered": 0xFF4500,
    "orchid": 0xDA70D6,
    "palegoldenrod": 0xEEE8AA,
    "palegreen": 0x98FB98,
    "paleturquoise": 0xAFEEEE,
    "palevioletred": 0xDB7093,
    "papayawhip": 0xFFEFD5,
    "peachpuff": 0xFFDAB9,
    "peru": 0xCD853F,
    "pink": 0xFFC0CB,
    "plum": 0xDDA0DD,
    "powderblue": 0xB0E0E6,
    "rosybrown": 0xBC8F8F,
    "royalblue": 0x4169E1,
    "saddlebrown": 0x8B4513,
    "salmon": 0xFA8072,
    "sandybrown": 0xF4A460,
    "seagreen": 0x2E8B57,
    "seashell": 0xFFF5EE,
    "sienna": 0xA0522D,
    "skyblue": 0x87CEEB,
    "slateblue": 0x6A5ACD,
    "slategray": 0x708090,
    "slategrey": 0x708090,
    "snow": 0xFFFAFA,
    "springgreen": 0x00FF7F,
    "steelblue": 0x4682B4,
    "tan": 0xD2B48C,
    "thistle": 0xD8BFD8,
    "tomato": 0xFF6347,
    "turquoise": 0x40E0D0,
    "violet": 0xEE82EE,
    "wheat": 0xF5DEB3,
    "whitesmoke": 0xF5F5F5,
    "yellowgreen": 0x9ACD32,
    # CSS Color Level 4
    "rebeccapurple": 0x663399,
    # Special
    TRANSPARENT: 0x00000000,
}

NAMED_COLORS: MappingProxyType[str, int] = MappingProxyType(_NAMED_COLORS)

# Public names, table order, without "transparent"
NAMED_COLOR_NAMES: tuple[str, ...] = tuple(name for name in _NAMED_COLORS if name != TRANSPARENT)


def _unpack(value: int) -> tuple[int, int, int]:
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def get_named_color(name: str) -> Optional[RgbColor]:
    """Case-insensitive lookup. ``transparent`` is black with alpha 0."""
    key = name.lower()
    value = _NAMED_COLORS.get(key)
    if value is None:
        return None
    if key == TRANSPARENT:
        return RgbColor(0, 0, 0, 0.0)
    return RgbColor(*_unpack(value), 1.0)


def rgb_to_name(rgb: RgbColor) -> Optional[str]:
    """Exact 24-bit reverse lookup. Translucent colors have no name."""
    if rgb.a != 1 and rgb.a < OPAQUE_THRESHOLD:
        return None

    packed = (int(rgb.r) << 16) | (int(rgb.g) << 8) | int(rgb.b)
    for name in NAMED_COLOR_NAMES:
        if _NAMED_COLORS[name] == packed:
            return name
    return None


def find_closest_named_color(rgb: Optional[RgbColor]) -> Optional[str]:
    """
    Name of the table entry nearest to ``rgb`` by Euclidean RGB distance.

    Linear scan; ties keep the first entry encountered.
    """
    if rgb is None:
        return None

    closest: Optional[str] = None
    best = math.inf
    for name in NAMED_COLOR_NAMES:
        r, g, b = _unpack(_NAMED_COLORS[name])
        distance = math.sqrt((rgb.r - r) ** 2 + (rgb.g - g) ** 2 + (rgb.b - b) ** 2)
        if distance < best:
            best = distance
            closest = name
    return closest
