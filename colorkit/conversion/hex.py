# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""HEX <-> RGB codec."""

from __future__ import annotations

import re

from colorkit.errors import InvalidColorError
from colorkit.schema import RgbColor
from colorkit.utils.numbers import clamp0255, round_to, round_to_byte

_HEX_DIGITS_RE = re.compile(r"^[0-9a-fA-F]{3,8}$")

# Alpha at or above this is written as fully opaque
OPAQUE_THRESHOLD = 0.9995


def hex_to_rgb(value: str) -> RgbColor:
    """
    Decode a HEX string.

    Accepts 3, 4, 6 or 8 digits, with or without a leading ``#``, in any
    case. Short forms double each digit. The 8-digit form carries alpha
    in its last byte, rounded to two decimals.

    Raises:
        InvalidColorError: Wrong digit count or non-hex characters.
    """
    digits = value.strip()
    if digits.startswith("#"):
        digits = digits[1:]

    if not _HEX_DIGITS_RE.match(digits) or len(digits) not in (3, 4, 6, 8):
        raise InvalidColorError(f"Invalid HEX color: {value}", value)

    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)

    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    a = round_to(int(digits[6:8], 16) / 255, 2) if len(digits) == 8 else 1.0
    return RgbColor(r, g, b, a)


def _byte(value: float) -> str:
    return format(round_to_byte(clamp0255(value)), "02x")


def rgb_to_hex(rgb: RgbColor) -> str:
    """Encode as lowercase ``#rrggbb``. Alpha is ignored."""
    return "#" + _byte(rgb.r) + _byte(rgb.g) + _byte(rgb.b)


def rgb_to_hex8(rgb: RgbColor) -> str:
    """Encode as ``#rrggbbaa``, or ``#rrggbb`` when effectively opaque."""
    hex6 = rgb_to_hex(rgb)
    if rgb.a >= OPAQUE_THRESHOLD:
        return hex6
    return hex6 + _byte(rgb.a * 255)
