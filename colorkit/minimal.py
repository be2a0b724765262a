# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Reduced ingress surface: RGB construction and hex-only parsing.

For consumers that only need to read and write hex. Channel values are
clamped but kept as given (no rounding until a hex string is produced).
Hex handling agrees with the full parser for 3, 6 and 8 digit input; the
4-digit short form is not accepted here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from colorkit.errors import InvalidColorError
from colorkit.utils.numbers import clamp, format_number, round_to, round_to_byte

_HEX_RE = re.compile(r"^(?:[0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class MinimalColor:
    """An RGBA value with no derived formats beyond hex and rgb()."""
    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", clamp(self.r, 0, 255))
        object.__setattr__(self, "g", clamp(self.g, 0, 255))
        object.__setattr__(self, "b", clamp(self.b, 0, 255))
        object.__setattr__(self, "a", clamp(self.a, 0, 1))

    def __str__(self) -> str:
        return self.to_string()

    @property
    def red(self) -> float:
        return self.r

    @property
    def green(self) -> float:
        return self.g

    @property
    def blue(self) -> float:
        return self.b

    @property
    def alpha(self) -> float:
        return self.a

    def to_rgb(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    def to_hex(self) -> str:
        return "#" + "".join(format(round_to_byte(v), "02x") for v in (self.r, self.g, self.b))

    def to_hex8(self) -> str:
        """Always eight digits, even when opaque."""
        return self.to_hex() + format(round_to_byte(self.a * 255), "02x")

    def to_string(self) -> str:
        channels = ", ".join(format_number(v) for v in (self.r, self.g, self.b))
        if self.a == 1:
            return f"rgb({channels})"
        return f"rgba({channels}, {format_number(self.a)})"

    def clone(self) -> MinimalColor:
        return MinimalColor(self.r, self.g, self.b, self.a)


def parse_minimal_hex(value: str) -> Optional[MinimalColor]:
    """Parse 3, 6 or 8 hex digits with optional ``#``; None otherwise."""
    digits = value.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if not _HEX_RE.match(digits):
        return None

    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    a = round_to(int(digits[6:8], 16) / 255, 2) if len(digits) == 8 else 1.0
    return MinimalColor(r, g, b, a)


def rgb(r: float, g: float, b: float, a: float = 1.0) -> MinimalColor:
    return MinimalColor(r, g, b, a)


def hex(value: str) -> MinimalColor:
    color = parse_minimal_hex(value)
    if color is None:
        raise InvalidColorError(f"Invalid HEX color: {value}", value)
    return color
