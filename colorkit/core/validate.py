# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""Validation helpers built on the lenient parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from colorkit.core.color import Color
from colorkit.core.parse import detect_format, parse_color
from colorkit.schema import ColorFormat


@dataclass(frozen=True, slots=True)
class ParseResult:
    """
    Outcome of :func:`parse_color_typed`.

    Attributes:
        valid: True if the input parsed
        color: The parsed color, or None
        format: The string grammar that matched, or None
    """
    valid: bool
    color: Optional[Color]
    format: Optional[ColorFormat]

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "color": self.color.to_dict() if self.color is not None else None,
            "format": self.format.value if self.format is not None else None,
        }


def is_valid_color(value: object) -> bool:
    """True if ``value`` is a string the parser accepts."""
    if not isinstance(value, str):
        return False
    return parse_color(value) is not None


def parse_color_typed(value: object) -> ParseResult:
    """Parse and report the detected format in one call."""
    fmt = detect_format(value) if isinstance(value, str) else None
    parsed = parse_color(value)
    return ParseResult(valid=parsed is not None, color=parsed, format=fmt)
