# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
CSS gradient strings.

Builds ``linear-gradient(...)`` / ``radial-gradient(circle, ...)`` from
color stops, and reads those two forms back into stops.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from colorkit.core import ColorInput, parse_color
from colorkit.utils.numbers import format_number

logger = logging.getLogger(__name__)


class GradientType(Enum):
    LINEAR = "linear"
    RADIAL = "radial"


@dataclass(frozen=True, slots=True)
class GradientStop:
    """
    A single stop in a gradient.

    Attributes:
        color: Any color input; unparsable stops are skipped on output
        position: Position along the gradient line in percent
    """
    color: ColorInput
    position: float

    def to_dict(self) -> dict:
        color = self.color if isinstance(self.color, str) else str(self.color)
        return {"color": color, "position": self.position}


@dataclass(frozen=True)
class GradientOptions:
    """Configuration for :func:`create_gradient`."""

    type: Union[GradientType, str] = GradientType.LINEAR

    # Degrees; ignored for radial gradients
    angle: float = 90

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", GradientType(self.type))


@dataclass(frozen=True, slots=True)
class ParsedGradient:
    """A gradient read back from CSS. ``angle`` is 0 for radial gradients."""
    type: GradientType
    angle: float
    stops: tuple[GradientStop, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "angle": self.angle,
            "stops": [stop.to_dict() for stop in self.stops],
        }


StopLike = Union[GradientStop, tuple[ColorInput, float]]


def create_gradient(stops: Iterable[StopLike], options: Optional[GradientOptions] = None) -> str:
    """
    Render stops as a CSS gradient.

    Stops are sorted by position and written as ``<hex> <position>%``.
    Stops whose color does not parse are dropped.

    Args:
        stops: GradientStop records or ``(color, position)`` pairs
        options: Gradient type and angle (linear at 90deg if None)

    Returns:
        A CSS ``linear-gradient`` or ``radial-gradient`` value.
    """
    opts = options or GradientOptions()
    normalized = [s if isinstance(s, GradientStop) else GradientStop(*s) for s in stops]

    parts = []
    for stop in sorted(normalized, key=lambda s: s.position):
        c = parse_color(stop.color)
        if c is None:
            logger.debug("Skipping gradient stop with invalid color %r", stop.color)
            continue
        parts.append(f"{c.to_hex()} {format_number(stop.position)}%")
    body = ", ".join(parts)

    if opts.type is GradientType.RADIAL:
        return f"radial-gradient(circle, {body})"
    return f"linear-gradient({format_number(opts.angle)}deg, {body})"


_LINEAR_RE = re.compile(r"linear-gradient\((\d+)deg,\s*(.+)\)")
_RADIAL_RE = re.compile(r"radial-gradient\((.+)\)")

# Commas outside parentheses separate stops
_STOP_SPLIT_RE = re.compile(r",(?![^()]*\))")
_STOP_RE = re.compile(r"^(.*?)(?:\s+(\d+(?:\.\d+)?|\.\d+)%?)?$")


def _parse_stops(text: str) -> list[GradientStop]:
    stops = []
    for segment in _STOP_SPLIT_RE.split(text):
        m = _STOP_RE.match(segment.strip())
        color, position = m.group(1), m.group(2)
        stops.append(GradientStop(color, float(position) if position else 0.0))
    return stops


def parse_gradient(css: str) -> Optional[ParsedGradient]:
    """
    Read a ``linear-gradient(<n>deg, ...)`` or ``radial-gradient(...)``.

    Stops keep their color text as written; a missing position reads as 0.
    For radial gradients a leading shape segment such as ``circle`` is
    not a stop and is dropped.

    Returns:
        The parsed gradient, or None for any other input.
    """
    linear = _LINEAR_RE.search(css)
    if linear:
        return ParsedGradient(GradientType.LINEAR, int(linear.group(1)), tuple(_parse_stops(linear.group(2))))

    radial = _RADIAL_RE.search(css)
    if radial:
        stops = _parse_stops(radial.group(1))
        if stops and parse_color(stops[0].color) is None:
            stops = stops[1:]
        return ParsedGradient(GradientType.RADIAL, 0, tuple(stops))

    return None
