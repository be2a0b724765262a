# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Transient color format records.

These are produced on demand from a Color and discarded after use. They
also serve as the tagged structured inputs the parser dispatches on, so
out-of-range components are allowed here: clamping happens when a Color
is built from them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


# =============================================================================
# Output Formats
# =============================================================================


class ColorFormat(Enum):
    """String formats a Color can be rendered to."""
    HEX = "hex"
    HEX8 = "hex8"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    HSV = "hsv"
    HSVA = "hsva"
    HWB = "hwb"
    CMYK = "cmyk"
    NAME = "name"


# =============================================================================
# Format Records
# =============================================================================


@dataclass(frozen=True, slots=True)
class RgbColor:
    """
    RGB(A) record.

    Attributes:
        r, g, b: Channels, nominally 0-255
        a: Alpha, nominally 0-1
    """
    r: float
    g: float
    b: float
    a: float = 1.0

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    @classmethod
    def from_dict(cls, data: Mapping) -> RgbColor:
        return cls(r=data["r"], g=data["g"], b=data["b"], a=data.get("a", 1.0))


@dataclass(frozen=True, slots=True)
class HslColor:
    """
    HSL(A) record.

    Attributes:
        h: Hue in degrees
        s: Saturation percentage (0-100)
        l: Lightness percentage (0-100)
        a: Alpha (0-1)
    """
    h: float
    s: float
    l: float
    a: float = 1.0

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "l": self.l, "a": self.a}

    @classmethod
    def from_dict(cls, data: Mapping) -> HslColor:
        return cls(h=data["h"], s=data["s"], l=data["l"], a=data.get("a", 1.0))


@dataclass(frozen=True, slots=True)
class HsvColor:
    """HSV(A) record. ``v`` is value/brightness as a percentage."""
    h: float
    s: float
    v: float
    a: float = 1.0

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "v": self.v, "a": self.a}

    @classmethod
    def from_dict(cls, data: Mapping) -> HsvColor:
        return cls(h=data["h"], s=data["s"], v=data["v"], a=data.get("a", 1.0))


@dataclass(frozen=True, slots=True)
class HwbColor:
    """
    HWB(A) record.

    Whiteness and blackness are percentages. When they sum past 100 the
    pair is rescaled proportionally on conversion to RGB.
    """
    h: float
    w: float
    b: float
    a: float = 1.0

    def to_dict(self) -> dict:
        return {"h": self.h, "w": self.w, "b": self.b, "a": self.a}

    @classmethod
    def from_dict(cls, data: Mapping) -> HwbColor:
        a = data.get("a")
        return cls(h=data["h"], w=data["w"], b=data["b"], a=1.0 if a is None else a)


@dataclass(frozen=True, slots=True)
class CmykColor:
    """CMYK record. Percentages 0-100, always opaque."""
    c: float
    m: float
    y: float
    k: float

    @property
    def a(self) -> float:
        return 1.0

    def to_dict(self) -> dict:
        return {"c": self.c, "m": self.m, "y": self.y, "k": self.k, "a": 1.0}

    @classmethod
    def from_dict(cls, data: Mapping) -> CmykColor:
        return cls(c=data["c"], m=data["m"], y=data["y"], k=data["k"])


FormatRecord = Union[RgbColor, HslColor, HsvColor, HwbColor, CmykColor]


# Key sets probed in priority order
_RECORD_KEYS: tuple[tuple[frozenset[str], type], ...] = (
    (frozenset("rgb"), RgbColor),
    (frozenset("hsl"), HslColor),
    (frozenset("hsv"), HsvColor),
    (frozenset("hwb"), HwbColor),
    (frozenset("cmyk"), CmykColor),
)


def record_from_mapping(data: Mapping) -> Optional[FormatRecord]:
    """
    Convert a plain mapping to the matching format record.

    Keys are probed in order: r/g/b, h/s/l, h/s/v, h/w/b, c/m/y/k. The
    first complete key set wins.

    Returns:
        The record, or None if no key set is present.
    """
    keys = set(data.keys())
    for required, record_type in _RECORD_KEYS:
        if required <= keys:
            return record_type.from_dict(data)
    return None
