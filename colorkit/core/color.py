# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
The canonical color value.

Color wraps RGB + alpha and nothing else. Every other format is derived
from it on demand through the codecs, and every manipulation returns a
new instance.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from colorkit.conversion import (
    hsl_to_rgb,
    hsv_to_rgb,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hex8,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hwb,
    rgb_to_name,
)
from colorkit.schema import CmykColor, ColorFormat, HslColor, HsvColor, HwbColor, RgbColor
from colorkit.utils.numbers import clamp01, clamp0100, clamp0255, format_number, round_to_byte

if TYPE_CHECKING:
    from colorkit.accessibility.wcag import TextSize, WcagLevel
    from colorkit.core.parse import ColorInput


@dataclass(frozen=True, slots=True)
class Color:
    """
    An immutable RGBA color.

    Channels are clamped to 0-255 and rounded to integers on construction;
    alpha is clamped to 0-1. Out-of-range input is never an error.

    Attributes:
        r, g, b: Red, green, blue (0-255)
        a: Alpha (0.0 = transparent, 1.0 = opaque)
    """
    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        """Clamp every field into its domain."""
        object.__setattr__(self, "r", round_to_byte(clamp0255(self.r)))
        object.__setattr__(self, "g", round_to_byte(clamp0255(self.g)))
        object.__setattr__(self, "b", round_to_byte(clamp0255(self.b)))
        object.__setattr__(self, "a", float(clamp01(self.a)))

    def __str__(self) -> str:
        return self.to_string()

    # =========================================================================
    # Format conversion
    # =========================================================================

    def to_hex(self) -> str:
        """Lowercase ``#rrggbb``; alpha is dropped."""
        return rgb_to_hex(self.to_rgb())

    def to_hex_string(self) -> str:
        return self.to_hex()

    def to_hex8(self) -> str:
        """``#rrggbbaa``, or ``#rrggbb`` when effectively opaque."""
        return rgb_to_hex8(self.to_rgb())

    def to_hex8_string(self) -> str:
        return self.to_hex8()

    def to_rgb(self) -> RgbColor:
        return RgbColor(self.r, self.g, self.b, self.a)

    def to_rgb_string(self) -> str:
        if self.a == 1:
            return f"rgb({self.r}, {self.g}, {self.b})"
        return self.to_rgba_string()

    def to_rgba_string(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {format_number(self.a)})"

    def to_percentage_rgb(self) -> RgbColor:
        """Channels expressed as whole percentages of 255."""
        return RgbColor(
            round_to_byte(self.r / 255 * 100),
            round_to_byte(self.g / 255 * 100),
            round_to_byte(self.b / 255 * 100),
            self.a,
        )

    def to_percentage_rgb_string(self) -> str:
        pct = self.to_percentage_rgb()
        if self.a == 1:
            return f"rgb({pct.r}%, {pct.g}%, {pct.b}%)"
        return f"rgba({pct.r}%, {pct.g}%, {pct.b}%, {format_number(self.a)})"

    def to_hsl(self) -> HslColor:
        return rgb_to_hsl(self.to_rgb())

    def to_hsl_string(self) -> str:
        if self.a == 1:
            hsl = self.to_hsl()
            return f"hsl({format_number(hsl.h)}, {format_number(hsl.s)}%, {format_number(hsl.l)}%)"
        return self.to_hsla_string()

    def to_hsla_string(self) -> str:
        hsl = self.to_hsl()
        return (
            f"hsla({format_number(hsl.h)}, {format_number(hsl.s)}%, "
            f"{format_number(hsl.l)}%, {format_number(hsl.a)})"
        )

    def to_hsv(self) -> HsvColor:
        return rgb_to_hsv(self.to_rgb())

    def to_hsv_string(self) -> str:
        hsv = self.to_hsv()
        return f"hsv({format_number(hsv.h)}, {format_number(hsv.s)}%, {format_number(hsv.v)}%)"

    def to_hwb(self) -> HwbColor:
        return rgb_to_hwb(self.to_rgb())

    def to_hwb_string(self) -> str:
        hwb = self.to_hwb()
        return f"hwb({format_number(hwb.h)} {format_number(hwb.w)}% {format_number(hwb.b)}%)"

    def to_cmyk(self) -> CmykColor:
        return rgb_to_cmyk(self.to_rgb())

    def to_cmyk_string(self) -> str:
        cmyk = self.to_cmyk()
        parts = ", ".join(f"{format_number(v)}%" for v in (cmyk.c, cmyk.m, cmyk.y, cmyk.k))
        return f"cmyk({parts})"

    def to_name(self) -> Optional[str]:
        """Exact CSS name, or None if the color has none or is translucent."""
        return rgb_to_name(self.to_rgb())

    def to_string(self, format: Union[ColorFormat, str] = ColorFormat.HEX) -> str:
        """
        Render in the requested format.

        Unknown format names fall back to hex, as does ``name`` for colors
        without an exact name.
        """
        try:
            fmt = ColorFormat(format)
        except ValueError:
            return self.to_hex()

        if fmt is ColorFormat.HSVA:
            return self.to_hsv_string().replace("hsv", "hsva", 1)
        if fmt is ColorFormat.NAME:
            return self.to_name() or self.to_hex()
        return {
            ColorFormat.HEX: self.to_hex,
            ColorFormat.HEX8: self.to_hex8,
            ColorFormat.RGB: self.to_rgb_string,
            ColorFormat.RGBA: self.to_rgba_string,
            ColorFormat.HSL: self.to_hsl_string,
            ColorFormat.HSLA: self.to_hsla_string,
            ColorFormat.HSV: self.to_hsv_string,
            ColorFormat.HWB: self.to_hwb_string,
            ColorFormat.CMYK: self.to_cmyk_string,
        }[fmt]()

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> dict:
        """Serialize to an RGBA dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize the RGBA record to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Mapping) -> Color:
        """Deserialize from an RGBA dictionary."""
        return cls(data["r"], data["g"], data["b"], data.get("a", 1.0))

    # =========================================================================
    # Component getters
    # =========================================================================

    @property
    def red(self) -> int:
        return self.r

    @property
    def green(self) -> int:
        return self.g

    @property
    def blue(self) -> int:
        return self.b

    @property
    def alpha(self) -> float:
        return self.a

    @property
    def hue(self) -> float:
        """HSL hue in degrees."""
        return self.to_hsl().h

    @property
    def saturation(self) -> float:
        """HSL saturation percentage."""
        return self.to_hsl().s

    @property
    def lightness(self) -> float:
        return self.to_hsl().l

    @property
    def saturationv(self) -> float:
        """HSV saturation percentage."""
        return self.to_hsv().s

    @property
    def brightness(self) -> float:
        """HSV value percentage."""
        return self.to_hsv().v

    @property
    def whiteness(self) -> float:
        return self.to_hwb().w

    @property
    def blackness(self) -> float:
        return self.to_hwb().b

    @property
    def luminance(self) -> float:
        """WCAG relative luminance (0-1). Alpha is ignored."""
        from colorkit.accessibility.wcag import relative_luminance
        return relative_luminance(self)

    # =========================================================================
    # Component setters (each returns a new Color)
    # =========================================================================

    def set_red(self, value: float) -> Color:
        return Color(value, self.g, self.b, self.a)

    def set_green(self, value: float) -> Color:
        return Color(self.r, value, self.b, self.a)

    def set_blue(self, value: float) -> Color:
        return Color(self.r, self.g, value, self.a)

    def set_alpha(self, value: float) -> Color:
        return Color(self.r, self.g, self.b, value)

    def set_hue(self, value: float) -> Color:
        hsl = self.to_hsl()
        return self._from_hsl(HslColor(value, hsl.s, hsl.l))

    def set_saturation(self, value: float) -> Color:
        hsl = self.to_hsl()
        return self._from_hsl(HslColor(hsl.h, clamp0100(value), hsl.l))

    def set_lightness(self, value: float) -> Color:
        hsl = self.to_hsl()
        return self._from_hsl(HslColor(hsl.h, hsl.s, clamp0100(value)))

    def set_brightness(self, value: float) -> Color:
        hsv = self.to_hsv()
        rgb = hsv_to_rgb(HsvColor(hsv.h, hsv.s, clamp0100(value)))
        return Color(rgb.r, rgb.g, rgb.b, self.a)

    def _from_hsl(self, hsl: HslColor) -> Color:
        rgb = hsl_to_rgb(hsl)
        return Color(rgb.r, rgb.g, rgb.b, self.a)

    # =========================================================================
    # Manipulation
    # =========================================================================
    # Import here to avoid circular imports: the free functions parse
    # arbitrary input, which needs this class.

    def lighten(self, amount: float = 10) -> Color:
        from colorkit.manipulation import lighten
        return lighten(self, amount)

    def darken(self, amount: float = 10) -> Color:
        from colorkit.manipulation import darken
        return darken(self, amount)

    def saturate(self, amount: float = 10) -> Color:
        from colorkit.manipulation import saturate
        return saturate(self, amount)

    def desaturate(self, amount: float = 10) -> Color:
        from colorkit.manipulation import desaturate
        return desaturate(self, amount)

    def brighten(self, amount: float = 10) -> Color:
        from colorkit.manipulation import brighten
        return brighten(self, amount)

    def spin(self, degrees: float) -> Color:
        from colorkit.manipulation import spin
        return spin(self, degrees)

    def grayscale(self) -> Color:
        from colorkit.manipulation import grayscale
        return grayscale(self)

    def invert(self) -> Color:
        from colorkit.manipulation import invert
        return invert(self)

    def complement(self) -> Color:
        from colorkit.manipulation import complement
        return complement(self)

    def fade(self, alpha: float) -> Color:
        from colorkit.manipulation import fade
        return fade(self, alpha)

    def fade_in(self, amount: float) -> Color:
        from colorkit.manipulation import fade_in
        return fade_in(self, amount)

    def fade_out(self, amount: float) -> Color:
        from colorkit.manipulation import fade_out
        return fade_out(self, amount)

    def opaque(self) -> Color:
        return self.set_alpha(1.0)

    def transparent(self) -> Color:
        return self.set_alpha(0.0)

    # =========================================================================
    # Mixing
    # =========================================================================

    def mix(self, other: ColorInput, amount: float = 0.5) -> Color:
        """Interpolate toward ``other``; ``amount`` is a 0-1 ratio."""
        from colorkit.mixing import mix
        return mix(self, other, amount)

    def tint(self, amount: float = 10) -> Color:
        from colorkit.mixing import tint
        return tint(self, amount)

    def shade(self, amount: float = 10) -> Color:
        from colorkit.mixing import shade
        return shade(self, amount)

    def tone(self, amount: float = 10) -> Color:
        from colorkit.mixing import tone
        return tone(self, amount)

    # =========================================================================
    # Queries and comparison
    # =========================================================================

    def is_light(self) -> bool:
        return self.luminance > 0.5

    def is_dark(self) -> bool:
        return not self.is_light()

    def is_valid(self) -> bool:
        # A constructed Color is always in range.
        return True

    def contrast(self, other: ColorInput) -> float:
        from colorkit.accessibility import contrast
        return contrast(self, other)

    def is_readable(
        self,
        background: ColorInput,
        level: Union[WcagLevel, str] = "AA",
        size: Union[TextSize, str] = "normal",
    ) -> bool:
        from colorkit.accessibility import is_readable
        return is_readable(self, background, level=level, size=size)

    def equals(self, other: ColorInput) -> bool:
        """Exact field-wise equality after parsing ``other``."""
        from colorkit.core.parse import parse_color
        parsed = parse_color(other)
        if parsed is None:
            return False
        return self == parsed

    def clone(self) -> Color:
        return Color(self.r, self.g, self.b, self.a)
