# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Color parser.

Maps any supported input to a Color: an existing Color, a CSS-style
string, a format record, or a plain mapping. This is the lenient
boundary: unrecognized input yields None, never an exception.

String grammars are tried in a fixed priority order (hex, rgb, hsl, hsv,
hwb, cmyk, then named colors). The first grammar that matches decides
the outcome; if its components then fail to convert, the parse fails
rather than falling through to later grammars.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from typing import Optional, Union

from colorkit.conversion import cmyk_to_rgb, get_named_color, hex_to_rgb, hsl_to_rgb, hsv_to_rgb, hwb_to_rgb
from colorkit.core.color import Color
from colorkit.errors import InvalidColorError
from colorkit.schema import CmykColor, ColorFormat, FormatRecord, HslColor, HsvColor, HwbColor, RgbColor, record_from_mapping
from colorkit.utils.numbers import clamp01, clamp0100, clamp0255, round_to_byte

logger = logging.getLogger(__name__)

ColorInput = Union[str, Color, FormatRecord, Mapping]


# =============================================================================
# String grammars
# =============================================================================

_FLAGS = re.IGNORECASE | re.ASCII

HEX_RE = re.compile(r"^#?([0-9a-f]{3,8})$", _FLAGS)
RGB_RE = re.compile(
    r"^rgba?\(\s*(\d+%?)\s*[,\s]\s*(\d+%?)\s*[,\s]\s*(\d+%?)\s*(?:[,\s/]\s*([\d.]+)\s*)?\)$", _FLAGS
)
HSL_RE = re.compile(
    r"^hsla?\(\s*(\d+)\s*[,\s]\s*(\d+)%\s*[,\s]\s*(\d+)%\s*(?:[,\s/]\s*([\d.]+)\s*)?\)$", _FLAGS
)
HSV_RE = re.compile(
    r"^hsva?\(\s*(\d+)\s*[,\s]\s*(\d+)%\s*[,\s]\s*(\d+)%\s*(?:[,\s/]\s*([\d.]+)\s*)?\)$", _FLAGS
)
HWB_RE = re.compile(
    r"^hwb\(\s*(\d+)\s*[,\s]\s*(\d+)%\s*[,\s]\s*(\d+)%\s*(?:[/,]\s*([\d.]+)\s*)?\)$", _FLAGS
)
CMYK_RE = re.compile(
    r"^cmyk\(\s*(\d+)%\s*[,\s]\s*(\d+)%\s*[,\s]\s*(\d+)%\s*[,\s]\s*(\d+)%\s*\)$", _FLAGS
)


def _alpha(group: Optional[str]) -> float:
    return clamp01(float(group)) if group else 1.0


def _channel(token: str) -> float:
    """An rgb() component: bare 0-255 number or a percentage of 255."""
    if token.endswith("%"):
        return round_to_byte(clamp0255(float(token[:-1]) / 100 * 255))
    return round_to_byte(clamp0255(float(token)))


def _from_hex(m: re.Match) -> Color:
    rgb = hex_to_rgb(m.group(0))
    return Color(rgb.r, rgb.g, rgb.b, rgb.a)


def _from_rgb_string(m: re.Match) -> Color:
    r, g, b = (_channel(m.group(i)) for i in (1, 2, 3))
    return Color(r, g, b, _alpha(m.group(4)))


def _hue_and_percentages(m: re.Match) -> tuple[float, float, float, float]:
    return (
        float(m.group(1)) % 360,
        clamp0100(float(m.group(2))),
        clamp0100(float(m.group(3))),
        _alpha(m.group(4)),
    )


def _from_hsl_string(m: re.Match) -> Color:
    return _from_record(HslColor(*_hue_and_percentages(m)))


def _from_hsv_string(m: re.Match) -> Color:
    return _from_record(HsvColor(*_hue_and_percentages(m)))


def _from_hwb_string(m: re.Match) -> Color:
    return _from_record(HwbColor(*_hue_and_percentages(m)))


def _from_cmyk_string(m: re.Match) -> Color:
    c, mg, y, k = (clamp0100(float(m.group(i))) for i in (1, 2, 3, 4))
    return _from_record(CmykColor(c, mg, y, k))


def _hex_format(text: str) -> ColorFormat:
    return ColorFormat.HEX if len(text.replace("#", "", 1)) <= 6 else ColorFormat.HEX8


def _alpha_variant(plain: ColorFormat, with_alpha: ColorFormat) -> Callable[[str], ColorFormat]:
    return lambda text: with_alpha if with_alpha.value in text.lower() else plain


# (grammar, builder, format detector), in priority order
_GRAMMARS: tuple[tuple[re.Pattern, Callable[[re.Match], Color], Callable[[str], ColorFormat]], ...] = (
    (HEX_RE, _from_hex, _hex_format),
    (RGB_RE, _from_rgb_string, _alpha_variant(ColorFormat.RGB, ColorFormat.RGBA)),
    (HSL_RE, _from_hsl_string, _alpha_variant(ColorFormat.HSL, ColorFormat.HSLA)),
    (HSV_RE, _from_hsv_string, _alpha_variant(ColorFormat.HSV, ColorFormat.HSVA)),
    (HWB_RE, _from_hwb_string, lambda text: ColorFormat.HWB),
    (CMYK_RE, _from_cmyk_string, lambda text: ColorFormat.CMYK),
)


def _parse_string(text: str) -> Optional[Color]:
    trimmed = text.strip()
    if not trimmed:
        return None

    for grammar, build, _ in _GRAMMARS:
        m = grammar.match(trimmed)
        if m is None:
            continue
        try:
            return build(m)
        except (InvalidColorError, ValueError, OverflowError) as exc:
            logger.debug("Rejected %r: %s", trimmed, exc)
            return None

    named = get_named_color(trimmed)
    if named is not None:
        return Color(named.r, named.g, named.b, named.a)

    logger.debug("No grammar matches %r", trimmed)
    return None


# =============================================================================
# Structured input
# =============================================================================


def _from_record(record: FormatRecord) -> Color:
    match record:
        case RgbColor():
            rgb = record
        case HslColor():
            rgb = hsl_to_rgb(record)
        case HsvColor():
            rgb = hsv_to_rgb(record)
        case HwbColor():
            rgb = hwb_to_rgb(record)
        case CmykColor():
            rgb = cmyk_to_rgb(record)
    return Color(rgb.r, rgb.g, rgb.b, rgb.a)


# =============================================================================
# Public API
# =============================================================================


def parse_color(value: object) -> Optional[Color]:
    """
    Parse any supported color input.

    Args:
        value: A Color (copied), a string, a format record, or a mapping
            whose keys identify the format (r/g/b, h/s/l, h/s/v, h/w/b,
            c/m/y/k, each with optional ``a``).

    Returns:
        A new Color, or None if the input is not a recognizable color.
    """
    match value:
        case Color():
            return value.clone()
        case str():
            return _parse_string(value)
        case RgbColor() | HslColor() | HsvColor() | HwbColor() | CmykColor():
            record = value
        case Mapping():
            record = record_from_mapping(value)
            if record is None:
                logger.debug("Mapping keys %s match no color format", list(value))
                return None
        case _:
            return None

    try:
        return _from_record(record)
    except (TypeError, ValueError, OverflowError) as exc:
        logger.debug("Rejected %r: %s", value, exc)
        return None


def detect_format(text: str) -> Optional[ColorFormat]:
    """
    Report which string grammar ``text`` matches, without building a color.

    ``rgb``/``rgba`` (and the hsl/hsv pairs) are told apart by the
    function name written in the literal, not by whether an alpha
    component is present: ``rgb(255 0 0 / 0.5)`` reports ``rgb``.
    Hex of up to six digits is ``hex``, longer is ``hex8``.
    """
    trimmed = text.strip()
    for grammar, _, detect in _GRAMMARS:
        if grammar.match(trimmed):
            return detect(trimmed)
    if trimmed and get_named_color(trimmed) is not None:
        return ColorFormat.NAME
    return None


def require_color(value: object) -> Color:
    """
    Coerce input for operations that need a color to work on.

    A Color passes through unchanged; anything else is parsed.

    Raises:
        InvalidColorError: The input does not parse.
    """
    if isinstance(value, Color):
        return value
    parsed = parse_color(value)
    if parsed is None:
        raise InvalidColorError(f"Invalid color: {value}", value)
    return parsed
