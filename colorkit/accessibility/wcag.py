# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
WCAG 2.x relative luminance, contrast ratio and readability checks.

Reference: https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from colorkit.core import Color, ColorInput, require_color
from colorkit.utils.colorspace import WCAG_THRESHOLD, rgb255_to_linear


class WcagLevel(Enum):
    AA = "AA"
    AAA = "AAA"


class TextSize(Enum):
    """Large text is 18pt, or 14pt bold, and up."""
    NORMAL = "normal"
    LARGE = "large"


# Minimum contrast ratio per (level, size)
CONTRAST_THRESHOLDS: dict[tuple[WcagLevel, TextSize], float] = {
    (WcagLevel.AA, TextSize.NORMAL): 4.5,
    (WcagLevel.AA, TextSize.LARGE): 3.0,
    (WcagLevel.AAA, TextSize.NORMAL): 7.0,
    (WcagLevel.AAA, TextSize.LARGE): 4.5,
}

_WHITE = Color(255, 255, 255)
_BLACK = Color(0, 0, 0)


def relative_luminance(color: Color) -> float:
    """Luminance of an already-parsed Color."""
    r, g, b = rgb255_to_linear((color.r, color.g, color.b), WCAG_THRESHOLD)
    return float(0.2126 * r + 0.7152 * g + 0.0722 * b)


def luminance(color: ColorInput) -> float:
    """
    WCAG relative luminance, 0 (black) to 1 (white).

    Alpha has no effect.
    """
    return relative_luminance(require_color(color))


def contrast(color1: ColorInput, color2: ColorInput) -> float:
    """Contrast ratio, 1 to 21. Symmetric in its arguments."""
    l1 = luminance(color1)
    l2 = luminance(color2)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def is_readable(
    foreground: ColorInput,
    background: ColorInput,
    level: Union[WcagLevel, str] = WcagLevel.AA,
    size: Union[TextSize, str] = TextSize.NORMAL,
) -> bool:
    """
    True if the pair meets the WCAG threshold for ``level`` and ``size``.

    Raises:
        ValueError: Unknown level or size name.
    """
    threshold = CONTRAST_THRESHOLDS[(WcagLevel(level), TextSize(size))]
    return contrast(foreground, background) >= threshold


def get_readable_color(background: ColorInput) -> Color:
    """White or black, whichever contrasts more with ``background`` (ties go to white)."""
    bg = require_color(background)
    if contrast(_WHITE, bg) >= contrast(_BLACK, bg):
        return _WHITE
    return _BLACK


def suggest_foreground(background: ColorInput) -> str:
    """
    ``"#000000"`` on light backgrounds (luminance > 0.5), else ``"#ffffff"``.

    A flat luminance cut, kept separate from :func:`get_readable_color`;
    the two can disagree for mid-luminance backgrounds.
    """
    return "#000000" if luminance(background) > 0.5 else "#ffffff"
