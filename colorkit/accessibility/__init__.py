# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Accessibility metrics (WCAG 2.x).
"""

from colorkit.accessibility.wcag import (
    CONTRAST_THRESHOLDS,
    TextSize,
    WcagLevel,
    contrast,
    get_readable_color,
    is_readable,
    luminance,
    relative_luminance,
    suggest_foreground,
)

__all__ = [
    "luminance",
    "relative_luminance",
    "contrast",
    "is_readable",
    "get_readable_color",
    "suggest_foreground",
    "WcagLevel",
    "TextSize",
    "CONTRAST_THRESHOLDS",
]
