# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Format records for color conversion.

All types in this module are immutable (frozen dataclasses). They carry
no identity: the canonical value is always colorkit.Color.
"""

from colorkit.schema.formats import (
    CmykColor,
    ColorFormat,
    FormatRecord,
    HslColor,
    HsvColor,
    HwbColor,
    RgbColor,
    record_from_mapping,
)

__all__ = [
    # Output formats
    "ColorFormat",
    # Records
    "RgbColor",
    "HslColor",
    "HsvColor",
    "HwbColor",
    "CmykColor",
    "FormatRecord",
    # Structured input
    "record_from_mapping",
]
