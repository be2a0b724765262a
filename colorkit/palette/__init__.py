# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Palette generators.
"""

from colorkit.palette.design import (
    TAILWIND_SHADES,
    TAILWIND_TINTS,
    PaletteOptions,
    generate_palette,
    generate_tailwind_palette,
)
from colorkit.palette.scales import generate_scale, generate_shades, generate_tints, generate_tones

__all__ = [
    # Sequences
    "generate_tints",
    "generate_shades",
    "generate_tones",
    "generate_scale",
    # Keyed palettes
    "generate_palette",
    "generate_tailwind_palette",
    "PaletteOptions",
    "TAILWIND_TINTS",
    "TAILWIND_SHADES",
]
