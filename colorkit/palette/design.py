# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Design-system palettes keyed 50-950.

Both generators return ``{key: "#rrggbb"}`` with the input at key 500.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from colorkit.core import ColorInput, require_color
from colorkit.mixing import shade, tint
from colorkit.palette.scales import generate_shades, generate_tints


@dataclass(frozen=True)
class PaletteOptions:
    """Configuration for :func:`generate_palette`."""

    # Lighter entries at keys 50, 150, 250, ...
    tints: int = 5

    # Darker entries at keys 600, 700, ... plus 950 for the darkest
    shades: int = 5

    def __post_init__(self) -> None:
        if self.tints < 0 or self.shades < 0:
            raise ValueError(f"tints and shades must be >= 0, got {self.tints}/{self.shades}")


# Key -> percentage mixed toward white (tints) or black (shades)
TAILWIND_TINTS: dict[int, float] = {50: 90, 100: 80, 200: 60, 300: 40, 400: 20}
TAILWIND_SHADES: dict[int, float] = {600: 15, 700: 30, 800: 45, 900: 60, 950: 75}


def generate_palette(color: ColorInput, options: Optional[PaletteOptions] = None) -> dict[int, str]:
    """
    Build a keyed palette from HSL tints and shades of ``color``.

    Args:
        color: Base color, placed at key 500
        options: Tint/shade counts (uses defaults if None)

    Returns:
        Hex strings keyed 50 + 100*i for tints, 500 for the base,
        500 + 100*i for shades, and always 950 for the darkest shade.
    """
    opts = options or PaletteOptions()
    c = require_color(color)

    palette: dict[int, str] = {}

    all_tints = generate_tints(c, opts.tints + 1)
    for i in range(opts.tints):
        palette[50 + i * 100] = all_tints[i].to_hex()

    palette[500] = c.to_hex()

    all_shades = generate_shades(c, opts.shades + 1)
    for i in range(1, opts.shades):
        palette[500 + i * 100] = all_shades[i].to_hex()
    palette[950] = all_shades[opts.shades].to_hex()

    return palette


def generate_tailwind_palette(color: ColorInput) -> dict[int, str]:
    """Fixed 11-step palette using Tailwind-style mix percentages."""
    c = require_color(color)
    palette = {key: tint(c, amount).to_hex() for key, amount in TAILWIND_TINTS.items()}
    palette[500] = c.to_hex()
    palette.update({key: shade(c, amount).to_hex() for key, amount in TAILWIND_SHADES.items()})
    return palette
