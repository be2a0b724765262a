# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Colorkit -- color parsing, conversion and manipulation.

Parses colors from CSS-style strings and structured records into one
immutable value, then derives conversions, adjustments, mixes,
harmonies, palettes and WCAG metrics from it.

Quick start::

    from colorkit import parse_color, generate_tailwind_palette

    c = parse_color("#3b82f6")
    c.to_hsl_string()                # "hsl(217, 91.2%, 59.8%)"
    c.lighten(10).to_hex()
    generate_tailwind_palette(c)[500]  # "#3b82f6"
"""

from __future__ import annotations

__version__ = "1.0.0"

from colorkit.accessibility import (
    TextSize,
    WcagLevel,
    contrast,
    get_readable_color,
    is_readable,
    luminance,
    suggest_foreground,
)
from colorkit.conversion import (
    NAMED_COLOR_NAMES,
    NAMED_COLORS,
    cmyk_to_rgb,
    find_closest_named_color,
    get_named_color,
    hex_to_rgb,
    hsl_to_hsv,
    hsl_to_rgb,
    hsv_to_hsl,
    hsv_to_rgb,
    hwb_to_rgb,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hex8,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hwb,
    rgb_to_name,
)
from colorkit.core import (
    Color,
    ColorInput,
    ParseResult,
    cmyk,
    color,
    detect_format,
    hex,
    hsl,
    hsv,
    hwb,
    is_valid_color,
    parse_color,
    parse_color_typed,
    rgb,
)
from colorkit.errors import ColorError, InvalidColorError
from colorkit.harmony import (
    analogous,
    complementary,
    monochromatic,
    split_complementary,
    tetradic,
    triadic,
)
from colorkit.manipulation import (
    brighten,
    complement,
    darken,
    desaturate,
    fade,
    fade_in,
    fade_out,
    grayscale,
    invert,
    lighten,
    opaque,
    saturate,
    spin,
    transparent,
)
from colorkit.mixing import BlendMode, blend, mix, shade, tint, tone
from colorkit.palette import (
    PaletteOptions,
    generate_palette,
    generate_scale,
    generate_shades,
    generate_tailwind_palette,
    generate_tints,
    generate_tones,
)
from colorkit.schema import (
    CmykColor,
    ColorFormat,
    HslColor,
    HsvColor,
    HwbColor,
    RgbColor,
)
from colorkit.utils.distance import color_distance, delta_e
from colorkit.utils.gradient import (
    GradientOptions,
    GradientStop,
    GradientType,
    ParsedGradient,
    create_gradient,
    parse_gradient,
)
from colorkit.utils.named import closest_named_color, named_color
from colorkit.utils.random import Luminosity, RandomColorOptions, random_color, random_hex, random_palette

__all__ = [
    # Core API
    "Color",
    "ColorInput",
    "parse_color",
    "detect_format",
    "is_valid_color",
    "parse_color_typed",
    "ParseResult",
    # Strict constructors
    "color",
    "rgb",
    "hsl",
    "hsv",
    "hwb",
    "hex",
    "cmyk",
    # Errors
    "ColorError",
    "InvalidColorError",
    # Format records
    "ColorFormat",
    "RgbColor",
    "HslColor",
    "HsvColor",
    "HwbColor",
    "CmykColor",
    # Codecs
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hex8",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "hsv_to_hsl",
    "hsl_to_hsv",
    "rgb_to_hwb",
    "hwb_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    # Named colors
    "NAMED_COLORS",
    "NAMED_COLOR_NAMES",
    "get_named_color",
    "rgb_to_name",
    "find_closest_named_color",
    "named_color",
    "closest_named_color",
    # Manipulation
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "brighten",
    "spin",
    "grayscale",
    "invert",
    "complement",
    "fade",
    "fade_in",
    "fade_out",
    "opaque",
    "transparent",
    # Mixing
    "mix",
    "tint",
    "shade",
    "tone",
    "blend",
    "BlendMode",
    # Harmony
    "complementary",
    "triadic",
    "tetradic",
    "analogous",
    "split_complementary",
    "monochromatic",
    # Palettes
    "generate_tints",
    "generate_shades",
    "generate_tones",
    "generate_scale",
    "generate_palette",
    "generate_tailwind_palette",
    "PaletteOptions",
    # Accessibility
    "luminance",
    "contrast",
    "is_readable",
    "get_readable_color",
    "suggest_foreground",
    "WcagLevel",
    "TextSize",
    # Distance
    "color_distance",
    "delta_e",
    # Random
    "random_color",
    "random_hex",
    "random_palette",
    "RandomColorOptions",
    "Luminosity",
    # Gradients
    "create_gradient",
    "parse_gradient",
    "GradientStop",
    "GradientOptions",
    "GradientType",
    "ParsedGradient",
    # Version
    "__version__",
]
