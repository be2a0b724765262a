# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Mixing and blending.
"""

from colorkit.mixing.compositing import BlendMode, blend
from colorkit.mixing.interpolate import mix, shade, tint, tone

__all__ = [
    "mix",
    "tint",
    "shade",
    "tone",
    "blend",
    "BlendMode",
]
