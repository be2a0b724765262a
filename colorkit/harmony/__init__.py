# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Color harmonies: sets of colors related by fixed hue offsets.
"""

from colorkit.harmony.wheel import (
    analogous,
    complementary,
    monochromatic,
    split_complementary,
    tetradic,
    triadic,
)

__all__ = [
    "complementary",
    "triadic",
    "tetradic",
    "analogous",
    "split_complementary",
    "monochromatic",
]
