# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Color space helpers for the perceptual metrics.

Conversion chain: sRGB -> Linear RGB -> XYZ (D65) -> approximate L*a*b*

The XYZ and Lab steps use the short-form constants common in web color
libraries. This is an approximation of CIE76, not a colorimetric
implementation.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

# Piecewise sRGB transfer thresholds. WCAG 2.x publishes 0.03928;
# IEC 61966-2-1 uses 0.04045. No 8-bit channel value falls between them.
SRGB_THRESHOLD = 0.04045
WCAG_THRESHOLD = 0.03928


# =============================================================================
# sRGB -> Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64], threshold: float = SRGB_THRESHOLD) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    - For values <= threshold: value / 12.92
    - Otherwise: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= threshold,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


def rgb255_to_linear(rgb: tuple[float, float, float], threshold: float = SRGB_THRESHOLD) -> NDArray[np.float64]:
    """Linearize 0-255 channels."""
    return srgb_to_linear(np.asarray(rgb, dtype=np.float64) / 255.0, threshold)


# =============================================================================
# Linear RGB -> XYZ -> Lab
# =============================================================================

# Linear sRGB to XYZ (D65), four-digit coefficients
_M_XYZ = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
], dtype=np.float64)

# Reference white used for normalization (Y is already 1)
_WHITE = np.array([0.9505, 1.0, 1.0890], dtype=np.float64)

_LAB_EPSILON = 0.008856


def linear_rgb_to_xyz(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    return _M_XYZ @ np.asarray(linear, dtype=np.float64)


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Approximate L*a*b* from XYZ.

    Returns:
        Array of [L, a, b]
    """
    t = np.asarray(xyz, dtype=np.float64) / _WHITE
    f = np.where(t > _LAB_EPSILON, np.cbrt(t), 7.787 * t + 16.0 / 116.0)
    fx, fy, fz = f
    return np.array([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], dtype=np.float64)


def rgb255_to_lab(rgb: tuple[float, float, float]) -> NDArray[np.float64]:
    return xyz_to_lab(linear_rgb_to_xyz(rgb255_to_linear(rgb)))
