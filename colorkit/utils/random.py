# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""Random color generation."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from colorkit.conversion import hsl_to_rgb
from colorkit.core import Color
from colorkit.schema import HslColor
from colorkit.utils.numbers import round_to_byte


class Luminosity(Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class RandomColorOptions:
    """Constraints for :func:`random_color`."""

    # Restrict lightness to [60, 100) for LIGHT or [0, 40) for DARK
    luminance: Optional[Union[Luminosity, str]] = None

    # (low, high) in degrees; full wheel if None
    hue: Optional[tuple[float, float]] = None

    # (low, high) in percent; 0-100 if None
    saturation: Optional[tuple[float, float]] = None

    alpha: float = 1.0

    def __post_init__(self) -> None:
        if self.luminance is not None:
            object.__setattr__(self, "luminance", Luminosity(self.luminance))


_DEFAULT_RNG = random.Random()

_LIGHTNESS_RANGES = {
    Luminosity.LIGHT: (60.0, 100.0),
    Luminosity.DARK: (0.0, 40.0),
    None: (0.0, 100.0),
}


def _uniform(rng: random.Random, bounds: tuple[float, float]) -> float:
    low, high = bounds
    return rng.random() * (high - low) + low


def random_color(
    options: Optional[RandomColorOptions] = None,
    *,
    rng: Optional[random.Random] = None,
) -> Color:
    """
    Pick a random color in HSL space.

    Hue, saturation and lightness are drawn uniformly within the option
    ranges and rounded to whole numbers before conversion.

    Args:
        options: Range constraints (unconstrained if None)
        rng: Source of randomness; a shared generator if None
    """
    opts = options or RandomColorOptions()
    rng = rng or _DEFAULT_RNG

    h = _uniform(rng, opts.hue or (0.0, 360.0))
    s = _uniform(rng, opts.saturation or (0.0, 100.0))
    l = _uniform(rng, _LIGHTNESS_RANGES[opts.luminance])

    rgb = hsl_to_rgb(HslColor(round_to_byte(h), round_to_byte(s), round_to_byte(l), opts.alpha))
    return Color(rgb.r, rgb.g, rgb.b, rgb.a)


def random_hex(*, rng: Optional[random.Random] = None) -> str:
    return random_color(rng=rng).to_hex()


def random_palette(count: int = 5, *, rng: Optional[random.Random] = None) -> list[Color]:
    return [random_color(rng=rng) for _ in range(count)]
