# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""Tests for the strict constructors."""

import pytest

import colorkit
from colorkit import Color, InvalidColorError


class TestFactories:

    def test_color(self):
        assert colorkit.color("red") == Color(255, 0, 0)
        assert colorkit.color({"h": 0, "s": 100, "l": 50}) == Color(255, 0, 0)

    def test_color_raises(self):
        with pytest.raises(InvalidColorError, match="Invalid color"):
            colorkit.color("nope")

    def test_rgb(self):
        assert colorkit.rgb(1, 2, 3, 0.5) == Color(1, 2, 3, 0.5)

    def test_hsl(self):
        assert colorkit.hsl(120, 100, 50).to_hex() == "#00ff00"
        assert colorkit.hsl(0, 100, 50, 0.5).a == 0.5

    def test_hsv(self):
        assert colorkit.hsv(240, 100, 100).to_hex() == "#0000ff"

    def test_hwb(self):
        assert colorkit.hwb(0, 0, 100) == Color(0, 0, 0)
        assert colorkit.hwb(0, 100, 0) == Color(255, 255, 255)

    def test_hex(self):
        assert colorkit.hex("#3b82f6") == Color(59, 130, 246)

    def test_hex_raises(self):
        with pytest.raises(InvalidColorError, match="Invalid HEX color"):
            colorkit.hex("#12345")

    def test_cmyk(self):
        assert colorkit.cmyk(0, 0, 0, 100) == Color(0, 0, 0)
        assert colorkit.cmyk(100, 0, 0, 0) == Color(0, 255, 255)


class TestPackage:

    def test_version(self):
        assert colorkit.__version__ == "1.0.0"

    def test_all_exports_resolve(self):
        for name in colorkit.__all__:
            assert hasattr(colorkit, name), name
