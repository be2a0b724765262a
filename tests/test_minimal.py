# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""Tests for the reduced hex-only surface."""

import pytest

from colorkit import InvalidColorError, parse_color
from colorkit.minimal import MinimalColor, hex, parse_minimal_hex, rgb


class TestMinimalColor:

    def test_clamped_not_rounded(self):
        c = MinimalColor(300, -5, 12.4)
        assert (c.red, c.green, c.blue, c.alpha) == (255, 0, 12.4, 1.0)

    def test_hex_output(self):
        c = MinimalColor(300, -5, 12.4)
        assert c.to_hex() == "#ff000c"
        assert c.to_hex8() == "#ff000cff"

    def test_to_string(self):
        assert str(MinimalColor(300, -5, 12.4)) == "rgb(255, 0, 12.4)"
        assert rgb(255, 0, 0, 0.5).to_string() == "rgba(255, 0, 0, 0.5)"

    def test_to_rgb(self):
        assert rgb(1, 2, 3).to_rgb() == {"r": 1, "g": 2, "b": 3, "a": 1.0}

    def test_clone(self):
        c = rgb(1, 2, 3, 0.5)
        assert c.clone() == c
        assert c.clone() is not c


class TestMinimalHex:

    def test_forms(self):
        assert parse_minimal_hex("#abc") == MinimalColor(170, 187, 204)
        assert parse_minimal_hex("3B82F6") == MinimalColor(59, 130, 246)
        assert parse_minimal_hex("#ff000080").a == pytest.approx(0.5)

    @pytest.mark.parametrize("bad", ["f00f", "#12345", "nope", ""])
    def test_rejects(self, bad):
        assert parse_minimal_hex(bad) is None

    def test_strict_hex_raises(self):
        with pytest.raises(InvalidColorError, match="Invalid HEX color"):
            hex("nope")

    def test_strict_hex_is_value_error(self):
        with pytest.raises(ValueError):
            hex("#12")

    @pytest.mark.parametrize("value", ["#3b82f6", "#abc", "#ff000080", "#00000000"])
    def test_agrees_with_full_parser(self, value):
        minimal = hex(value)
        full = parse_color(value)
        assert minimal.to_hex() == full.to_hex()
        assert minimal.a == full.a
