# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""Tests for the hue-wheel harmony generators."""

import pytest

from colorkit import (
    Color,
    InvalidColorError,
    analogous,
    complementary,
    monochromatic,
    parse_color,
    split_complementary,
    tetradic,
    triadic,
)

RED = Color(255, 0, 0)


def _assert_colors_close(actual, expected_hex):
    """Channel-wise comparison allowing one unit of rounding."""
    assert len(actual) == len(expected_hex)
    for color, hex_value in zip(actual, expected_hex):
        expected = parse_color(hex_value)
        for got, want in ((color.r, expected.r), (color.g, expected.g), (color.b, expected.b)):
            assert abs(got - want) <= 1, f"{color.to_hex()} vs {hex_value}"


class TestComplementary:

    def test_red(self):
        assert complementary(RED) == [Color(0, 255, 255)]


class TestTriadic:

    def test_hues(self):
        hues = [c.hue for c in triadic(RED)]
        assert hues == [0, 120, 240]

    def test_primaries(self):
        assert triadic("red") == [RED, Color(0, 255, 0), Color(0, 0, 255)]


class TestHsvHarmonies:

    def test_tetradic(self):
        result = tetradic(RED)
        assert result[0] is RED
        _assert_colors_close(result, ["#ff0000", "#80ff00", "#00ffff", "#8000ff"])

    def test_split_complementary(self):
        _assert_colors_close(split_complementary(RED), ["#ff0000", "#00ff80", "#0080ff"])

    def test_analogous_default(self):
        _assert_colors_close(analogous(RED), ["#ff0080", "#ff0000", "#ff8000"])

    def test_analogous_centered_on_input(self):
        result = analogous("#3b82f6", count=5, angle=20)
        assert len(result) == 5
        assert result[2].hue == pytest.approx(Color(59, 130, 246).hue, abs=1)

    @pytest.mark.parametrize("count", [1, 2, 4, 6])
    def test_analogous_returns_count_colors(self, count):
        assert len(analogous(RED, count=count)) == count

    def test_alpha_carried(self):
        assert all(c.a == 0.5 for c in tetradic(Color(255, 0, 0, 0.5)))


class TestMonochromatic:

    def test_alternating_and_clamped(self):
        result = monochromatic(RED, 3)
        assert [c.to_hex() for c in result] == ["#ff0000", "#800000", "#ffffff", "#000000"]

    def test_length(self):
        assert len(monochromatic("#3b82f6", 5)) == 6

    def test_zero_count(self):
        assert monochromatic(RED, 0) == [RED]


class TestInvalidInput:

    def test_raises(self):
        with pytest.raises(InvalidColorError):
            triadic("not a color")
