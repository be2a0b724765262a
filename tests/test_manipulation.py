# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""Tests for the manipulation operators."""

import pytest

from colorkit import (
    Color,
    InvalidColorError,
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

RED = Color(255, 0, 0)


class TestLightness:

    def test_lighten(self):
        assert lighten(RED).to_hex() == "#ff3333"

    def test_darken(self):
        assert darken(RED).to_hex() == "#cc0000"

    def test_clamped_at_extremes(self):
        assert lighten(RED, 100) == Color(255, 255, 255)
        assert darken(RED, 100) == Color(0, 0, 0)

    def test_accepts_strings(self):
        assert lighten("#ff0000", 10) == lighten(RED, 10)

    def test_preserves_alpha(self):
        assert lighten(Color(255, 0, 0, 0.4)).a == 0.4


class TestSaturation:

    def test_desaturate_fully(self):
        assert desaturate(RED, 100).to_hex() == "#808080"

    def test_saturate_gray_pulls_toward_red(self):
        # A gray has hue 0
        result = saturate("#808080", 10)
        assert result.r > result.g == result.b

    def test_saturate_already_full(self):
        assert saturate(RED, 50) == RED


class TestSpin:

    @pytest.mark.parametrize("degrees", [0, 360, 720, -360])
    def test_full_turns_are_identity(self, degrees):
        assert spin(RED, degrees) == RED

    def test_spin_to_green(self):
        assert spin(RED, 120) == Color(0, 255, 0)

    def test_spin_negative(self):
        assert spin(RED, -120) == Color(0, 0, 255)

    def test_complement(self):
        assert complement(RED) == Color(0, 255, 255)


class TestChannels:

    def test_brighten(self):
        assert brighten(Color(0, 0, 0), 50).to_hex() == "#808080"
        assert brighten(Color(255, 255, 255), 50) == Color(255, 255, 255)

    def test_grayscale_is_unweighted_mean(self):
        assert grayscale(RED).to_hex() == "#555555"

    def test_invert(self):
        assert invert(Color(255, 0, 0, 0.5)) == Color(0, 255, 255, 0.5)

    def test_invert_twice(self):
        c = Color(12, 34, 56)
        assert invert(invert(c)) == c


class TestAlpha:

    def test_fade(self):
        assert fade(RED, 0.25) == Color(255, 0, 0, 0.25)

    def test_fade_clamped(self):
        assert fade(RED, 2).a == 1.0
        assert fade(RED, -1).a == 0.0

    def test_fade_in_and_out(self):
        assert fade_out(RED, 0.3).a == pytest.approx(0.7)
        assert fade_in(Color(255, 0, 0, 0.2), 0.5).a == pytest.approx(0.7)

    def test_opaque_and_transparent(self):
        c = Color(1, 2, 3, 0.5)
        assert opaque(c) == Color(1, 2, 3, 1.0)
        assert transparent(c) == Color(1, 2, 3, 0.0)

    def test_rgb_unchanged(self):
        faded = fade_out(Color(10, 20, 30), 0.5)
        assert (faded.r, faded.g, faded.b) == (10, 20, 30)


class TestInvalidInput:

    @pytest.mark.parametrize("op", [lighten, darken, saturate, desaturate, brighten, grayscale, invert, complement])
    def test_raises(self, op):
        with pytest.raises(InvalidColorError, match="Invalid color"):
            op("not a color")
