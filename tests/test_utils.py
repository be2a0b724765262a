# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""Tests for distance metrics, random colors, gradients and name helpers."""

import random
import re

import numpy as np
import pytest

from colorkit import (
    Color,
    GradientOptions,
    GradientStop,
    GradientType,
    Luminosity,
    RandomColorOptions,
    closest_named_color,
    color_distance,
    create_gradient,
    delta_e,
    named_color,
    parse_gradient,
    random_color,
    random_hex,
    random_palette,
)
from colorkit.utils.colorspace import WCAG_THRESHOLD, rgb255_to_lab, srgb_to_linear


class TestColorspace:

    def test_linearization_branches(self):
        result = srgb_to_linear(np.array([0.0, 0.04, 1.0]))
        np.testing.assert_allclose(result, [0.0, 0.04 / 12.92, 1.0])

    def test_thresholds_agree_on_bytes(self):
        values = np.arange(256) / 255.0
        np.testing.assert_allclose(srgb_to_linear(values), srgb_to_linear(values, WCAG_THRESHOLD))

    def test_white_lab(self):
        np.testing.assert_allclose(rgb255_to_lab((255, 255, 255)), [100.0, 0.0, 0.0], atol=0.01)


class TestDistance:

    def test_rgb_distance(self):
        assert color_distance("black", "white") == pytest.approx(441.673, abs=0.001)
        assert color_distance("red", "red") == 0.0

    def test_delta_e(self):
        assert delta_e("black", "white") == pytest.approx(100.0, abs=0.1)
        assert delta_e("#3b82f6", "#3b82f6") == 0.0

    def test_delta_e_small_for_near_colors(self):
        assert delta_e("#808080", "#818181") < 1.0

    def test_symmetric(self):
        assert delta_e("red", "blue") == pytest.approx(delta_e("blue", "red"))


class TestRandom:

    def test_seeded_is_deterministic(self):
        assert random_color(rng=random.Random(7)) == random_color(rng=random.Random(7))

    def test_light(self):
        rng = random.Random(1)
        opts = RandomColorOptions(luminance="light")
        for _ in range(50):
            assert random_color(opts, rng=rng).lightness >= 59

    def test_dark(self):
        rng = random.Random(2)
        opts = RandomColorOptions(luminance=Luminosity.DARK)
        for _ in range(50):
            assert random_color(opts, rng=rng).lightness <= 41

    def test_alpha(self):
        assert random_color(RandomColorOptions(alpha=0.5), rng=random.Random(0)).a == 0.5

    def test_fixed_hue_and_saturation(self):
        opts = RandomColorOptions(hue=(120, 120), saturation=(100, 100), luminance="dark")
        c = random_color(opts, rng=random.Random(3))
        assert c.r == c.b == 0

    def test_random_hex(self):
        assert re.match(r"^#[0-9a-f]{6}$", random_hex(rng=random.Random(4)))

    def test_palette(self):
        palette = random_palette(4, rng=random.Random(5))
        assert len(palette) == 4
        assert all(isinstance(c, Color) for c in palette)

    def test_invalid_luminosity(self):
        with pytest.raises(ValueError):
            RandomColorOptions(luminance="bright")


class TestCreateGradient:

    def test_linear(self):
        css = create_gradient([("red", 0), ("blue", 100)])
        assert css == "linear-gradient(90deg, #ff0000 0%, #0000ff 100%)"

    def test_radial(self):
        css = create_gradient([("red", 0), ("blue", 100)], GradientOptions(type="radial"))
        assert css == "radial-gradient(circle, #ff0000 0%, #0000ff 100%)"

    def test_angle_and_fractional_position(self):
        css = create_gradient([GradientStop("#fff", 12.5)], GradientOptions(angle=45))
        assert css == "linear-gradient(45deg, #ffffff 12.5%)"

    def test_sorted_by_position(self):
        css = create_gradient([("blue", 100), ("red", 0)])
        assert css == "linear-gradient(90deg, #ff0000 0%, #0000ff 100%)"

    def test_invalid_stop_skipped(self):
        css = create_gradient([("red", 0), ("nope", 50), (Color(0, 0, 255), 100)])
        assert css == "linear-gradient(90deg, #ff0000 0%, #0000ff 100%)"

    def test_invalid_type(self):
        with pytest.raises(ValueError):
            GradientOptions(type="conic")


class TestParseGradient:

    def test_linear(self):
        parsed = parse_gradient("linear-gradient(90deg, #ff0000 0%, #0000ff 100%)")
        assert parsed.type is GradientType.LINEAR
        assert parsed.angle == 90
        assert parsed.stops == (GradientStop("#ff0000", 0.0), GradientStop("#0000ff", 100.0))

    def test_functional_stop_colors(self):
        parsed = parse_gradient("linear-gradient(45deg, rgb(255, 0, 0) 10%, blue 90%)")
        assert [s.color for s in parsed.stops] == ["rgb(255, 0, 0)", "blue"]
        assert [s.position for s in parsed.stops] == [10.0, 90.0]

    def test_missing_position_is_zero(self):
        parsed = parse_gradient("linear-gradient(180deg, red, blue)")
        assert [s.position for s in parsed.stops] == [0.0, 0.0]

    def test_radial_drops_shape(self):
        parsed = parse_gradient("radial-gradient(circle, #ff0000 0%, #0000ff 100%)")
        assert parsed.type is GradientType.RADIAL
        assert parsed.angle == 0
        assert [s.color for s in parsed.stops] == ["#ff0000", "#0000ff"]

    def test_roundtrip_with_create(self):
        css = create_gradient([("red", 0), ("blue", 100)])
        assert create_gradient(parse_gradient(css).stops) == css

    def test_to_dict(self):
        parsed = parse_gradient("linear-gradient(90deg, red 0%)")
        assert parsed.to_dict() == {
            "type": "linear",
            "angle": 90,
            "stops": [{"color": "red", "position": 0.0}],
        }

    @pytest.mark.parametrize("css", ["red", "", "conic-gradient(red, blue)"])
    def test_not_a_gradient(self, css):
        assert parse_gradient(css) is None


class TestNamedHelpers:

    def test_named_color(self):
        assert named_color("Navy") == Color(0, 0, 128)
        assert named_color("nope") is None

    def test_closest_named_color(self):
        assert closest_named_color("#fe0101") == "red"
        assert closest_named_color(Color(1, 1, 1)) == "black"
        assert closest_named_color("nope") is None
