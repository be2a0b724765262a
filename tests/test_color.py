# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""Tests for the Color value type."""

import dataclasses
import json
import math

import pytest

from colorkit import Color, ColorFormat, CmykColor, HslColor, HsvColor, HwbColor, RgbColor

RED = Color(255, 0, 0)
BLUE_500 = Color(59, 130, 246)


class TestConstruction:

    def test_channels_clamped(self):
        c = Color(300, -10, 128)
        assert (c.r, c.g, c.b) == (255, 0, 128)

    def test_channels_rounded_half_up(self):
        assert Color(12.5, 0, 0).r == 13
        assert Color(0.4, 0, 0).r == 0
        assert isinstance(Color(12.5, 0, 0).r, int)

    def test_alpha_clamped(self):
        assert Color(0, 0, 0, 2).a == 1.0
        assert Color(0, 0, 0, -1).a == 0.0

    def test_alpha_default(self):
        assert RED.a == 1.0

    def test_nan_channel(self):
        assert Color(math.nan, 10, 10).r == 0

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            RED.r = 0

    def test_equality_and_hash(self):
        assert Color(255, 0, 0) == RED
        assert hash(Color(255, 0, 0)) == hash(RED)
        assert Color(255, 0, 0, 0.5) != RED

    def test_clone(self):
        clone = RED.clone()
        assert clone == RED
        assert clone is not RED


class TestRecords:

    def test_to_rgb(self):
        assert Color(1, 2, 3, 0.5).to_rgb() == RgbColor(1, 2, 3, 0.5)

    def test_to_hsl(self):
        assert RED.to_hsl() == HslColor(0, 100, 50, 1.0)

    def test_to_hsv(self):
        assert RED.to_hsv() == HsvColor(0, 100, 100, 1.0)

    def test_to_hwb(self):
        assert RED.to_hwb() == HwbColor(0, 0, 0, 1.0)

    def test_to_cmyk(self):
        assert RED.to_cmyk() == CmykColor(0, 100, 100, 0)

    def test_percentage_rgb(self):
        assert Color(128, 0, 255).to_percentage_rgb() == RgbColor(50, 0, 100, 1.0)


class TestStrings:

    def test_hex(self):
        assert BLUE_500.to_hex() == "#3b82f6"
        assert BLUE_500.to_hex_string() == "#3b82f6"
        assert str(BLUE_500) == "#3b82f6"

    def test_hex8(self):
        assert RED.to_hex8() == "#ff0000"
        assert Color(255, 0, 0, 0.5).to_hex8_string() == "#ff000080"

    def test_rgb(self):
        assert RED.to_rgb_string() == "rgb(255, 0, 0)"
        assert Color(255, 0, 0, 0.5).to_rgb_string() == "rgba(255, 0, 0, 0.5)"
        assert RED.to_rgba_string() == "rgba(255, 0, 0, 1)"

    def test_percentage_rgb(self):
        assert Color(128, 0, 0).to_percentage_rgb_string() == "rgb(50%, 0%, 0%)"
        assert Color(128, 0, 0, 0.5).to_percentage_rgb_string() == "rgba(50%, 0%, 0%, 0.5)"

    def test_hsl(self):
        assert BLUE_500.to_hsl_string() == "hsl(217, 91.2%, 59.8%)"
        assert Color(0, 255, 0, 0.5).to_hsl_string() == "hsla(120, 100%, 50%, 0.5)"
        assert Color(0, 255, 0).to_hsla_string() == "hsla(120, 100%, 50%, 1)"

    def test_hsv(self):
        assert RED.to_hsv_string() == "hsv(0, 100%, 100%)"
        assert BLUE_500.to_hsv_string() == "hsv(217.2, 76%, 96.5%)"

    def test_hwb(self):
        assert RED.to_hwb_string() == "hwb(0 0% 0%)"

    def test_cmyk(self):
        assert RED.to_cmyk_string() == "cmyk(0%, 100%, 100%, 0%)"

    def test_name(self):
        assert RED.to_name() == "red"
        assert Color(1, 2, 3).to_name() is None
        assert Color(255, 0, 0, 0.5).to_name() is None


class TestToString:

    @pytest.mark.parametrize(
        "fmt, expected",
        [
            (ColorFormat.HEX, "#ff0000"),
            ("hex8", "#ff0000"),
            ("rgb", "rgb(255, 0, 0)"),
            ("rgba", "rgba(255, 0, 0, 1)"),
            ("hsl", "hsl(0, 100%, 50%)"),
            ("hsla", "hsla(0, 100%, 50%, 1)"),
            ("hsv", "hsv(0, 100%, 100%)"),
            ("hsva", "hsva(0, 100%, 100%)"),
            ("hwb", "hwb(0 0% 0%)"),
            ("cmyk", "cmyk(0%, 100%, 100%, 0%)"),
            ("name", "red"),
        ],
    )
    def test_formats(self, fmt, expected):
        assert RED.to_string(fmt) == expected

    def test_default_is_hex(self):
        assert RED.to_string() == "#ff0000"

    def test_unknown_format_falls_back_to_hex(self):
        assert RED.to_string("lab") == "#ff0000"

    def test_unnamed_falls_back_to_hex(self):
        assert Color(1, 2, 3).to_string("name") == "#010203"


class TestSerialization:

    def test_to_dict(self):
        assert Color(1, 2, 3, 0.5).to_dict() == {"r": 1, "g": 2, "b": 3, "a": 0.5}

    def test_to_json(self):
        assert json.loads(RED.to_json()) == {"r": 255, "g": 0, "b": 0, "a": 1.0}
        assert "\n" in RED.to_json(indent=2)

    def test_from_dict(self):
        assert Color.from_dict({"r": 1, "g": 2, "b": 3}) == Color(1, 2, 3)
        assert Color.from_dict(Color(1, 2, 3, 0.5).to_dict()) == Color(1, 2, 3, 0.5)


class TestComponents:

    def test_channel_aliases(self):
        c = Color(1, 2, 3, 0.5)
        assert (c.red, c.green, c.blue, c.alpha) == (1, 2, 3, 0.5)

    def test_derived(self):
        assert BLUE_500.hue == 217
        assert BLUE_500.saturation == pytest.approx(91.2)
        assert BLUE_500.lightness == pytest.approx(59.8)
        assert BLUE_500.saturationv == pytest.approx(76.0)
        assert BLUE_500.brightness == pytest.approx(96.5)

    def test_hwb_components(self):
        gray = Color(128, 128, 128)
        assert gray.whiteness == pytest.approx(50.2)
        assert gray.blackness == pytest.approx(49.8)


class TestSetters:

    def test_rgb_setters(self):
        assert RED.set_green(255) == Color(255, 255, 0)
        assert RED.set_blue(255) == Color(255, 0, 255)
        assert RED.set_red(300).r == 255

    def test_set_alpha(self):
        assert RED.set_alpha(0.3).a == pytest.approx(0.3)

    def test_hsl_setters(self):
        assert RED.set_saturation(0).to_hex() == "#808080"
        assert RED.set_hue(120) == Color(0, 255, 0)
        assert RED.set_lightness(100) == Color(255, 255, 255)

    def test_set_brightness(self):
        assert RED.set_brightness(0) == Color(0, 0, 0)

    def test_setters_keep_alpha(self):
        translucent = Color(255, 0, 0, 0.5)
        assert translucent.set_hue(240).a == 0.5
        assert translucent.set_brightness(50).a == 0.5

    def test_original_unchanged(self):
        RED.set_red(0)
        assert RED.r == 255


class TestMethods:

    def test_manipulation_defaults(self):
        assert RED.lighten().to_hex() == "#ff3333"
        assert RED.darken().to_hex() == "#cc0000"
        assert RED.tint(50).to_hex() == "#ff8080"

    def test_chaining(self):
        assert RED.spin(120).invert() == Color(255, 0, 255)
        assert RED.complement().complement() == RED

    def test_alpha_methods(self):
        assert RED.fade(0.5).a == 0.5
        assert RED.fade_out(0.25).fade_in(0.25) == RED
        assert RED.transparent().opaque() == RED

    def test_grayscale(self):
        assert RED.grayscale() == Color(85, 85, 85)

    def test_is_valid(self):
        assert RED.is_valid()

    def test_equals(self):
        assert RED.equals("red")
        assert RED.equals({"r": 255, "g": 0, "b": 0})
        assert not RED.equals("blue")
        assert not RED.equals("nope")
