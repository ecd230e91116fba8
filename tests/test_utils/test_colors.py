"""Tests for colour helpers."""

import pytest

from rxart.utils.colors import (
    adjust_hsl,
    adjust_saturation,
    blend,
    hsl_to_rgb,
    is_hex_color,
    parse_hex,
    rgb_to_hex,
    rgb_to_hsl,
)


def test_parse_hex():
    assert parse_hex("#4CAF50") == (76, 175, 80)
    assert parse_hex("4caf50") == (76, 175, 80)
    assert parse_hex(" #ffffff ") == (255, 255, 255)


@pytest.mark.parametrize("bad", ["", "#fff", "#12345g", "green", "#1234567", None])
def test_parse_hex_rejects(bad):
    assert parse_hex(bad) is None


def test_rgb_to_hex_clamps():
    assert rgb_to_hex(76, 175, 80) == "#4caf50"
    assert rgb_to_hex(-5, 300, 0) == "#00ff00"


def test_is_hex_color():
    assert is_hex_color("#abcdef")
    assert not is_hex_color("abcdef")
    assert not is_hex_color("#abc")


def test_blend_endpoints():
    assert blend("#000000", "#FFFFFF", 0.0) == "#000000"
    assert blend("#000000", "#FFFFFF", 1.0) == "#ffffff"
    # 127.5 rounds half up
    assert blend("#000000", "#ffffff", 0.5) == "#808080"


def test_blend_fails_closed():
    assert blend("oops", "#ffffff", 0.5) == "oops"
    assert blend("#123456", "oops", 0.5) == "#123456"


def test_hsl_round_trip():
    for color in ("#4caf50", "#f44336", "#2196f3", "#9e9e9e", "#000000", "#ffffff"):
        r, g, b = parse_hex(color)
        back = hsl_to_rgb(*rgb_to_hsl(r, g, b))
        assert back == pytest.approx((r, g, b), abs=1e-6)


@pytest.mark.parametrize("hsl", [(0.2, 0.5, 0.4), (0.55, 0.8, 0.35), (0.75, 0.3, 0.6), (0.9, 1.0, 0.5)])
def test_hsl_to_rgb_round_trip(hsl):
    assert rgb_to_hsl(*hsl_to_rgb(*hsl)) == pytest.approx(hsl, abs=1e-9)


def test_rgb_to_hsl_known_values():
    assert rgb_to_hsl(255, 0, 0) == pytest.approx((0.0, 1.0, 0.5))
    assert rgb_to_hsl(0, 0, 255) == pytest.approx((2 / 3, 1.0, 0.5))
    assert rgb_to_hsl(128, 128, 128)[1] == 0.0


def test_adjust_saturation():
    assert adjust_saturation("#ff0000", 0.0) == "#808080"
    assert adjust_saturation("#ff0000", 2.0) == "#ff0000"
    assert adjust_saturation("nope", 1.2) == "nope"


def test_adjust_hsl_hue_rotation():
    assert adjust_hsl("#ff0000", 120, 0, 0) == "#00ff00"
    assert adjust_hsl("#ff0000", 360, 0, 0) == "#ff0000"
    assert adjust_hsl("#ff0000", 0, 0, 0.5) == "#ffffff"
    assert adjust_hsl("bad", 10, 0.1, 0.1) == "bad"
