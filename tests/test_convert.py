from __future__ import annotations

import pytest

from palettd.convert import (
    color_distance,
    normalize_color,
    oklab_to_oklch,
    oklab_to_rgba,
    oklch_to_oklab,
    rgba_to_hsla,
    rgba_to_oklab,
)
from palettd.models import RGBA, OKLab
from palettd.parse import InvalidColorFormat, parse_hsl


def test_normalize_color_populates_every_representation():
    color = normalize_color("#FF6600")

    assert color.input == "#FF6600"
    assert color.hex == "#FF6600"
    assert color.rgba == RGBA(r=255, g=102, b=0, a=1.0)
    assert (color.hsla.h, color.hsla.s, color.hsla.l) == (24, 100, 50)
    assert color.oklab.L > 0
    assert color.oklch.C > 0


def test_normalize_color_uppercases_and_keeps_input():
    color = normalize_color("rgb(255 102 0 / 0.5)")

    assert color.input == "rgb(255 102 0 / 0.5)"
    assert color.hex == "#FF660080"
    assert color.hsla.a == 0.5


def test_normalize_color_raises_invalid_color_format():
    with pytest.raises(InvalidColorFormat) as excinfo:
        normalize_color("not-a-color")

    assert excinfo.value.value == "not-a-color"


@pytest.mark.parametrize(
    "value", ["#ff6600", "f60", "rgb(10 20 30 / 50%)", "hsl(200, 40%, 30%)", "#FAF5E9"]
)
def test_hex_canonicalization_is_idempotent(value):
    first = normalize_color(value).hex
    assert normalize_color(first).hex == first


def test_rgba_to_hsla_red_and_gray():
    red = rgba_to_hsla(RGBA(r=255, g=0, b=0, a=1.0))
    assert (red.h, red.s, red.l) == (0, 100, 50)

    gray = rgba_to_hsla(RGBA(r=128, g=128, b=128, a=1.0))
    assert gray.s == 0
    assert gray.l == 50


def test_rgba_to_hsla_keeps_alpha_and_hue_range():
    hsla = rgba_to_hsla(RGBA(r=255, g=0, b=1, a=0.25))
    assert 0 <= hsla.h < 360
    assert hsla.a == 0.25


def _rebuild_from_hsla(rgba):
    hsla = rgba_to_hsla(rgba)
    return parse_hsl(f"hsl({hsla.h}, {hsla.s}%, {hsla.l}%)")


def test_hsla_round_trip_stays_within_five_steps():
    steps = range(0, 256, 15)
    worst = 0
    for r in steps:
        for g in steps:
            for b in steps:
                rebuilt = _rebuild_from_hsla(RGBA(r=r, g=g, b=b, a=1.0))
                worst = max(worst, abs(rebuilt.r - r), abs(rebuilt.g - g), abs(rebuilt.b - b))

    assert worst <= 5


def test_hsla_round_trip_drifts_on_dark_saturated_colors():
    # Integer percents lose more than one channel step at low lightness.
    rgba = RGBA(r=0, g=0, b=75, a=1.0)
    hsla = rgba_to_hsla(rgba)
    rebuilt = _rebuild_from_hsla(rgba)

    assert (hsla.h, hsla.s, hsla.l) == (240, 100, 15)
    assert (rebuilt.r, rebuilt.g, rebuilt.b) == (0, 0, 77)


@pytest.mark.parametrize("hex_value", ["#FF6600", "#808080", "#0000FF", "#FFFFFF"])
def test_hsla_round_trip_exact_for_simple_colors(hex_value):
    color = normalize_color(hex_value)
    rebuilt = _rebuild_from_hsla(color.rgba)

    assert (rebuilt.r, rebuilt.g, rebuilt.b) == (color.rgba.r, color.rgba.g, color.rgba.b)


def test_rgba_to_oklab_white_and_black():
    white = rgba_to_oklab(RGBA(r=255, g=255, b=255, a=1.0))
    assert white.L == pytest.approx(1.0, abs=1e-3)
    assert white.a == pytest.approx(0.0, abs=1e-3)
    assert white.b == pytest.approx(0.0, abs=1e-3)

    black = rgba_to_oklab(RGBA(r=0, g=0, b=0, a=1.0))
    assert black.L == pytest.approx(0.0, abs=1e-6)


@pytest.mark.parametrize(
    "rgba",
    [
        RGBA(r=255, g=102, b=0, a=1.0),
        RGBA(r=1, g=2, b=3, a=1.0),
        RGBA(r=57, g=37, b=37, a=1.0),
        RGBA(r=0, g=255, b=255, a=1.0),
        RGBA(r=200, g=200, b=200, a=1.0),
    ],
)
def test_oklab_round_trip_within_one_step(rgba):
    rebuilt = oklab_to_rgba(rgba_to_oklab(rgba))

    assert abs(rebuilt.r - rgba.r) <= 1
    assert abs(rebuilt.g - rgba.g) <= 1
    assert abs(rebuilt.b - rgba.b) <= 1
    assert rebuilt.a == 1.0


def test_oklab_to_rgba_clamps_out_of_gamut_values():
    rgba = oklab_to_rgba(OKLab(L=1.2, a=0.4, b=-0.4), alpha=0.5)

    for channel in (rgba.r, rgba.g, rgba.b):
        assert 0 <= channel <= 255
    assert rgba.a == 0.5


def test_oklch_polar_round_trip():
    oklab = rgba_to_oklab(RGBA(r=20, g=90, b=200, a=1.0))
    oklch = oklab_to_oklch(oklab)
    rebuilt = oklch_to_oklab(oklch)

    assert 0 <= oklch.h < 360
    assert oklch.C >= 0
    assert rebuilt.L == pytest.approx(oklab.L)
    assert rebuilt.a == pytest.approx(oklab.a)
    assert rebuilt.b == pytest.approx(oklab.b)


def test_oklab_to_oklch_normalizes_negative_hue():
    oklch = oklab_to_oklch(OKLab(L=0.5, a=0.1, b=-0.1))
    assert oklch.h == pytest.approx(315.0)


def test_color_distance_metric_properties():
    black = rgba_to_oklab(RGBA(r=0, g=0, b=0, a=1.0))
    white = rgba_to_oklab(RGBA(r=255, g=255, b=255, a=1.0))
    gray = rgba_to_oklab(RGBA(r=128, g=128, b=128, a=1.0))
    orange = rgba_to_oklab(RGBA(r=255, g=102, b=0, a=1.0))

    assert color_distance(orange, orange) == 0
    assert color_distance(black, white) == color_distance(white, black)
    assert color_distance(black, white) > color_distance(black, gray)
    assert color_distance(orange, gray) > 0
