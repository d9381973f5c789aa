"""Tests for background lightness enforcement."""

import pytest

from theme_color_engine.color import color_from_hex, hue_distance
from theme_color_engine.palette.lightness import (
    DARK_BG_MAX_LIGHTNESS,
    LIGHT_BG_MIN_LIGHTNESS,
    enforce_background_lightness,
)


@pytest.mark.parametrize("value", ["#101010", "#1a1b26", "#000000", "#2b0a0a"])
def test_dark_no_op(value) -> None:
    assert enforce_background_lightness(value, False) == value


@pytest.mark.parametrize("value", ["#ffffff", "#f0f0f0", "#e1e2e7"])
def test_light_no_op(value) -> None:
    assert enforce_background_lightness(value, True) == value


def test_no_op_keeps_input_spelling() -> None:
    assert enforce_background_lightness("#1A1B26", False) == "#1A1B26"


def test_bright_background_darkened_for_dark_theme() -> None:
    source = color_from_hex("#6a8fc0")
    result = color_from_hex(enforce_background_lightness(source.hex, False))

    assert result.hsl[2] <= DARK_BG_MAX_LIGHTNESS
    assert result.hsl[2] == pytest.approx(DARK_BG_MAX_LIGHTNESS, abs=0.5)
    assert hue_distance(result.hsl[0], source.hsl[0]) < 3
    assert result.hsl[1] == pytest.approx(source.hsl[1], abs=3)


def test_dark_background_lightened_for_light_theme() -> None:
    source = color_from_hex("#2e4a3a")
    result = color_from_hex(enforce_background_lightness(source.hex, True))

    assert result.hsl[2] >= LIGHT_BG_MIN_LIGHTNESS
    assert result.hsl[2] == pytest.approx(LIGHT_BG_MIN_LIGHTNESS, abs=0.5)
    assert hue_distance(result.hsl[0], source.hsl[0]) < 6


def test_gray_stays_gray() -> None:
    assert enforce_background_lightness("#808080", False) == "#2d2d2d"


def test_malformed_input_passes_through() -> None:
    assert enforce_background_lightness("nope", False) == "nope"


def test_rounding_does_not_overshoot_bounds() -> None:
    # Setting lightness to exactly 18 or 85 rounds to #00005c (18.04) and #b2b2ff (84.90)
    dark = color_from_hex(enforce_background_lightness("#000069", False))
    light = color_from_hex(enforce_background_lightness("#00000f", True))
    assert dark.hsl[2] <= DARK_BG_MAX_LIGHTNESS
    assert light.hsl[2] >= LIGHT_BG_MIN_LIGHTNESS
    assert hue_distance(dark.hsl[0], 240) < 1


def test_bounds_hold_across_rgb_grid() -> None:
    levels = range(0, 256, 17)
    for r in levels:
        for g in levels:
            for b in levels:
                value = "#%02x%02x%02x" % (r, g, b)
                dark = color_from_hex(enforce_background_lightness(value, False))
                light = color_from_hex(enforce_background_lightness(value, True))
                assert dark.hsl[2] <= DARK_BG_MAX_LIGHTNESS, value
                assert light.hsl[2] >= LIGHT_BG_MIN_LIGHTNESS, value
