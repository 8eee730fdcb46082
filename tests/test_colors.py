"""Tests for spritecast.colors — hex conversion, distance and hue helpers."""

from __future__ import annotations

import math

import pytest

from spritecast.colors import (
    RGB,
    TRANSPARENT_HEX,
    cell_to_hex,
    color_distance,
    grid_colors,
    hex_to_rgb,
    hue_angle,
    rgba_to_hex,
)


class TestRgbaToHex:
    """Tests for rgba_to_hex."""

    def test_formats_lowercase_two_digit_channels(self) -> None:
        assert rgba_to_hex(255, 10, 0) == "#ff0a00"

    def test_low_alpha_is_transparent(self) -> None:
        assert rgba_to_hex(255, 255, 255, 49) == TRANSPARENT_HEX

    def test_alpha_threshold_is_inclusive_of_fifty(self) -> None:
        assert rgba_to_hex(1, 2, 3, 50) == "#010203"

    def test_channels_are_clamped_and_rounded(self) -> None:
        assert rgba_to_hex(300, -5, 127.6) == "#ff0080"


class TestHexToRgb:
    """Tests for hex_to_rgb."""

    def test_parses_hex(self) -> None:
        assert hex_to_rgb("#0a0bff") == RGB(10, 11, 255)

    @pytest.mark.parametrize("text", ["", None, "transparent", "#00000000"])
    def test_transparent_forms_return_none(self, text: str | None) -> None:
        assert hex_to_rgb(text) is None

    @pytest.mark.parametrize("text", ["#12345", "123456", "#gg0000"])
    def test_malformed_raises(self, text: str) -> None:
        with pytest.raises(ValueError, match="Invalid hex color"):
            hex_to_rgb(text)

    def test_rgb_hex_property(self) -> None:
        assert RGB(0, 0, 255).hex == "#0000ff"
        assert hex_to_rgb(RGB(18, 52, 86).hex) == RGB(18, 52, 86)


class TestDistanceAndHue:
    """Tests for color_distance and hue_angle."""

    def test_distance_is_euclidean(self) -> None:
        assert color_distance((0, 0, 0), (3, 4, 0)) == pytest.approx(5.0)

    def test_distance_is_symmetric(self) -> None:
        a, b = RGB(10, 200, 30), RGB(90, 20, 60)
        assert color_distance(a, b) == color_distance(b, a)

    def test_red_hue_is_zero(self) -> None:
        assert hue_angle(RGB(200, 0, 0)) == pytest.approx(0.0)

    def test_green_hue_is_quarter_turn(self) -> None:
        assert hue_angle(RGB(0, 200, 0)) == pytest.approx(math.pi / 2)


class TestGridHelpers:
    """Tests for cell_to_hex and grid_colors."""

    def test_cell_to_hex(self) -> None:
        assert cell_to_hex(None) == "transparent"
        assert cell_to_hex(RGB(1, 2, 3)) == "#010203"

    def test_grid_colors_ignores_transparent(self) -> None:
        grid = [[None, RGB(1, 1, 1)], [RGB(1, 1, 1), RGB(2, 2, 2)]]
        assert grid_colors(grid) == {RGB(1, 1, 1), RGB(2, 2, 2)}
