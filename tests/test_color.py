"""Tests for hookline.color module."""

from hookline.color import FISH_HUE_PER_VALUE, fish_color, hsl_to_rgb


class TestHslToRgb:
    """Tests for the hsl_to_rgb conversion."""

    def test_primary_colors(self):
        assert hsl_to_rgb(0, 1.0, 0.5) == (255, 0, 0)
        assert hsl_to_rgb(120, 1.0, 0.5) == (0, 255, 0)
        assert hsl_to_rgb(240, 1.0, 0.5) == (0, 0, 255)

    def test_hue_wraps(self):
        assert hsl_to_rgb(360, 1.0, 0.5) == hsl_to_rgb(0, 1.0, 0.5)
        assert hsl_to_rgb(480, 1.0, 0.5) == hsl_to_rgb(120, 1.0, 0.5)

    def test_zero_saturation_is_gray(self):
        r, g, b = hsl_to_rgb(200, 0.0, 0.5)
        assert r == g == b

    def test_values_in_valid_range(self):
        for hue in range(0, 720, 15):
            assert all(0 <= v <= 255 for v in hsl_to_rgb(hue, 0.7, 0.5))


class TestFishColor:
    def test_hue_follows_value(self):
        assert fish_color(60) == hsl_to_rgb(60 * FISH_HUE_PER_VALUE, 0.7, 0.5)

    def test_returns_ints(self):
        color = fish_color(42)
        assert len(color) == 3
        assert all(isinstance(v, int) for v in color)

    def test_value_zero_is_red_hue(self):
        r, g, b = fish_color(0)
        assert r > g and r > b
        assert g == b
