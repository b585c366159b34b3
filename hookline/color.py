"""Color helpers for presentation code.

Pure functions with no pygame dependency so they can be tested in isolation.
"""

import colorsys

# Fish hue is twice the fish value, at fixed saturation and lightness
FISH_HUE_PER_VALUE = 2.0
FISH_COLOR_SATURATION = 0.7
FISH_COLOR_LIGHTNESS = 0.5


def hsl_to_rgb(hue_degrees: float, saturation: float, lightness: float) -> tuple[int, int, int]:
    """Convert HSL (hue in degrees, saturation/lightness 0-1) to an RGB tuple.

    Hue wraps around the color wheel.

    Example:
        >>> hsl_to_rgb(0, 1.0, 0.5)
        (255, 0, 0)
    """
    r, g, b = colorsys.hls_to_rgb((hue_degrees % 360) / 360.0, lightness, saturation)
    return (round(r * 255), round(g * 255), round(b * 255))


def fish_color(value: int) -> tuple[int, int, int]:
    """Body color for a fish worth ``value`` points."""
    return hsl_to_rgb(value * FISH_HUE_PER_VALUE, FISH_COLOR_SATURATION, FISH_COLOR_LIGHTNESS)
