"""
Color space conversions.

Conversion graph around the canonical HSV value:

    RGB bytes (0-255) <-> RGB unit floats (0-1) <-> HSV <-> HSL

RGB bytes are the only lossy step (8-bit rounding). Unit-float RGB and HSL
are exact up to floating point, so the geometry code converts through them
when a surface drives RGB or HSL channels.

Every function is pure and total: out-of-range numbers are clamped, never
rejected.
"""

import math
from typing import Optional

from huepicker.models.color import Color, HSLColor, HSVColor, clamp_unit, wrap_hue

__all__ = [
    "check_invariants",
    "clamp_unit",
    "from_color",
    "from_hsl",
    "from_rgb",
    "from_rgb_unit",
    "to_color",
    "to_hsl",
    "to_rgb",
    "to_rgb_unit",
    "wrap_hue",
]


# =============================================================================
# Byte helpers
# =============================================================================


def _to_byte(unit: float) -> int:
    """Quantise a [0, 1] channel to 0-255, rounding half up."""
    return min(max(int(math.floor(unit * 255.0 + 0.5)), 0), 255)


def _from_byte(byte: float) -> float:
    return min(max(float(byte), 0.0), 255.0) / 255.0


# =============================================================================
# RGB unit floats <-> HSV
# =============================================================================


def from_rgb_unit(
    r: float, g: float, b: float, alpha: float = 1.0, hue: Optional[float] = None
) -> HSVColor:
    """
    Convert unit-float RGB to HSV.

    Args:
        r, g, b: Channels in [0, 1] (clamped)
        alpha: Opacity in [0, 1] (clamped)
        hue: Hue to use when the color is achromatic. Defaults to 0.

    Returns:
        The HSVColor
    """
    r, g, b = clamp_unit(r), clamp_unit(g), clamp_unit(b)
    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low

    saturation = 0.0 if high == 0.0 else delta / high

    if delta == 0.0:
        computed_hue = 0.0 if hue is None else hue
    elif high == r:
        computed_hue = 60.0 * (((g - b) / delta) % 6.0)
    elif high == g:
        computed_hue = 60.0 * ((b - r) / delta + 2.0)
    else:
        computed_hue = 60.0 * ((r - g) / delta + 4.0)

    return HSVColor(alpha=alpha, hue=computed_hue, saturation=saturation, value=high)


def to_rgb_unit(color: HSVColor) -> tuple[float, float, float]:
    """
    Convert HSV to unit-float RGB without quantisation.

    Returns:
        (r, g, b) each in [0, 1]
    """
    chroma = color.value * color.saturation
    sector = color.hue / 60.0
    x = chroma * (1.0 - abs(sector % 2.0 - 1.0))
    m = color.value - chroma

    index = int(sector) % 6
    if index == 0:
        r, g, b = chroma, x, 0.0
    elif index == 1:
        r, g, b = x, chroma, 0.0
    elif index == 2:
        r, g, b = 0.0, chroma, x
    elif index == 3:
        r, g, b = 0.0, x, chroma
    elif index == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return clamp_unit(r + m), clamp_unit(g + m), clamp_unit(b + m)


# =============================================================================
# RGB bytes <-> HSV
# =============================================================================


def from_rgb(
    r: float, g: float, b: float, a: float = 255, hue: Optional[float] = None
) -> HSVColor:
    """
    Convert 8-bit RGBA to the canonical HSV value.

    Achromatic input (r == g == b) has no defined hue; it gets `hue` when
    given, otherwise 0.

    Example:
        >>> from_rgb(255, 0, 0)
        HSVColor(alpha=1.0, hue=0.0, saturation=1.0, value=1.0)
    """
    return from_rgb_unit(_from_byte(r), _from_byte(g), _from_byte(b), _from_byte(a), hue=hue)


def to_rgb(color: HSVColor) -> tuple[int, int, int, int]:
    """
    Convert HSV to 8-bit RGBA, rounding each channel to the nearest byte.

    Returns:
        (r, g, b, a) each in 0-255
    """
    r, g, b = to_rgb_unit(color)
    return _to_byte(r), _to_byte(g), _to_byte(b), _to_byte(color.alpha)


def to_color(color: HSVColor) -> Color:
    """Quantise an HSVColor to a plain 8-bit `Color`."""
    r, g, b, a = to_rgb(color)
    return Color(r=r, g=g, b=b, a=a)


def from_color(color: Color, hue: Optional[float] = None) -> HSVColor:
    """Convert a plain `Color` to HSV (see `from_rgb` for `hue`)."""
    return from_rgb(color.r, color.g, color.b, color.a, hue=hue)


# =============================================================================
# HSV <-> HSL
# =============================================================================


def to_hsl(color: HSVColor) -> HSLColor:
    """
    Convert HSV to HSL.

    lightness = value * (1 - saturation / 2). HSL saturation is undefined at
    lightness 0 and 1 and reported as 0 there.
    """
    lightness = color.value * (1.0 - color.saturation / 2.0)
    if lightness <= 0.0 or lightness >= 1.0:
        saturation = 0.0
    else:
        saturation = (color.value - lightness) / min(lightness, 1.0 - lightness)
    return HSLColor(alpha=color.alpha, hue=color.hue, saturation=saturation, lightness=lightness)


def from_hsl(color: HSLColor) -> HSVColor:
    """
    Convert HSL to HSV.

    value = lightness + saturation * min(lightness, 1 - lightness). HSV
    saturation is undefined at value 0 and reported as 0 there. Hue is
    carried over unchanged.
    """
    lightness = color.lightness
    value = lightness + color.saturation * min(lightness, 1.0 - lightness)
    saturation = 0.0 if value <= 0.0 else 2.0 * (1.0 - lightness / value)
    return HSVColor(alpha=color.alpha, hue=color.hue, saturation=saturation, value=value)


# =============================================================================
# Invariants
# =============================================================================


def check_invariants(color: HSVColor) -> HSVColor:
    """
    Assert the canonical ranges hold.

    Model validation already enforces them, so a failure here means a bug in
    a conversion. Assertions are stripped under `python -O`.
    """
    assert 0.0 <= color.hue < 360.0, f"hue out of range: {color.hue}"
    assert 0.0 <= color.saturation <= 1.0, f"saturation out of range: {color.saturation}"
    assert 0.0 <= color.value <= 1.0, f"value out of range: {color.value}"
    assert 0.0 <= color.alpha <= 1.0, f"alpha out of range: {color.alpha}"
    return color
