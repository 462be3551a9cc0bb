"""Enumerations for the color picker."""

from enum import Enum
from typing import Optional


class Surface(str, Enum):
    """Interactive input surfaces a pointer can drive.

    Tracks are one-dimensional sliders and only read the x coordinate.
    Areas are two-dimensional; their y axis is inverted (top = maximum).
    """

    # Tracks
    HUE = "hue"
    SATURATION = "saturation"                # HSV saturation
    SATURATION_HSL = "saturation_hsl"        # HSL saturation
    VALUE = "value"
    LIGHTNESS = "lightness"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    ALPHA = "alpha"

    # Areas
    HSV_SATURATION_VALUE = "hsv_saturation_value"    # the SV rectangle
    HSV_HUE_SATURATION = "hsv_hue_saturation"
    HSV_HUE_VALUE = "hsv_hue_value"
    HSL_SATURATION_LIGHTNESS = "hsl_saturation_lightness"
    HSL_HUE_SATURATION = "hsl_hue_saturation"
    HSL_HUE_LIGHTNESS = "hsl_hue_lightness"
    RGB_RED_GREEN = "rgb_red_green"
    RGB_RED_BLUE = "rgb_red_blue"
    RGB_BLUE_GREEN = "rgb_blue_green"
    HUE_WHEEL = "hue_wheel"

    @property
    def is_track(self) -> bool:
        """True for one-dimensional sliders."""
        return self in _TRACKS

    @property
    def is_area(self) -> bool:
        """True for two-dimensional areas, including the hue wheel."""
        return not self.is_track


_TRACKS = frozenset({
    Surface.HUE,
    Surface.SATURATION,
    Surface.SATURATION_HSL,
    Surface.VALUE,
    Surface.LIGHTNESS,
    Surface.RED,
    Surface.GREEN,
    Surface.BLUE,
    Surface.ALPHA,
})


class Channel(str, Enum):
    """Channels editable through a discrete numeric field."""

    RED = "red"                        # 0-255
    GREEN = "green"                    # 0-255
    BLUE = "blue"                      # 0-255
    HUE = "hue"                        # degrees 0-360
    SATURATION = "saturation"          # HSV saturation, percent
    VALUE = "value"                    # percent
    SATURATION_HSL = "saturation_hsl"  # HSL saturation, percent
    LIGHTNESS = "lightness"            # percent
    ALPHA = "alpha"                    # percent

    @property
    def max_value(self) -> float:
        """Upper bound of the typed value (the lower bound is always 0)."""
        if self in (Channel.RED, Channel.GREEN, Channel.BLUE):
            return 255.0
        if self is Channel.HUE:
            return 360.0
        return 100.0

    @property
    def surface(self) -> Surface:
        """The track surface that edits the same channel."""
        return Surface(self.value)


class ColorModel(str, Enum):
    """Channel set exposed by the slider-only picker."""

    RGB = "rgb"
    HSV = "hsv"
    HSL = "hsl"

    def tracks(self, enable_alpha: bool = True) -> tuple[Surface, ...]:
        """Slider tracks for this model, with the alpha track when enabled."""
        tracks = {
            ColorModel.RGB: (Surface.RED, Surface.GREEN, Surface.BLUE),
            ColorModel.HSV: (Surface.HUE, Surface.SATURATION, Surface.VALUE),
            ColorModel.HSL: (Surface.HUE, Surface.SATURATION_HSL, Surface.LIGHTNESS),
        }[self]
        return tracks + (Surface.ALPHA,) if enable_alpha else tracks


class PaletteType(str, Enum):
    """Combination of 2D area and companion track shown by the full picker."""

    HSV = "hsv"
    HSV_WITH_HUE = "hsv_with_hue"
    HSV_WITH_VALUE = "hsv_with_value"
    HSV_WITH_SATURATION = "hsv_with_saturation"
    HSL = "hsl"
    HSL_WITH_HUE = "hsl_with_hue"
    HSL_WITH_LIGHTNESS = "hsl_with_lightness"
    HSL_WITH_SATURATION = "hsl_with_saturation"
    RGB_WITH_BLUE = "rgb_with_blue"
    RGB_WITH_GREEN = "rgb_with_green"
    RGB_WITH_RED = "rgb_with_red"
    HUE_WHEEL = "hue_wheel"

    @property
    def area(self) -> Surface:
        """The 2D surface of this palette."""
        return _PALETTE_SURFACES[self][0]

    @property
    def track(self) -> Optional[Surface]:
        """The companion slider, or None when the palette has no slider."""
        return _PALETTE_SURFACES[self][1]


# Each area drives two channels; the track supplies the remaining one.
_PALETTE_SURFACES: dict[PaletteType, tuple[Surface, Optional[Surface]]] = {
    PaletteType.HSV: (Surface.HSV_SATURATION_VALUE, None),
    PaletteType.HSV_WITH_HUE: (Surface.HSV_SATURATION_VALUE, Surface.HUE),
    PaletteType.HSV_WITH_VALUE: (Surface.HSV_HUE_SATURATION, Surface.VALUE),
    PaletteType.HSV_WITH_SATURATION: (Surface.HSV_HUE_VALUE, Surface.SATURATION),
    PaletteType.HSL: (Surface.HSL_SATURATION_LIGHTNESS, None),
    PaletteType.HSL_WITH_HUE: (Surface.HSL_SATURATION_LIGHTNESS, Surface.HUE),
    PaletteType.HSL_WITH_LIGHTNESS: (Surface.HSL_HUE_SATURATION, Surface.LIGHTNESS),
    PaletteType.HSL_WITH_SATURATION: (Surface.HSL_HUE_LIGHTNESS, Surface.SATURATION_HSL),
    PaletteType.RGB_WITH_BLUE: (Surface.RGB_RED_GREEN, Surface.BLUE),
    PaletteType.RGB_WITH_GREEN: (Surface.RGB_RED_BLUE, Surface.GREEN),
    PaletteType.RGB_WITH_RED: (Surface.RGB_BLUE_GREEN, Surface.RED),
    PaletteType.HUE_WHEEL: (Surface.HUE_WHEEL, Surface.VALUE),
}


class ColorLabelType(str, Enum):
    """Formats available for the read-only color label."""

    HEX = "hex"
    RGB = "rgb"
    HSV = "hsv"
    HSL = "hsl"
