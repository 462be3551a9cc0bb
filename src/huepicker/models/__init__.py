"""Data models for the color picker."""

from .color import Color, HSLColor, HSVColor
from .enums import Channel, ColorLabelType, ColorModel, PaletteType, Surface
from .config import PickerConfig

__all__ = [
    # Models
    "Color",
    "HSLColor",
    "HSVColor",
    "PickerConfig",
    # Enums
    "Channel",
    "ColorLabelType",
    "ColorModel",
    "PaletteType",
    "Surface",
]
