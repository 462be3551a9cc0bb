"""Huepicker: interactive color selection engine."""

__version__ = "0.1.0"

# Models first; the color modules import from them
from .models import Color, HSLColor, HSVColor, PickerConfig, Surface

# Controller
from .core import ColorHistory, PickerController

__all__ = [
    "Color",
    "ColorHistory",
    "HSLColor",
    "HSVColor",
    "PickerConfig",
    "PickerController",
    "Surface",
]
