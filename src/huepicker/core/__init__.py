"""Picker controller, color history and display strings."""

from .controller import PickerController, parse_channel_text
from .history import ColorHistory
from .labels import channel_values, color_label, track_label

__all__ = [
    "ColorHistory",
    "PickerController",
    "channel_values",
    "color_label",
    "parse_channel_text",
    "track_label",
]
