"""Mapping between pointer positions on input surfaces and color channels."""

from .mapper import (
    TRACK_MARKER_Y,
    SurfaceMapping,
    color_to_position,
    mapping_for,
    normalize_pointer,
    position_to_update,
)
from .update import ChannelUpdate

__all__ = [
    "TRACK_MARKER_Y",
    "ChannelUpdate",
    "SurfaceMapping",
    "color_to_position",
    "mapping_for",
    "normalize_pointer",
    "position_to_update",
]
