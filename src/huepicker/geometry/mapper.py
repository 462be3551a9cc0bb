"""Pointer position <-> color mapping for every input surface.

Coordinates are normalised to the surface bounds: x and y run from 0 to 1,
origin top-left, y pointing down (screen convention). Every 2D area inverts
its y axis so the top edge is the channel maximum.

Each `Surface` has exactly one `SurfaceMapping` in `_MAPPINGS`, and
`mapping_for` is the only place a surface is dispatched on.

Hue wheel convention:
    The wheel is the disc inscribed in the unit square, centre (0.5, 0.5),
    radius 0.5. Hue 0 points right (3 o'clock) and increases
    counter-clockwise as seen on screen, so hue 90 is straight up.
    Distance from the centre, divided by the radius, is saturation; points
    outside the disc clamp to saturation 1.

Indeterminate hue:
    Hue is kept from the prior color whenever the new position carries no
    hue information (wheel centre, grey results on RGB and HSL surfaces).
    This keeps the hue track marker still while a drag passes through grey.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Optional

from huepicker.colors.conversions import from_hsl, from_rgb_unit, to_hsl, to_rgb_unit
from huepicker.geometry.update import ChannelUpdate
from huepicker.models.color import HSVColor, clamp_unit
from huepicker.models.enums import Surface

logger = logging.getLogger(__name__)

# Tracks are drawn as a horizontal line through the middle of their bounds
TRACK_MARKER_Y = 0.5

_WHEEL_CENTER = 0.5
_WHEEL_RADIUS = 0.5

_RGB_INDEX = {"red": 0, "green": 1, "blue": 2}


def _scale(channel: str) -> float:
    return 360.0 if channel == "hue" else 1.0


def _hold_hue(rgb: list[float], prior: HSVColor) -> ChannelUpdate:
    """Turn unit-float RGB into an HSV update, keeping the prior hue for greys."""
    hsv = from_rgb_unit(*rgb, hue=prior.hue)
    return ChannelUpdate(hue=hsv.hue, saturation=hsv.saturation, value=hsv.value)


class SurfaceMapping(ABC):
    """Forward and inverse mapping for one surface.

    Attributes:
        channels: Names of the channels the surface drives, in (x, y) order
    """

    channels: tuple[str, ...] = ()

    @abstractmethod
    def to_update(self, x: float, y: float, prior: HSVColor) -> ChannelUpdate:
        """Map a normalised position to the channels it sets."""

    @abstractmethod
    def to_position(self, color: HSVColor) -> tuple[float, float]:
        """Map a color to the normalised marker position."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self.channels}"


# =============================================================================
# Tracks (x only)
# =============================================================================


class HsvTrack(SurfaceMapping):
    """Linear track over one canonical channel (hue, saturation, value, alpha)."""

    def __init__(self, channel: str):
        self.channels = (channel,)
        self._channel = channel
        self._scale = _scale(channel)

    def to_update(self, x: float, y: float, prior: HSVColor) -> ChannelUpdate:
        return ChannelUpdate(**{self._channel: clamp_unit(x) * self._scale})

    def to_position(self, color: HSVColor) -> tuple[float, float]:
        return getattr(color, self._channel) / self._scale, TRACK_MARKER_Y


class HslTrack(SurfaceMapping):
    """Linear track over HSL saturation or lightness."""

    def __init__(self, channel: str):
        self.channels = (channel,)
        self._channel = channel

    def to_update(self, x: float, y: float, prior: HSVColor) -> ChannelUpdate:
        hsv = from_hsl(to_hsl(prior).with_channels(**{self._channel: clamp_unit(x)}))
        return ChannelUpdate(saturation=hsv.saturation, value=hsv.value)

    def to_position(self, color: HSVColor) -> tuple[float, float]:
        return getattr(to_hsl(color), self._channel), TRACK_MARKER_Y


class RgbTrack(SurfaceMapping):
    """Linear track over one RGB channel, other two channels preserved."""

    def __init__(self, channel: str):
        self.channels = (channel,)
        self._index = _RGB_INDEX[channel]

    def to_update(self, x: float, y: float, prior: HSVColor) -> ChannelUpdate:
        rgb = list(to_rgb_unit(prior))
        rgb[self._index] = clamp_unit(x)
        return _hold_hue(rgb, prior)

    def to_position(self, color: HSVColor) -> tuple[float, float]:
        return to_rgb_unit(color)[self._index], TRACK_MARKER_Y


# =============================================================================
# Areas (x and inverted y)
# =============================================================================


class HsvArea(SurfaceMapping):
    """Rectangle over two canonical channels."""

    def __init__(self, x_channel: str, y_channel: str):
        self.channels = (x_channel, y_channel)

    def to_update(self, x: float, y: float, prior: HSVColor) -> ChannelUpdate:
        x_channel, y_channel = self.channels
        return ChannelUpdate(**{
            x_channel: clamp_unit(x) * _scale(x_channel),
            y_channel: (1.0 - clamp_unit(y)) * _scale(y_channel),
        })

    def to_position(self, color: HSVColor) -> tuple[float, float]:
        x_channel, y_channel = self.channels
        return (
            getattr(color, x_channel) / _scale(x_channel),
            1.0 - getattr(color, y_channel) / _scale(y_channel),
        )


class HslArea(SurfaceMapping):
    """Rectangle over two HSL channels."""

    def __init__(self, x_channel: str, y_channel: str):
        self.channels = (x_channel, y_channel)

    def to_update(self, x: float, y: float, prior: HSVColor) -> ChannelUpdate:
        x_channel, y_channel = self.channels
        hsl = to_hsl(prior).with_channels(**{
            x_channel: clamp_unit(x) * _scale(x_channel),
            y_channel: (1.0 - clamp_unit(y)) * _scale(y_channel),
        })
        hsv = from_hsl(hsl)
        return ChannelUpdate(hue=hsv.hue, saturation=hsv.saturation, value=hsv.value)

    def to_position(self, color: HSVColor) -> tuple[float, float]:
        x_channel, y_channel = self.channels
        hsl = to_hsl(color)
        return (
            getattr(hsl, x_channel) / _scale(x_channel),
            1.0 - getattr(hsl, y_channel) / _scale(y_channel),
        )


class RgbArea(SurfaceMapping):
    """Rectangle over two RGB channels, the third preserved."""

    def __init__(self, x_channel: str, y_channel: str):
        self.channels = (x_channel, y_channel)
        self._x_index = _RGB_INDEX[x_channel]
        self._y_index = _RGB_INDEX[y_channel]

    def to_update(self, x: float, y: float, prior: HSVColor) -> ChannelUpdate:
        rgb = list(to_rgb_unit(prior))
        rgb[self._x_index] = clamp_unit(x)
        rgb[self._y_index] = 1.0 - clamp_unit(y)
        return _hold_hue(rgb, prior)

    def to_position(self, color: HSVColor) -> tuple[float, float]:
        rgb = to_rgb_unit(color)
        return rgb[self._x_index], 1.0 - rgb[self._y_index]


class HueWheel(SurfaceMapping):
    """Disc: angle is hue, distance from the centre is saturation."""

    channels = ("hue", "saturation")

    def to_update(self, x: float, y: float, prior: HSVColor) -> ChannelUpdate:
        dx = x - _WHEEL_CENTER
        dy = _WHEEL_CENTER - y  # screen y points down
        distance = math.hypot(dx, dy) / _WHEEL_RADIUS
        if distance == 0.0:
            return ChannelUpdate(saturation=0.0)
        hue = math.degrees(math.atan2(dy, dx)) % 360.0
        return ChannelUpdate(hue=hue, saturation=min(distance, 1.0))

    def to_position(self, color: HSVColor) -> tuple[float, float]:
        radius = _WHEEL_RADIUS * color.saturation
        angle = math.radians(color.hue)
        return (
            _WHEEL_CENTER + radius * math.cos(angle),
            _WHEEL_CENTER - radius * math.sin(angle),
        )


# =============================================================================
# Dispatch
# =============================================================================

_MAPPINGS: dict[Surface, SurfaceMapping] = {
    Surface.HUE: HsvTrack("hue"),
    Surface.SATURATION: HsvTrack("saturation"),
    Surface.VALUE: HsvTrack("value"),
    Surface.ALPHA: HsvTrack("alpha"),
    Surface.SATURATION_HSL: HslTrack("saturation"),
    Surface.LIGHTNESS: HslTrack("lightness"),
    Surface.RED: RgbTrack("red"),
    Surface.GREEN: RgbTrack("green"),
    Surface.BLUE: RgbTrack("blue"),
    Surface.HSV_SATURATION_VALUE: HsvArea("saturation", "value"),
    Surface.HSV_HUE_SATURATION: HsvArea("hue", "saturation"),
    Surface.HSV_HUE_VALUE: HsvArea("hue", "value"),
    Surface.HSL_SATURATION_LIGHTNESS: HslArea("saturation", "lightness"),
    Surface.HSL_HUE_SATURATION: HslArea("hue", "saturation"),
    Surface.HSL_HUE_LIGHTNESS: HslArea("hue", "lightness"),
    Surface.RGB_RED_GREEN: RgbArea("red", "green"),
    Surface.RGB_RED_BLUE: RgbArea("red", "blue"),
    Surface.RGB_BLUE_GREEN: RgbArea("blue", "green"),
    Surface.HUE_WHEEL: HueWheel(),
}


def mapping_for(surface: Surface | str) -> SurfaceMapping:
    """
    Get the mapping for a surface.

    Raises:
        ValueError: If `surface` is not a Surface name
    """
    return _MAPPINGS[Surface(surface)]


def position_to_update(
    surface: Surface | str, x: float, y: float, prior: HSVColor
) -> ChannelUpdate:
    """
    Map a normalised pointer position on `surface` to a channel update.

    Args:
        surface: The surface under the pointer
        x, y: Position normalised to the surface bounds (re-clamped here;
            the wheel clamps its radius instead)
        prior: The color before the edit, for channels the surface keeps

    Returns:
        The partial update; apply it with `update.apply(prior)`
    """
    return mapping_for(surface).to_update(x, y, prior)


def color_to_position(surface: Surface | str, color: HSVColor) -> tuple[float, float]:
    """Marker position of `color` on `surface`, the inverse of `position_to_update`."""
    return mapping_for(surface).to_position(color)


def normalize_pointer(
    surface: Surface | str, px: float, py: float, width: float, height: float
) -> Optional[tuple[float, float]]:
    """
    Convert local pixel coordinates into normalised surface coordinates.

    The hue wheel uses the largest square centred in the bounds, and its
    coordinates are not clamped so distance beyond the rim stays visible to
    the mapping (which clamps saturation to 1). Other surfaces clamp to the
    bounds, so a drag slightly past an edge pins to that edge.

    Returns:
        (x, y), or None for non-finite input or a surface with no extent
        (zero-radius wheel, zero-width track)
    """
    if not all(math.isfinite(v) for v in (px, py, width, height)):
        logger.debug(f"Ignoring non-finite pointer input ({px}, {py}) in {width}x{height}")
        return None

    surface = Surface(surface)
    if surface is Surface.HUE_WHEEL:
        size = min(width, height)
        if size <= 0:
            return None
        return (px - (width - size) / 2) / size, (py - (height - size) / 2) / size

    if width <= 0:
        return None
    if surface.is_track:
        return clamp_unit(px / width), TRACK_MARKER_Y
    if height <= 0:
        return None
    return clamp_unit(px / width), clamp_unit(py / height)
