"""Picker controller: owns the current color and the hex text buffer."""

import logging
import math
from typing import Optional, Union

from huepicker.colors.conversions import check_invariants, from_color, to_color, to_hsl, to_rgb
from huepicker.colors.hex import format_hex, parse_hex
from huepicker.core.labels import channel_values
from huepicker.geometry import color_to_position, normalize_pointer, position_to_update
from huepicker.models import Channel, Color, HSLColor, HSVColor, PickerConfig, Surface
from huepicker.protocols import ColorObserver, EditSource, HsvColorObserver
from huepicker.utils import ObserverManager

logger = logging.getLogger(__name__)

_NUMBER_SUFFIXES = ("%", "\N{DEGREE SIGN}")


def parse_channel_text(raw: Union[str, int, float]) -> Optional[float]:
    """
    Parse a typed channel value.

    Surrounding whitespace and one trailing '%' or degree sign are allowed.

    Returns:
        The number, or None for empty, non-numeric or non-finite input
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        number = float(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if text.endswith(_NUMBER_SUFFIXES):
            text = text[:-1].rstrip()
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


class PickerController:
    """
    Holds the current color and applies edits from every input source.

    There is one state, "ready", and every edit is atomic. A successful edit:

    1. recomputes the derived views (8-bit color, HSL, formatted hex),
    2. rewrites the hex text buffer, unless the edit came from that buffer,
    3. notifies observers: `on_color_changed(Color)` for every observer, then
       `on_hsv_color_changed(HSVColor)` for observers that implement it.

    Rejected input (malformed hex, non-numeric channel text, alpha edits with
    alpha disabled) returns None and changes nothing, including the
    observers, which are not called.

    Threading:
        Single-threaded. Every method completes before returning; separate
        controllers share no state.
    """

    def __init__(
        self,
        config: Optional[PickerConfig] = None,
        color: Union[HSVColor, Color, None] = None,
        hex_text: Optional[str] = None,
    ):
        """
        Initialize the controller.

        Args:
            config: Picker options (defaults to PickerConfig())
            color: Initial color; defaults to config.initial_color
            hex_text: Initial hex buffer content; when empty the buffer is
                filled from the initial color
        """
        self.config = config or PickerConfig()
        self._observers = ObserverManager[ColorObserver](observer_type_name="color")

        initial = color if color is not None else self.config.initial_hsv()
        self._hsv = check_invariants(self._admit(initial))
        self._refresh_views()
        self._hex_text = hex_text if hex_text else self._hex_value

        logger.info(
            f"PickerController initialized: color={self._hex_value}, "
            f"palette={self.config.palette_type.value}, alpha={self.config.enable_alpha}"
        )

    # =================================================================
    # Read-only views
    # =================================================================

    @property
    def enable_alpha(self) -> bool:
        """Whether alpha edits are honoured."""
        return self.config.enable_alpha

    @property
    def hsv(self) -> HSVColor:
        """The canonical color."""
        return self._hsv

    @property
    def color(self) -> Color:
        """The current color quantised to 8-bit RGBA."""
        return self._color

    @property
    def rgb(self) -> tuple[int, int, int, int]:
        """The current color as (r, g, b, a) bytes."""
        return self._rgb

    @property
    def hsl(self) -> HSLColor:
        """The current color in HSL."""
        return self._hsl

    @property
    def hex_value(self) -> str:
        """The current color formatted as hex (8 digits when alpha is enabled)."""
        return self._hex_value

    @property
    def hex_text(self) -> str:
        """The hex text buffer, exactly as last typed or synced."""
        return self._hex_text

    @property
    def active_surfaces(self) -> tuple[Surface, ...]:
        """Area and companion track for the configured palette type."""
        palette = self.config.palette_type
        return tuple(s for s in (palette.area, palette.track) if s is not None)

    @property
    def slider_tracks(self) -> tuple[Surface, ...]:
        """Tracks of the slider-only picker for the configured color model."""
        return self.config.color_model.tracks(self.enable_alpha)

    def marker_position(self, surface: Surface) -> tuple[float, float]:
        """Normalised marker position of the current color on `surface`."""
        return color_to_position(surface, self._hsv)

    def channel_labels(self) -> list[str]:
        """Display values for `slider_tracks`, in the same order."""
        return channel_values(self._hsv, self.config.color_model, self.enable_alpha)

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: Union[ColorObserver, HsvColorObserver]) -> None:
        """
        Register an observer to receive color changes.

        Args:
            observer: Object implementing ColorObserver, HsvColorObserver or both
        """
        self._observers.register(observer)

    def unregister_observer(self, observer: Union[ColorObserver, HsvColorObserver]) -> None:
        """
        Unregister an observer.

        Args:
            observer: Previously registered observer
        """
        self._observers.unregister(observer)

    def _notify_observers(self) -> None:
        self._observers.notify_with_filter(
            "on_color_changed", lambda obs: isinstance(obs, ColorObserver), self._color
        )
        self._observers.notify_with_filter(
            "on_hsv_color_changed", lambda obs: isinstance(obs, HsvColorObserver), self._hsv
        )

    # =================================================================
    # Edits
    # =================================================================

    def apply_geometry_input(self, surface: Surface, x: float, y: float) -> Optional[HSVColor]:
        """
        Apply a pointer position on a surface.

        Only the channels the surface drives change; everything else is
        preserved. Safe to call for every pointer-move event of a drag.

        Args:
            surface: Surface under the pointer
            x, y: Position normalised to the surface bounds

        Returns:
            The new color, or None when the edit was ignored (non-finite
            position, or alpha track with alpha disabled)
        """
        surface = Surface(surface)
        if not (math.isfinite(x) and math.isfinite(y)):
            logger.debug(f"Ignoring non-finite position on {surface}: ({x}, {y})")
            return None
        if surface is Surface.ALPHA and not self.enable_alpha:
            logger.debug("Ignoring alpha track input: alpha is disabled")
            return None

        update = position_to_update(surface, x, y, self._hsv)
        return self._commit(update.apply(self._hsv), EditSource.GEOMETRY)

    def apply_pointer_input(
        self, surface: Surface, px: float, py: float, width: float, height: float
    ) -> Optional[HSVColor]:
        """
        Apply a pointer position given in the surface's local pixels.

        Returns:
            The new color, or None for degenerate bounds or non-finite input
        """
        position = normalize_pointer(surface, px, py, width, height)
        if position is None:
            logger.debug(f"Ignoring pointer input on {surface} with bounds {width}x{height}")
            return None
        return self.apply_geometry_input(surface, *position)

    def apply_hex_input(self, text: str) -> Optional[HSVColor]:
        """
        Apply text typed into the hex field.

        The buffer always keeps the raw text. A complete hex color replaces
        the current color and is emitted; anything else is ignored so the
        last valid color stays on screen while the user keeps typing.

        Returns:
            The new color, or None when the text is not a valid hex color yet
        """
        self._hex_text = text
        color = parse_hex(text, allow_alpha=self.enable_alpha)
        if color is None:
            logger.debug(f"Hex input not accepted (yet): {text!r}")
            return None
        return self._commit(color, EditSource.HEX)

    def apply_channel_input(self, channel: Channel, raw: Union[str, int, float]) -> Optional[HSVColor]:
        """
        Apply a value typed into a channel field.

        RGB channels take 0-255 (rounded to whole bytes), hue takes degrees
        0-360, every other channel takes a percentage 0-100. Out-of-range
        numbers are clamped.

        Args:
            channel: The edited channel
            raw: Typed text (e.g. "128", " 50 %") or a number

        Returns:
            The new color, or None for non-numeric text or an alpha edit
            with alpha disabled
        """
        channel = Channel(channel)
        number = parse_channel_text(raw)
        if number is None:
            logger.debug(f"Rejected {channel.value} input: {raw!r}")
            return None
        if channel is Channel.ALPHA and not self.enable_alpha:
            logger.debug("Ignoring alpha channel input: alpha is disabled")
            return None

        number = min(max(number, 0.0), channel.max_value)
        if channel in (Channel.RED, Channel.GREEN, Channel.BLUE):
            number = float(round(number))

        update = position_to_update(channel.surface, number / channel.max_value, 0.0, self._hsv)
        return self._commit(update.apply(self._hsv), EditSource.CHANNEL)

    def set_color(
        self, color: Union[HSVColor, Color], source: EditSource = EditSource.EXTERNAL
    ) -> HSVColor:
        """
        Replace the current color (initial value from the host, history pick).

        Args:
            color: New color; a plain Color keeps the current hue if it is grey
            source: Edit source tag

        Returns:
            The new canonical color
        """
        return self._commit(self._admit(color, hue=self._hsv.hue), source)

    def sync_hex_buffer(self) -> str:
        """
        Overwrite the hex buffer with the current color.

        Call when the hex field loses focus so half-typed text is replaced.
        """
        self._hex_text = self._hex_value
        return self._hex_text

    # =================================================================
    # Internals
    # =================================================================

    def _admit(self, color: Union[HSVColor, Color], hue: Optional[float] = None) -> HSVColor:
        """Normalise incoming colors and apply the alpha policy.

        A plain grey `Color` takes `hue`, so markers do not jump.
        """
        if isinstance(color, Color):
            color = from_color(color, hue=hue)
        if not self.enable_alpha and color.alpha != 1.0:
            color = color.with_channels(alpha=1.0)
        return color

    def _refresh_views(self) -> None:
        self._color = to_color(self._hsv)
        self._rgb = to_rgb(self._hsv)
        self._hsl = to_hsl(self._hsv)
        self._hex_value = format_hex(self._hsv, include_alpha=self.enable_alpha)

    def _commit(self, color: HSVColor, source: EditSource) -> HSVColor:
        self._hsv = check_invariants(color)
        self._refresh_views()
        if source is not EditSource.HEX:
            self._hex_text = self._hex_value
        self._notify_observers()
        logger.debug(f"Applied {source.value} edit: {self._hex_value}")
        return self._hsv
