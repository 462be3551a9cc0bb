"""Observer protocol definitions for color changes.

- ColorObserver: receives the plain 8-bit color after every edit
- HsvColorObserver: optionally also receives the canonical HSV value
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from huepicker.models import Color, HSVColor


@runtime_checkable
class ColorObserver(Protocol):
    """
    Observer that receives the updated color whenever it changes.

    This is the picker's main outbound interface; a color history, a
    preview swatch or the host application's model all implement it.
    """

    def on_color_changed(self, color: "Color") -> None:
        """
        Handle a color change.

        Args:
            color: The new color, quantised to 8-bit RGBA

        Error Handling:
            Exceptions raised here are caught and logged by the controller.
            They do not undo the edit or stop other observers.
        """
        ...


@runtime_checkable
class HsvColorObserver(Protocol):
    """
    Observer that receives the full canonical value.

    Unlike the 8-bit color, the HSV value keeps the hue of grey colors and
    the saturation of black, which a UI needs to keep markers steady.
    """

    def on_hsv_color_changed(self, color: "HSVColor") -> None:
        """
        Handle a change of the canonical color.

        Args:
            color: The new canonical value (called after on_color_changed)
        """
        ...
