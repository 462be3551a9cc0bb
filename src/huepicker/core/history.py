"""In-session color history."""

import logging
from typing import TYPE_CHECKING, Callable, Optional

from huepicker.models import Color, PickerConfig
from huepicker.protocols import EditSource

if TYPE_CHECKING:
    from huepicker.core.controller import PickerController

logger = logging.getLogger(__name__)


class ColorHistory:
    """
    Recently picked colors, oldest first.

    Register as an observer on a PickerController; every emitted color is
    appended. A color already in the history moves to the end instead of
    appearing twice. The history lives in memory only.

    Example:
        >>> history = ColorHistory(max_size=8)
        >>> controller.register_observer(history)
        >>> controller.apply_hex_input("00FF00")
        >>> history.colors[-1].to_hex()
        '#00FF00'
    """

    def __init__(
        self,
        max_size: int = 16,
        on_history_changed: Optional[Callable[[list[Color]], None]] = None,
    ):
        if max_size < 0:
            raise ValueError(f"max_size must be >= 0, got {max_size}")
        self.max_size = max_size
        self.on_history_changed = on_history_changed
        self._colors: list[Color] = []

    @classmethod
    def from_config(
        cls,
        config: PickerConfig,
        on_history_changed: Optional[Callable[[list[Color]], None]] = None,
    ) -> "ColorHistory":
        """History sized by `config.history_size` (0 keeps nothing)."""
        return cls(max_size=config.history_size, on_history_changed=on_history_changed)

    @property
    def colors(self) -> list[Color]:
        """Copy of the history, oldest first."""
        return list(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def on_color_changed(self, color: Color) -> None:
        """Record an emitted color."""
        if self.max_size == 0:
            return
        if self._colors and self._colors[-1] == color:
            return

        if color in self._colors:
            self._colors.remove(color)
        self._colors.append(color)
        del self._colors[: -self.max_size]
        self._changed()

    def clear(self) -> None:
        """Forget every color."""
        if self._colors:
            self._colors.clear()
            self._changed()

    def pick(self, index: int, controller: "PickerController") -> Color:
        """
        Re-apply a history entry to a controller.

        Args:
            index: Position in `colors` (negative indexes count from newest)
            controller: Controller to update

        Raises:
            IndexError: If there is no entry at `index`
        """
        color = self._colors[index]
        controller.set_color(color, source=EditSource.HISTORY)
        return color

    def _changed(self) -> None:
        logger.debug(f"History now holds {len(self._colors)} colors")
        if self.on_history_changed is not None:
            self.on_history_changed(self.colors)
