"""Color value models.

Three frozen pydantic models describe a color:

- `Color`: plain 8-bit RGBA, strictly validated. This is what the picker
  hands to "color changed" callbacks.
- `HSVColor`: the canonical value the picker stores. Construction never
  rejects out-of-range numbers: hue wraps modulo 360 and every other channel
  clamps to [0, 1], because values arrive from live pointer drags.
- `HSLColor`: the HSL view, with the same clamping rules.

Conversions between them live in `huepicker.colors.conversions`.
"""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def clamp_unit(value: float) -> float:
    """Clamp a channel to [0, 1]."""
    return min(max(float(value), 0.0), 1.0)


def wrap_hue(hue: float) -> float:
    """Wrap a hue in degrees into [0, 360)."""
    hue = math.fmod(float(hue), 360.0)
    if hue < 0.0:
        hue += 360.0
    # -1e-20 + 360.0 rounds back up to 360.0
    if hue >= 360.0:
        hue = 0.0
    return hue


class Color(BaseModel):
    """Standard 8-bit RGBA color.

    Frozen, so colors compare and hash by value.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")
    a: int = Field(default=255, ge=0, le=255, description="Alpha (0-255, 255 = opaque)")

    @classmethod
    def off(cls) -> "Color":
        """Create opaque black."""
        return cls(r=0, g=0, b=0)

    @property
    def opacity(self) -> float:
        """Alpha as a fraction in [0, 1]."""
        return self.a / 255

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_rgba_tuple(self) -> tuple[int, int, int, int]:
        """Convert to RGBA tuple."""
        return (self.r, self.g, self.b, self.a)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000').

        Alpha is ignored; use `huepicker.colors.format_hex` for ARGB text.

        Example:
            >>> Color(r=255, g=0, b=0).to_hex()
            '#FF0000'
        """
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def with_alpha(self, a: int) -> "Color":
        """Copy of this color with a different alpha byte."""
        return Color(r=self.r, g=self.g, b=self.b, a=a)


class HSVColor(BaseModel):
    """Canonical picker color: alpha, hue, saturation and value.

    Attributes:
        alpha: Opacity, 0.0 transparent to 1.0 opaque
        hue: Degrees in [0, 360)
        saturation: 0.0 (grey) to 1.0
        value: Brightness, 0.0 (black) to 1.0

    Example:
        >>> HSVColor(hue=-30, saturation=1.4, value=0.5).hue
        330.0
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    alpha: float = 1.0
    hue: float = 0.0
    saturation: float = 0.0
    value: float = 0.0

    @field_validator("hue")
    @classmethod
    def wrap_hue_degrees(cls, v: float) -> float:
        return wrap_hue(v)

    @field_validator("alpha", "saturation", "value")
    @classmethod
    def clamp_channels(cls, v: float) -> float:
        return clamp_unit(v)

    @property
    def is_achromatic(self) -> bool:
        """True when hue carries no visual information."""
        return self.saturation == 0.0 or self.value == 0.0

    def with_channels(self, **changes: Any) -> "HSVColor":
        """Copy with some channels replaced; the result is re-clamped."""
        return HSVColor(**{**self.model_dump(), **changes})

    def to_color(self) -> Color:
        """Quantise to an 8-bit `Color`."""
        from huepicker.colors.conversions import to_color

        return to_color(self)


class HSLColor(BaseModel):
    """HSL view of a color. Derived from an HSVColor, never stored by the picker."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    alpha: float = 1.0
    hue: float = 0.0
    saturation: float = 0.0
    lightness: float = 0.0

    @field_validator("hue")
    @classmethod
    def wrap_hue_degrees(cls, v: float) -> float:
        return wrap_hue(v)

    @field_validator("alpha", "saturation", "lightness")
    @classmethod
    def clamp_channels(cls, v: float) -> float:
        return clamp_unit(v)

    def with_channels(self, **changes: Any) -> "HSLColor":
        """Copy with some channels replaced; the result is re-clamped."""
        return HSLColor(**{**self.model_dump(), **changes})
