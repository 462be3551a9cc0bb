"""Color conversions, hex text and named presets.

## Representations

### 1. Canonical HSV (`HSVColor`)
**Purpose**: The single value a picker stores
**Used by**: PickerController, geometry mapping

### 2. 8-bit RGBA (`Color`)
**Purpose**: What the host application receives when the color changes
**Conversion**: `to_color(hsv)` / `from_color(color)`, rounding half up

### 3. HSL (`HSLColor`)
**Purpose**: Derived view for HSL sliders and labels
**Conversion**: `to_hsl(hsv)` / `from_hsl(hsl)`, exact up to floating point

### 4. Hex text
**Purpose**: Editable text field
**Conversion**: `parse_hex(text)` / `format_hex(hsv)`

## Usage

```python
from huepicker.colors import COLORS, format_hex, parse_hex, to_hsl

color = parse_hex("#FF8000")
format_hex(color)                  # 'FF8000'
to_hsl(color).lightness            # 0.5
resolve_color("orange") == color   # True, presets are looked up by name
```
"""

from typing import Optional

from huepicker.colors.conversions import (
    check_invariants,
    from_color,
    from_hsl,
    from_rgb,
    from_rgb_unit,
    to_color,
    to_hsl,
    to_rgb,
    to_rgb_unit,
)
from huepicker.colors.hex import VALID_HEX_PATTERN, format_hex, is_valid_hex, parse_hex
from huepicker.models.color import Color, HSVColor


class COLORS:
    """Named 8-bit presets, used as starting colors by the CLI and tests."""

    # ============================================================================
    # PRIMARY AND SECONDARY COLORS (full saturation)
    # ============================================================================

    RED: Color = Color(r=255, g=0, b=0)
    GREEN: Color = Color(r=0, g=255, b=0)
    BLUE: Color = Color(r=0, g=0, b=255)
    YELLOW: Color = Color(r=255, g=255, b=0)
    MAGENTA: Color = Color(r=255, g=0, b=255)
    CYAN: Color = Color(r=0, g=255, b=255)
    ORANGE: Color = Color(r=255, g=128, b=0)
    PURPLE: Color = Color(r=128, g=0, b=255)
    PINK: Color = Color(r=255, g=0, b=128)

    # ============================================================================
    # ACHROMATIC (hue is meaningless, reported as 0)
    # ============================================================================

    WHITE: Color = Color(r=255, g=255, b=255)
    GREY: Color = Color(r=128, g=128, b=128)
    BLACK: Color = Color(r=0, g=0, b=0)
    TRANSPARENT: Color = Color(r=0, g=0, b=0, a=0)

    @classmethod
    def names(cls) -> list[str]:
        """Lower-case preset names."""
        return sorted(
            name.lower()
            for name, value in vars(cls).items()
            if isinstance(value, Color)
        )

    @classmethod
    def get(cls, name: str) -> Optional[Color]:
        """Look up a preset by case-insensitive name."""
        value = getattr(cls, name.strip().upper(), None)
        return value if isinstance(value, Color) else None


def resolve_color(text: str, allow_alpha: bool = True) -> Optional[HSVColor]:
    """
    Resolve a preset name or hex text to a color.

    Returns:
        The color, or None when `text` is neither a preset nor valid hex
    """
    preset = COLORS.get(text)
    if preset is not None:
        color = from_color(preset)
        return color if allow_alpha else color.with_channels(alpha=1.0)
    return parse_hex(text, allow_alpha=allow_alpha)


__all__ = [
    "COLORS",
    "VALID_HEX_PATTERN",
    "check_invariants",
    "format_hex",
    "from_color",
    "from_hsl",
    "from_rgb",
    "from_rgb_unit",
    "is_valid_hex",
    "parse_hex",
    "resolve_color",
    "to_color",
    "to_hsl",
    "to_rgb",
    "to_rgb_unit",
]
