"""Display strings for channel fields and color labels."""

import math

from huepicker.colors.conversions import to_hsl, to_rgb
from huepicker.colors.hex import format_hex
from huepicker.models.color import HSVColor
from huepicker.models.enums import ColorLabelType, ColorModel, Surface

_TRACK_LABELS = {
    Surface.HUE: "H",
    Surface.SATURATION: "S",
    Surface.SATURATION_HSL: "S",
    Surface.VALUE: "V",
    Surface.LIGHTNESS: "L",
    Surface.RED: "R",
    Surface.GREEN: "G",
    Surface.BLUE: "B",
    Surface.ALPHA: "A",
}


def _round(x: float) -> int:
    # Round half up; Python's round() rounds half to even
    return int(math.floor(x + 0.5))


def _percent(fraction: float) -> str:
    return str(_round(fraction * 100))


def channel_values(
    color: HSVColor, color_model: ColorModel, enable_alpha: bool = True
) -> list[str]:
    """
    Values shown next to the slider-only picker's tracks.

    RGB channels are bytes, hue is whole degrees, every other channel
    (alpha included) is a whole percentage.

    Example:
        >>> channel_values(from_rgb(255, 128, 0, 128), ColorModel.RGB)
        ['255', '128', '0', '50']
    """
    if color_model is ColorModel.RGB:
        r, g, b, _ = to_rgb(color)
        values = [str(r), str(g), str(b)]
    elif color_model is ColorModel.HSV:
        values = [str(_round(color.hue) % 360), _percent(color.saturation), _percent(color.value)]
    else:
        hsl = to_hsl(color)
        values = [str(_round(hsl.hue) % 360), _percent(hsl.saturation), _percent(hsl.lightness)]

    if enable_alpha:
        values.append(_percent(color.alpha))
    return values


def color_label(
    color: HSVColor, label_type: ColorLabelType, enable_alpha: bool = True
) -> dict[str, str]:
    """
    Channel name -> display string for a read-only color label.

    Hue of 360 after rounding is shown as 0 so the label agrees with the
    hue track.
    """
    if label_type is ColorLabelType.HEX:
        return {"Hex": "#" + format_hex(color, include_alpha=enable_alpha)}

    if label_type is ColorLabelType.RGB:
        r, g, b, a = to_rgb(color)
        label = {"R": str(r), "G": str(g), "B": str(b)}
        if enable_alpha:
            label["A"] = str(a)
        return label

    if label_type is ColorLabelType.HSV:
        label = {
            "H": f"{_round(color.hue) % 360}\N{DEGREE SIGN}",
            "S": f"{_percent(color.saturation)}%",
            "V": f"{_percent(color.value)}%",
        }
    else:
        hsl = to_hsl(color)
        label = {
            "H": f"{_round(hsl.hue) % 360}\N{DEGREE SIGN}",
            "S": f"{_percent(hsl.saturation)}%",
            "L": f"{_percent(hsl.lightness)}%",
        }
    if enable_alpha:
        label["A"] = f"{_percent(color.alpha)}%"
    return label


def track_label(surface: Surface) -> str:
    """
    One-letter caption for a track.

    Raises:
        ValueError: If `surface` is an area, not a track
    """
    try:
        return _TRACK_LABELS[Surface(surface)]
    except KeyError:
        raise ValueError(f"{surface} is not a track") from None
