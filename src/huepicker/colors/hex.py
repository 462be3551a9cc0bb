"""Hexadecimal color text.

Accepted input, with an optional leading `#`:

* RGB       - each nibble doubled, opaque
* RRGGBB    - opaque
* AARRGGBB  - alpha first

Digits are ASCII 0-9 and A-F in either case. Anything else is rejected by
returning None, never by raising: text arrives one keystroke at a time and
is expected to be invalid most of the time while the user types.

Reference: https://en.wikipedia.org/wiki/Web_colors#Hex_triplet
"""

import re
from typing import Optional

from huepicker.colors.conversions import from_rgb, to_rgb
from huepicker.models.color import HSVColor

# Character filter a text field can apply per keystroke
VALID_HEX_PATTERN = r"[0-9a-fA-F]*"

_HEX_RE = re.compile(r"#?(?P<digits>[0-9a-fA-F]{8}|[0-9a-fA-F]{6}|[0-9a-fA-F]{3})")


def is_valid_hex(text: str) -> bool:
    """True when `text` is a complete 3, 6 or 8 digit hex color."""
    return isinstance(text, str) and _HEX_RE.fullmatch(text) is not None


def parse_hex(text: str, allow_alpha: bool = True) -> Optional[HSVColor]:
    """
    Parse hex text into a color.

    Args:
        text: Raw text, e.g. 'F00', '#ff0000' or '80FF0000'
        allow_alpha: When False, alpha from an 8-digit input is discarded
            and the color is forced opaque (the input is still accepted)

    Returns:
        The color, or None when the text is not a complete hex color
    """
    if not isinstance(text, str):
        return None
    match = _HEX_RE.fullmatch(text)
    if match is None:
        return None

    digits = match.group("digits")
    if len(digits) == 3:
        digits = "".join(nibble * 2 for nibble in digits)
    if len(digits) == 6:
        digits = "FF" + digits

    argb = int(digits, 16)
    a = (argb >> 24) & 0xFF
    r = (argb >> 16) & 0xFF
    g = (argb >> 8) & 0xFF
    b = argb & 0xFF

    if not allow_alpha:
        a = 0xFF

    return from_rgb(r, g, b, a)


def format_hex(color: HSVColor, include_alpha: bool = False) -> str:
    """
    Format a color as upper-case hex digits without a leading `#`.

    Example:
        >>> format_hex(from_rgb(255, 128, 0, 128), include_alpha=True)
        '80FF8000'
    """
    r, g, b, a = to_rgb(color)
    if include_alpha:
        return f"{a:02X}{r:02X}{g:02X}{b:02X}"
    return f"{r:02X}{g:02X}{b:02X}"
