"""Edit sources for picker mutations.

Every edit the controller applies is tagged with where it came from. The tag
decides whether the hex text buffer is rewritten after the edit: an edit
that came from the buffer itself must not overwrite what the user is typing.
"""

from enum import Enum


class EditSource(Enum):
    """Origin of a color edit."""

    GEOMETRY = "geometry"    # Pointer on an area, wheel or track
    HEX = "hex"              # Hex text buffer
    CHANNEL = "channel"      # Discrete numeric channel field
    EXTERNAL = "external"    # Host application set the color
    HISTORY = "history"      # A color picked from the in-session history
