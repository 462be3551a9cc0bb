"""Protocol definitions for observers and edit sources.

- Events: EditSource, the tag every controller edit carries
- Observers: Protocols for components that react to color changes
"""

from .events import EditSource
from .observers import ColorObserver, HsvColorObserver

__all__ = [
    # Events
    "EditSource",
    # Observers
    "ColorObserver",
    "HsvColorObserver",
]
