"""Generic utility modules for huepicker.

- observer: ObserverManager, the observer registry used by the controller
- persistence: PydanticPersistence, JSON load/save for configuration
"""

from .observer import ObserverManager
from .persistence import PydanticPersistence

__all__ = ["ObserverManager", "PydanticPersistence"]
