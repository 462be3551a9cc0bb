"""CLI commands for huepicker."""

from .color import channel, convert, pick, sliders
from .config import config

__all__ = ["channel", "config", "convert", "pick", "sliders"]
