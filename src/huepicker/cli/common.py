"""Helpers shared by CLI commands."""

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from huepicker.colors import COLORS, resolve_color
from huepicker.core import PickerController, color_label
from huepicker.exceptions import ConfigurationError, format_error_for_display
from huepicker.models import ColorLabelType, HSVColor, PickerConfig
from huepicker.models.config import DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


def config_path(ctx: click.Context) -> Path:
    """Config file path chosen with --config, or the default."""
    return ctx.obj.get("config_path") or DEFAULT_CONFIG_PATH


def load_config(ctx: click.Context) -> PickerConfig:
    """Load the config for a command, exiting with a hint when it is broken."""
    path = config_path(ctx)
    try:
        return PickerConfig.load_or_default(path)
    except ConfigurationError as e:
        logger.error(f"Failed to load config from {path}: {e.get_full_message()}")
        show_error(e)


def show_error(error: Exception) -> NoReturn:
    """Print an error with its recovery hint and exit with code 1."""
    user_message, recovery_hint = format_error_for_display(error)
    exit_with_error(user_message, recovery_hint)


def exit_with_error(message: str, hint: Optional[str] = None) -> NoReturn:
    click.echo(f"ERROR: {message}", err=True)
    if hint:
        click.echo(f"\n{hint}", err=True)
    sys.exit(1)


def make_controller(config: PickerConfig, start: Optional[str]) -> PickerController:
    """Controller starting from `start` (hex or preset name) or the configured color."""
    if start is None:
        return PickerController(config)

    color = resolve_color(start, allow_alpha=config.enable_alpha)
    if color is None:
        exit_with_error(
            f"'{start}' is not a hex color or preset name",
            f"Use 3, 6 or 8 hex digits, or one of: {', '.join(COLORS.names())}",
        )
    return PickerController(config, color=color)


def echo_color(color: HSVColor, enable_alpha: bool) -> None:
    """Print the color in every label format."""
    for label_type in ColorLabelType:
        label = color_label(color, label_type, enable_alpha)
        if label_type is ColorLabelType.HEX:
            text = label["Hex"]
        else:
            text = "  ".join(f"{name}={value}" for name, value in label.items())
        click.echo(f"{label_type.value.upper():<4} {text}")
