"""Color command implementations."""

import math
from typing import Optional

import click

from huepicker.core import parse_channel_text, track_label
from huepicker.models import Channel, ColorModel, Surface

from ..common import echo_color, exit_with_error, load_config, make_controller

FROM_HELP = "Starting color as hex or preset name (default: configured initial_color)"


@click.command()
@click.argument("color")
@click.pass_context
def convert(ctx, color: str):
    """Show COLOR (hex or preset name) as hex, RGB, HSV and HSL."""
    config = load_config(ctx)
    controller = make_controller(config, color)
    echo_color(controller.hsv, config.enable_alpha)


@click.command()
@click.argument("surface", type=click.Choice([s.value for s in Surface], case_sensitive=False))
@click.argument("x", type=float)
@click.argument("y", type=float)
@click.option("--from", "start", type=str, default=None, help=FROM_HELP)
@click.pass_context
def pick(ctx, surface: str, x: float, y: float, start: Optional[str]):
    """
    Apply a pointer position on SURFACE.

    X and Y are normalised to the surface bounds (0-1, origin top-left).
    Tracks ignore Y.

    \b
    Examples:
      huepicker pick hsv_saturation_value 1 0 --from red
      huepicker pick hue_wheel 0.5 0 --from white
    """
    config = load_config(ctx)
    controller = make_controller(config, start)
    surface = Surface(surface.lower())

    if not (math.isfinite(x) and math.isfinite(y)):
        exit_with_error(f"Position must be finite, got x={x} y={y}", "Use numbers between 0 and 1")
    if controller.apply_geometry_input(surface, x, y) is None:
        exit_with_error(
            "Alpha is disabled in the configuration",
            "Set enable_alpha to true in the config file to use the alpha track",
        )

    echo_color(controller.hsv, config.enable_alpha)
    marker_x, marker_y = controller.marker_position(surface)
    click.echo(f"Marker: x={marker_x:.3f} y={marker_y:.3f}")


@click.command()
@click.argument("channel", type=click.Choice([c.value for c in Channel], case_sensitive=False))
@click.argument("value")
@click.option("--from", "start", type=str, default=None, help=FROM_HELP)
@click.pass_context
def channel(ctx, channel: str, value: str, start: Optional[str]):
    """
    Set one CHANNEL to VALUE.

    RGB channels take 0-255, hue takes degrees 0-360, every other channel
    takes a percentage 0-100. Out-of-range values are clamped.
    """
    config = load_config(ctx)
    controller = make_controller(config, start)
    channel = Channel(channel.lower())

    if parse_channel_text(value) is None:
        exit_with_error(f"'{value}' is not a number")
    if controller.apply_channel_input(channel, value) is None:
        exit_with_error(
            "Alpha is disabled in the configuration",
            "Set enable_alpha to true in the config file to edit alpha",
        )

    echo_color(controller.hsv, config.enable_alpha)


@click.command()
@click.option(
    "--model",
    type=click.Choice([m.value for m in ColorModel], case_sensitive=False),
    default=None,
    help="Color model (default: configured color_model)",
)
@click.option("--from", "start", type=str, default=None, help=FROM_HELP)
@click.pass_context
def sliders(ctx, model: Optional[str], start: Optional[str]):
    """Show the slider captions and values for a color model."""
    config = load_config(ctx)
    if model is not None:
        config = config.model_copy(update={"color_model": ColorModel(model.lower())})
    controller = make_controller(config, start)

    for track, value in zip(controller.slider_tracks, controller.channel_labels()):
        click.echo(f"{track_label(track)}: {value}")

    palette = config.palette_type
    track = palette.track.value if palette.track else "none"
    click.echo(f"Palette: {palette.value} (area={palette.area.value}, track={track})")
