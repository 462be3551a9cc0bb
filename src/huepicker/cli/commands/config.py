"""Config command implementations."""

import click

from huepicker.models import PickerConfig

from ..common import config_path, exit_with_error, load_config


@click.group(name="config")
def config():
    """Show or create the picker configuration."""


@config.command(name="show")
@click.pass_context
def show(ctx):
    """Print the configuration (defaults when no file exists)."""
    path = config_path(ctx)
    picker_config = load_config(ctx)

    source = str(path) if path.exists() else f"{path} (not found, using defaults)"
    click.echo(f"Config: {source}\n")
    for field, value in picker_config.model_dump(mode="json").items():
        click.echo(f"  {field}: {value}")


@config.command(name="init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file (a .bak is kept)")
@click.pass_context
def init(ctx, force: bool):
    """Write a config file with default values."""
    path = config_path(ctx)
    if path.exists() and not force:
        exit_with_error(
            f"Config file already exists: {path}",
            "Use 'huepicker config init --force' to overwrite it",
        )

    PickerConfig().save(path)
    click.echo(f"Wrote default config to {path}")
