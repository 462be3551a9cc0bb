"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from huepicker import __version__

from .commands import channel, config, convert, pick, sliders

logger = logging.getLogger(__name__)

_HANDLER_NAME = "huepicker-cli"


def setup_logging(verbose: int, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        log_file: Log to this file instead of stderr (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    # Determine log level based on flags
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_file:
        # Explicit log level wins for file logging
        level = getattr(logging, log_level.upper())
        log_file.parent.mkdir(parents=True, exist_ok=True)

        # Rotating file handler (keeps last 5 files, max 10MB each)
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5
        )
    else:
        # Command output goes to stdout, so logs go to stderr
        handler = logging.StreamHandler()

    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for existing in [h for h in root_logger.handlers if h.get_name() == _HANDLER_NAME]:
        root_logger.removeHandler(existing)
        existing.close()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file or 'stderr'}")


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="huepicker")
@click.option(
    '--config',
    'config_file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file path (default: ~/.huepicker/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Log to this file instead of stderr'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(ctx, config_file: Optional[Path], verbose: int, log_file: Optional[Path], log_level: str):
    """
    Huepicker - interactive color selection from the command line.

    Colors are given as 3, 6 or 8 digit hex (8 digits are AARRGGBB, '#'
    optional) or as a preset name such as 'orange'.

    \b
    Examples:
      # Show a color in every format
      huepicker convert "#FF8000"

      # Click the top-right corner of the saturation/value area
      huepicker pick hsv_saturation_value 1 0 --from blue

      # Type 50% into the lightness field
      huepicker channel lightness 50% --from red

      # Slider values for the HSL model
      huepicker sliders --model hsl --from orange

      # Write a default config file
      huepicker config init
    """
    setup_logging(verbose, log_file, log_level)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_file


cli.add_command(convert)
cli.add_command(pick)
cli.add_command(channel)
cli.add_command(sliders)
cli.add_command(config)

if __name__ == "__main__":
    cli()
