"""Main entry point for huepicker."""

from huepicker.cli.main import cli

if __name__ == "__main__":
    cli()
