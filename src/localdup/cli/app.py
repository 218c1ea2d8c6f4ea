"""Main CLI application."""

import typer
from pydantic import ValidationError

from ..common.logging import setup_logging
from ..config.settings import get_settings
from .config_cmd import config_app
from .formatters import print_error
from .scan_cmd import scan

app = typer.Typer(
    name="localdup",
    help="Find duplicate files in a directory by content",
    add_completion=False,
)

# Register subcommands
app.add_typer(config_app, name="config")

# Add main commands
app.command(name="scan")(scan)


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Local duplicate file finder."""
    try:
        settings = get_settings()
    except ValidationError as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)

    log_level = "DEBUG" if debug else settings.log_level
    setup_logging(level=log_level, log_file=settings.log_file)
